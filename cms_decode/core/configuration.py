"""Color management configuration and the decode settings that carry it."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from cms_decode.core.profile import ColorProfile, load_default
from cms_decode.core.slots import ProfileSlotRegistry
from cms_decode.core.transforms import TransformChain
from cms_decode.core.types import ColorSpaceKind, ColorSpaceTransform, RenderingIntent, Slot


@dataclass
class ColorManagementConfiguration:
    """Profiles, transforms and conversion policy for one decoding context.

    Scalar fields may hold raw input (strings, ints) while the configuration
    is a draft; finalize() normalizes them.
    """

    enabled: bool = True
    use_embedded_input_profile: bool = True
    use_black_point_compensation: bool = False
    rendering_intent: RenderingIntent = RenderingIntent.PERCEPTUAL
    profiles: ProfileSlotRegistry = field(default_factory=ProfileSlotRegistry)
    transforms: TransformChain = field(default_factory=TransformChain)

    @classmethod
    def create(cls, search_dirs: Iterable[str | os.PathLike] = ()) -> ColorManagementConfiguration:
        """New configuration with the default CMYK input profile, when one is found."""
        config = cls()
        default = load_default(search_dirs)
        if default is not None:
            config.profiles.assign(Slot.INPUT_CMYK, default)
        return config

    def close(self) -> list[ColorProfile]:
        """Release every bound profile; returns them for logging."""
        return self.profiles.clear()

    def pipeline_plan(
        self,
        source_space: ColorSpaceKind,
        embedded_profile: bool = False,
        result_space: ColorSpaceKind | None = None,
    ) -> PipelinePlan:
        """Describe how a decoder should convert pixels of source_space.

        result_space is the space after the transform chain; it defaults to
        Gray for Gray sources and RGB otherwise.
        """
        if result_space is None:
            result_space = ColorSpaceKind.GRAY if source_space is ColorSpaceKind.GRAY else ColorSpaceKind.RGB

        uses_embedded = bool(embedded_profile and self.use_embedded_input_profile)
        input_profile = None
        if not uses_embedded:
            input_profile = self.profiles.get(_input_slot(source_space))

        output_slot = _output_slot(result_space)
        return PipelinePlan(
            source_space=source_space,
            input_profile=input_profile,
            uses_embedded_profile=uses_embedded,
            rendering_intent=self.rendering_intent,
            black_point_compensation=self.use_black_point_compensation,
            transforms=self.transforms.steps(),
            result_space=result_space,
            output_profile=self.profiles.get(output_slot) if output_slot else None,
        )


@dataclass(frozen=True)
class PipelinePlan:
    """What a decoder applies, in order, to pixels of one source space."""

    source_space: ColorSpaceKind
    input_profile: ColorProfile | None
    uses_embedded_profile: bool
    rendering_intent: RenderingIntent
    black_point_compensation: bool
    transforms: tuple[ColorSpaceTransform, ...]
    result_space: ColorSpaceKind
    output_profile: ColorProfile | None

    @property
    def converts_input(self) -> bool:
        return self.uses_embedded_profile or self.input_profile is not None


@dataclass
class DecodingSettings:
    """Decode settings handed to the image decoding pipeline.

    color_management is None when images decode without any color transform.
    """

    color_management: ColorManagementConfiguration | None = None

    def apply(self, config: ColorManagementConfiguration | None) -> list[ColorProfile]:
        """Replace the color management value wholesale.

        A superseded configuration has its profiles released; they are returned.
        """
        previous = self.color_management
        self.color_management = config
        if previous is None or previous is config:
            return []
        return previous.close()


def _input_slot(space: ColorSpaceKind) -> Slot:
    return {
        ColorSpaceKind.CMYK: Slot.INPUT_CMYK,
        ColorSpaceKind.RGB: Slot.INPUT_RGB,
        ColorSpaceKind.GRAY: Slot.INPUT_GRAY,
    }[space]


def _output_slot(space: ColorSpaceKind) -> Slot | None:
    return {
        ColorSpaceKind.RGB: Slot.OUTPUT_RGB,
        ColorSpaceKind.GRAY: Slot.OUTPUT_GRAY,
    }.get(space)
