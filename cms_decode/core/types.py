"""Shared types for cms-decode: color spaces, slots, intents, transforms, commands."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class ColorSpaceKind(enum.Enum):
    """Device color spaces a profile may be declared for.

    Values are the 4-byte ICC header signatures (space-padded).
    """

    CMYK = 'CMYK'
    RGB = 'RGB '
    GRAY = 'GRAY'

    @classmethod
    def from_signature(cls, signature: str) -> ColorSpaceKind | None:
        """Map an ICC color space signature to a kind, or None if unsupported."""
        padded = signature.ljust(4)[:4].upper()
        for kind in cls:
            if kind.value == padded:
                return kind
        return None


class Slot(enum.Enum):
    """Logical profile slots of a decode configuration."""

    INPUT_CMYK = 'input_cmyk'
    INPUT_RGB = 'input_rgb'
    INPUT_GRAY = 'input_gray'
    OUTPUT_RGB = 'output_rgb'
    OUTPUT_GRAY = 'output_gray'

    @property
    def color_space(self) -> ColorSpaceKind:
        """The only device color space this slot accepts."""
        return _SLOT_SPACES[self]


_SLOT_SPACES = {
    Slot.INPUT_CMYK: ColorSpaceKind.CMYK,
    Slot.INPUT_RGB: ColorSpaceKind.RGB,
    Slot.INPUT_GRAY: ColorSpaceKind.GRAY,
    Slot.OUTPUT_RGB: ColorSpaceKind.RGB,
    Slot.OUTPUT_GRAY: ColorSpaceKind.GRAY,
}


class RenderingIntent(enum.Enum):
    """How out-of-gamut colors are mapped during a profile conversion."""

    PERCEPTUAL = 'perceptual'
    MEDIA_RELATIVE_COLORIMETRIC = 'media_relative_colorimetric'
    SATURATION = 'saturation'
    ICC_ABSOLUTE_COLORIMETRIC = 'icc_absolute_colorimetric'

    @property
    def icc_value(self) -> int:
        """ICC intent number, as used by PIL.ImageCms.Intent."""
        return _ICC_INTENTS[self]

    @classmethod
    def from_icc_value(cls, value: int) -> RenderingIntent:
        for intent, number in _ICC_INTENTS.items():
            if number == value:
                return intent
        raise ValueError(f'Unknown ICC rendering intent: {value}')


_ICC_INTENTS = {
    RenderingIntent.PERCEPTUAL: 0,
    RenderingIntent.MEDIA_RELATIVE_COLORIMETRIC: 1,
    RenderingIntent.SATURATION: 2,
    RenderingIntent.ICC_ABSOLUTE_COLORIMETRIC: 3,
}


@dataclass(frozen=True)
class ColorSpaceTransform:
    """One opaque step of a custom transform chain.

    The color engine owns what `name` and `options` mean; here a transform is
    only a value with a position in the chain.
    """

    name: str
    options: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f'Transform name must be a non-empty string, got {self.name!r}')
        if not isinstance(self.options, dict):
            raise TypeError(f'Transform options must be a dict, got {type(self.options).__name__}')


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='show', help='Print a finalized configuration')

        @command.arguments
        def arguments(parser):
            parser.add_argument('config')

        @command.run
        def run(args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function, returning its exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args) or 0
