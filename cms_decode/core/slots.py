"""Profile slot registry.

Five slots, each holding at most one ColorProfile. assign() and remove() are
the only mutation points. A profile whose device color space does not match
the slot is rejected before anything changes, so the previous occupant
survives a failed assignment. Replaced and removed profiles are released and
handed back for logging.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from cms_decode.core.errors import ColorSpaceMismatchError
from cms_decode.core.profile import ColorProfile
from cms_decode.core.types import ColorSpaceKind, Slot

_INPUT_SLOTS = {
    ColorSpaceKind.CMYK: Slot.INPUT_CMYK,
    ColorSpaceKind.RGB: Slot.INPUT_RGB,
    ColorSpaceKind.GRAY: Slot.INPUT_GRAY,
}

_OUTPUT_SLOTS = {
    ColorSpaceKind.RGB: Slot.OUTPUT_RGB,
    ColorSpaceKind.GRAY: Slot.OUTPUT_GRAY,
}


@dataclass(frozen=True)
class Assignment:
    """Outcome of try_assign(): either the released previous occupant or an error."""

    slot: Slot
    previous: ColorProfile | None = None
    error: ColorSpaceMismatchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProfileSlotRegistry:
    """Mapping of every Slot to an optional ColorProfile."""

    def __init__(self) -> None:
        self._profiles: dict[Slot, ColorProfile | None] = {slot: None for slot in Slot}

    def get(self, slot: Slot) -> ColorProfile | None:
        return self._profiles[_check_slot(slot)]

    def assign(self, slot: Slot, profile: ColorProfile) -> ColorProfile | None:
        """Bind profile to slot and return the released previous profile.

        Raises ColorSpaceMismatchError, leaving the registry unchanged, when
        the profile's device color space is not the one the slot requires.
        The rejected profile is neither retained nor released here. A profile
        already bound to another slot raises ValueError.
        """
        _check_slot(slot)
        if not isinstance(profile, ColorProfile):
            raise TypeError(f'Expected ColorProfile, got {type(profile).__name__}')
        if profile.released:
            raise ValueError(f'Cannot assign released profile {profile.description!r}')
        if profile.device_color_space is not slot.color_space:
            raise ColorSpaceMismatchError(slot, profile.device_color_space)
        if self._profiles[slot] is profile:
            return None
        for other, held in self._profiles.items():
            if held is profile:
                raise ValueError(f'Profile {profile.description!r} is already bound to {other.value}')

        previous = self._profiles[slot]
        self._profiles[slot] = profile
        if previous is not None:
            previous.release()
        return previous

    def try_assign(self, slot: Slot, profile: ColorProfile) -> Assignment:
        """assign() that reports a mismatch as a value instead of raising."""
        try:
            previous = self.assign(slot, profile)
        except ColorSpaceMismatchError as e:
            return Assignment(slot=slot, error=e)
        return Assignment(slot=slot, previous=previous)

    def assign_input(self, profile: ColorProfile) -> tuple[Slot, ColorProfile | None]:
        """Bind profile to the input slot of its own device color space."""
        slot = _INPUT_SLOTS[profile.device_color_space]
        return slot, self.assign(slot, profile)

    def assign_output(self, profile: ColorProfile) -> tuple[Slot, ColorProfile | None]:
        """Bind profile to the output slot of its own device color space.

        There is no CMYK output slot.
        """
        slot = _OUTPUT_SLOTS.get(profile.device_color_space)
        if slot is None:
            raise ColorSpaceMismatchError(
                None,
                profile.device_color_space,
                f'No output slot accepts a {profile.device_color_space.name} profile',
            )
        return slot, self.assign(slot, profile)

    def remove(self, slot: Slot) -> ColorProfile | None:
        """Empty slot and return the released previous profile, if any."""
        previous = self._profiles[_check_slot(slot)]
        if previous is None:
            return None
        self._profiles[slot] = None
        previous.release()
        return previous

    def clear(self) -> list[ColorProfile]:
        """Empty every slot; returns the released profiles."""
        return [p for p in (self.remove(slot) for slot in Slot) if p is not None]

    def items(self) -> Iterator[tuple[Slot, ColorProfile | None]]:
        for slot in Slot:
            yield slot, self._profiles[slot]

    def bound(self) -> dict[Slot, ColorProfile]:
        return {slot: p for slot, p in self._profiles.items() if p is not None}

    def __contains__(self, profile: object) -> bool:
        return any(p is profile for p in self._profiles.values())

    def __repr__(self) -> str:
        inner = ', '.join(f'{slot.value}={p!r}' for slot, p in self.items() if p is not None)
        return f'ProfileSlotRegistry({inner})'


def _check_slot(slot: Slot) -> Slot:
    if not isinstance(slot, Slot):
        raise TypeError(f'Unknown slot: {slot!r}')
    return slot
