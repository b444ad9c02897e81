"""Exceptions raised by the color management core."""

from __future__ import annotations

from typing import Any

from cms_decode.core.types import ColorSpaceKind, Slot


class ColorManagementError(Exception):
    """Base class for every error the core reports to its caller."""


class ProfileLoadError(ColorManagementError):
    """Profile source is unreadable, truncated or not an ICC profile."""

    def __init__(self, source: Any, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f'Cannot load ICC profile from {source}: {reason}')


class ColorSpaceMismatchError(ColorManagementError):
    """Profile's device color space does not fit the target slot."""

    def __init__(self, slot: Slot | None, actual: ColorSpaceKind, message: str | None = None):
        self.slot = slot
        self.actual = actual
        if message is None:
            expected = slot.color_space.name if slot is not None else '?'
            message = f'Slot {slot.value if slot else "?"} requires a {expected} profile, got {actual.name}'
        super().__init__(message)


class ProfileReleasedError(ColorManagementError):
    """Engine handle of a released profile was used."""
