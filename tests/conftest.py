"""Shared fixtures: small ICC profiles built with PIL.ImageCms.

ImageCms can only create RGB/Lab/XYZ profiles; CMYK and Gray test profiles
are an sRGB profile with the header color space field rewritten.
"""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import ImageCms

from cms_decode.core.profile import ColorProfile, load

_SPACE_OFFSET = 16


def profile_bytes(space: str = 'RGB ') -> bytes:
    """Bytes of a valid ICC profile declaring the given 4-char color space."""
    if space.strip().upper() == 'LAB':
        return ImageCms.ImageCmsProfile(ImageCms.createProfile('LAB')).tobytes()
    data = bytearray(ImageCms.ImageCmsProfile(ImageCms.createProfile('sRGB')).tobytes())
    data[_SPACE_OFFSET : _SPACE_OFFSET + 4] = space.ljust(4).encode('ascii')
    return bytes(data)


@pytest.fixture
def make_profile() -> Callable[[str], ColorProfile]:
    """Load an in-memory profile for 'CMYK', 'RGB ' or 'GRAY'."""
    def _make(space: str) -> ColorProfile:
        return load(io.BytesIO(profile_bytes(space)))

    return _make


@pytest.fixture
def write_profile(tmp_path: Path) -> Callable[..., Path]:
    """Write a profile file and return its path."""

    def _write(space: str, name: str = 'profile.icc', directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_bytes(profile_bytes(space))
        return path

    return _write
