"""ICC profile loading.

A ColorProfile is read once from a path or binary stream and never changes
afterwards. Only the header facts the configuration needs are extracted: the
device color space and a human-readable description. Parsing and validation of
the profile body is delegated to LittleCMS through PIL.ImageCms.

load_default() searches an ordered list of directories for DefaultCMYK.icc and
is best-effort: any failure there means "no default", never an error.
"""

from __future__ import annotations

import io
import os
import struct
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO

from PIL import ImageCms

from cms_decode.core.errors import ProfileLoadError, ProfileReleasedError
from cms_decode.core.types import ColorSpaceKind

DEFAULT_CMYK_PROFILE = 'DefaultCMYK.icc'

# ICC header layout: size at 0, color space at 16, 'acsp' magic at 36
_HEADER_SIZE = 128
_MAGIC = b'acsp'


class ColorProfile:
    """An ICC profile bound to one device color space.

    The profile is immutable; release() only drops the color engine handle.
    Metadata stays readable after release so a replaced profile can still be
    logged or inspected.
    """

    def __init__(
        self,
        data: bytes,
        device_color_space: ColorSpaceKind,
        description: str,
        source: str = '<memory>',
        engine_profile: ImageCms.ImageCmsProfile | None = None,
    ):
        self._data = bytes(data)
        self._device_color_space = device_color_space
        self._description = description
        self._source = source
        self._engine_profile = engine_profile
        self._released = False

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def device_color_space(self) -> ColorSpaceKind:
        return self._device_color_space

    @property
    def description(self) -> str:
        return self._description

    @property
    def source(self) -> str:
        return self._source

    @property
    def released(self) -> bool:
        return self._released

    @property
    def engine_profile(self) -> ImageCms.ImageCmsProfile:
        """The PIL.ImageCms handle for the color engine."""
        if self._released:
            raise ProfileReleasedError(f'Profile {self._description!r} has been released')
        if self._engine_profile is None:
            self._engine_profile = ImageCms.ImageCmsProfile(io.BytesIO(self._data))
        return self._engine_profile

    def release(self) -> None:
        """Drop the engine handle. Releasing twice is a programming error."""
        if self._released:
            raise RuntimeError(f'Profile {self._description!r} released twice')
        self._engine_profile = None
        self._released = True

    def __str__(self) -> str:
        return self._description

    def __repr__(self) -> str:
        state = ' released' if self._released else ''
        return f'<ColorProfile {self._device_color_space.name} {self._description!r}{state}>'


def load(source: str | os.PathLike | BinaryIO) -> ColorProfile:
    """Load a profile from a file path or a binary stream.

    Raises ProfileLoadError if the source cannot be read, is not a structurally
    valid ICC profile, or declares a device color space other than CMYK, RGB
    or Gray. No slot validation happens here.
    """
    data, label = _read_source(source)
    _check_header(data, label)

    try:
        engine_profile = ImageCms.ImageCmsProfile(io.BytesIO(data))
    except (OSError, ImageCms.PyCMSError) as e:
        raise ProfileLoadError(label, str(e)) from e

    signature = engine_profile.profile.xcolor_space
    kind = ColorSpaceKind.from_signature(signature)
    if kind is None:
        raise ProfileLoadError(label, f'unsupported device color space {signature.strip()!r}')

    description = (engine_profile.profile.profile_description or '').strip()
    if not description:
        description = os.path.basename(label) or label

    return ColorProfile(
        data=data,
        device_color_space=kind,
        description=description,
        source=label,
        engine_profile=engine_profile,
    )


def load_default(
    candidate_directories: Iterable[str | os.PathLike],
    filename: str = DEFAULT_CMYK_PROFILE,
) -> ColorProfile | None:
    """Return the first loadable default CMYK profile, or None.

    Directories are tried in order. Missing files, unreadable or invalid
    profiles, and profiles that are not CMYK are skipped silently.
    """
    for directory in candidate_directories:
        path = Path(directory) / filename
        if not path.is_file():
            continue
        try:
            profile = load(path)
        except ProfileLoadError:
            continue
        if profile.device_color_space is not ColorSpaceKind.CMYK:
            profile.release()
            continue
        return profile
    return None


def describe(profile: ColorProfile | None) -> str:
    """Description for display, '(none)' for an empty slot."""
    if profile is None:
        return '(none)'
    return profile.description


def _read_source(source: str | os.PathLike | BinaryIO) -> tuple[bytes, str]:
    if isinstance(source, (str, os.PathLike)):
        label = os.fspath(source)
        try:
            with open(label, 'rb') as f:
                return f.read(), label
        except OSError as e:
            raise ProfileLoadError(label, e.strerror or str(e)) from e

    if not hasattr(source, 'read'):
        raise TypeError(f'Profile source must be a path or binary stream, got {type(source).__name__}')

    label = str(getattr(source, 'name', '<stream>'))
    try:
        data = source.read()
    except OSError as e:
        raise ProfileLoadError(label, str(e)) from e
    if not isinstance(data, (bytes, bytearray)):
        raise ProfileLoadError(label, 'stream is not binary')
    return bytes(data), label


def _check_header(data: bytes, label: str) -> None:
    """Reject obviously broken containers before handing them to the engine."""
    if len(data) < _HEADER_SIZE:
        raise ProfileLoadError(label, f'truncated header ({len(data)} bytes)')
    if data[36:40] != _MAGIC:
        raise ProfileLoadError(label, 'missing ICC signature')
    (declared_size,) = struct.unpack('>I', data[:4])
    if declared_size > len(data):
        raise ProfileLoadError(label, f'truncated profile ({len(data)} of {declared_size} bytes)')
