"""Finalizing a draft configuration for the decoding pipeline.

A disabled draft finalizes to None: consumers never see a switched-off
configuration that still carries profiles or transforms. An enabled draft is
returned as-is with its scalar fields coerced to canonical types.
"""

from __future__ import annotations

from typing import Any

from cms_decode.core.configuration import ColorManagementConfiguration
from cms_decode.core.types import RenderingIntent

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def finalize(draft: ColorManagementConfiguration) -> ColorManagementConfiguration | None:
    """Return the canonical configuration, or None when color management is off."""
    if not isinstance(draft, ColorManagementConfiguration):
        raise TypeError(f'Expected ColorManagementConfiguration, got {type(draft).__name__}')
    if not normalize_flag(draft.enabled, 'enabled'):
        return None

    use_embedded = normalize_flag(draft.use_embedded_input_profile, 'use_embedded_input_profile')
    black_point = normalize_flag(draft.use_black_point_compensation, 'use_black_point_compensation')
    intent = normalize_intent(draft.rendering_intent)

    # all fields validated; a failure above leaves the draft untouched
    draft.enabled = True
    draft.use_embedded_input_profile = use_embedded
    draft.use_black_point_compensation = black_point
    draft.rendering_intent = intent
    return draft


def normalize_flag(value: Any, name: str = 'flag') -> bool:
    """Coerce bool, 0/1 or yes/no style strings to bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ValueError(f'Invalid value for {name}: {value!r}')


def normalize_intent(value: Any) -> RenderingIntent:
    """Coerce an intent enum, name or ICC intent number to RenderingIntent."""
    if isinstance(value, RenderingIntent):
        return value
    if isinstance(value, bool):
        raise ValueError(f'Invalid rendering intent: {value!r}')
    if isinstance(value, int):
        # also covers PIL.ImageCms.Intent, an IntEnum
        return RenderingIntent.from_icc_value(int(value))
    if isinstance(value, str):
        key = value.strip().lower().replace('-', '_').replace(' ', '_')
        if key.isdigit():
            return RenderingIntent.from_icc_value(int(key))
        for intent in RenderingIntent:
            if key in (intent.value, intent.value.replace('_', ''), intent.name.lower()):
                return intent
    raise ValueError(f'Invalid rendering intent: {value!r}')

