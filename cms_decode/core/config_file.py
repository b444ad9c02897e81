"""JSON configuration files.

Shape:

    {
      "enabled": true,
      "use_embedded_input_profile": "yes",
      "use_black_point_compensation": false,
      "rendering_intent": "perceptual",
      "profiles": {"input_cmyk": "profiles/DefaultCMYK.icc", "output_rgb": "sRGB.icc"},
      "transforms": [{"name": "invert", "options": {}}]
    }

Profile paths are relative to the configuration file. Scalar values are kept
raw; finalize() normalizes them.
"""

from __future__ import annotations

import json
import os
from typing import Any

from cms_decode.core.configuration import ColorManagementConfiguration
from cms_decode.core.errors import ColorManagementError
from cms_decode.core.profile import load
from cms_decode.core.transforms import TransformChain
from cms_decode.core.types import ColorSpaceTransform, RenderingIntent, Slot

_SCALARS = ('enabled', 'use_embedded_input_profile', 'use_black_point_compensation', 'rendering_intent')


def parse_config_file(path: str) -> ColorManagementConfiguration:
    """Parse a configuration file from disk, loading its profiles."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    return parse_config_dict(data, base_dir=os.path.dirname(os.path.abspath(path)))


def parse_config_dict(data: dict[str, Any], base_dir: str = '.') -> ColorManagementConfiguration:
    """Build a draft configuration from its dict form.

    On any profile error the profiles loaded so far are released before the
    error propagates.
    """
    if not isinstance(data, dict):
        raise ValueError(f'Configuration must be a JSON object, got {type(data).__name__}')
    unknown = set(data) - set(_SCALARS) - {'profiles', 'transforms'}
    if unknown:
        raise ValueError(f'Unknown configuration keys: {", ".join(sorted(unknown))}')

    config = ColorManagementConfiguration()
    for key in _SCALARS:
        if key in data:
            setattr(config, key, data[key])

    config.transforms = TransformChain(_parse_transform(t) for t in data.get('transforms', []))

    profiles = data.get('profiles', {})
    if not isinstance(profiles, dict):
        raise ValueError('"profiles" must be an object mapping slot names to paths')
    try:
        for key, rel_path in profiles.items():
            slot = _parse_slot(key)
            if rel_path is None:
                continue
            if not isinstance(rel_path, str):
                raise ValueError(f'Profile path for {key} must be a string, got {rel_path!r}')
            profile = load(os.path.join(base_dir, rel_path))
            try:
                config.profiles.assign(slot, profile)
            except ColorManagementError:
                profile.release()
                raise
    except (ColorManagementError, ValueError):
        config.close()
        raise
    return config


def to_dict(config: ColorManagementConfiguration | None) -> dict[str, Any] | None:
    """Serializable shape of a configuration; None stays None."""
    if config is None:
        return None
    intent = config.rendering_intent
    return {
        'enabled': config.enabled,
        'use_embedded_input_profile': config.use_embedded_input_profile,
        'use_black_point_compensation': config.use_black_point_compensation,
        'rendering_intent': intent.value if isinstance(intent, RenderingIntent) else intent,
        'profiles': {slot.value: (p.source if p is not None else None) for slot, p in config.profiles.items()},
        'transforms': [{'name': t.name, 'options': dict(t.options)} for t in config.transforms],
    }


def _parse_slot(key: str) -> Slot:
    try:
        return Slot(key)
    except ValueError:
        names = ', '.join(s.value for s in Slot)
        raise ValueError(f'Unknown profile slot {key!r}. Available: {names}') from None


def _parse_transform(item: Any) -> ColorSpaceTransform:
    if isinstance(item, str):
        return ColorSpaceTransform(item)
    if not isinstance(item, dict) or 'name' not in item:
        raise ValueError(f'Transform must be a name or an object with "name", got {item!r}')
    return ColorSpaceTransform(item['name'], dict(item.get('options') or {}))
