"""Report builder — text and JSON output for configurations and profiles."""

import json
from typing import Any

from cms_decode.core.config_file import to_dict
from cms_decode.core.configuration import ColorManagementConfiguration
from cms_decode.core.profile import ColorProfile, describe
from cms_decode.core.types import RenderingIntent


def format_text(config: ColorManagementConfiguration | None, source: str | None = None) -> str:
    """Format a finalized configuration as human-readable text."""
    lines = []
    header = 'cms-decode'
    if source:
        header += f': {source}'
    lines.append(header)
    lines.append('')

    if config is None:
        lines.append('color management: disabled (no configuration)')
        return '\n'.join(lines)

    intent = config.rendering_intent
    intent_name = intent.name if isinstance(intent, RenderingIntent) else str(intent)
    lines.append('color management: enabled')
    lines.append(f'  rendering intent: {intent_name}')
    lines.append(f'  black point compensation: {_yes_no(config.use_black_point_compensation)}')
    lines.append(f'  use embedded input profile: {_yes_no(config.use_embedded_input_profile)}')
    lines.append('')

    lines.append('── profiles')
    for slot, profile in config.profiles.items():
        lines.append(f'  {slot.value:<12} {describe(profile)}')
    lines.append('')

    lines.append(f'── transforms ({len(config.transforms)})')
    for i, t in enumerate(config.transforms, start=1):
        opts = ', '.join(f'{k}={v}' for k, v in t.options.items())
        lines.append(f'  {i}. {t.name}' + (f' ({opts})' if opts else ''))
    return '\n'.join(lines)


def format_json(config: ColorManagementConfiguration | None) -> str:
    """Format a finalized configuration as JSON; disabled is null."""
    return json.dumps(to_dict(config), indent=2)


def profile_info(profile: ColorProfile) -> dict[str, Any]:
    return {
        'source': profile.source,
        'description': profile.description,
        'color_space': profile.device_color_space.name,
        'size': len(profile.data),
    }


def format_profiles_text(profiles: list[ColorProfile]) -> str:
    lines = []
    for p in profiles:
        lines.append(f'{p.source}')
        lines.append(f'  {p.device_color_space.name:<5} {p.description}  ({len(p.data)} bytes)')
    return '\n'.join(lines)


def format_profiles_json(profiles: list[ColorProfile]) -> str:
    return json.dumps([profile_info(p) for p in profiles], indent=2)


def _yes_no(value: Any) -> str:
    return 'yes' if value else 'no'
