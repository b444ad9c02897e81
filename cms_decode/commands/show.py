"""Parse a JSON configuration file, finalize it and print the result.

Profiles are loaded and bound to their slots; a profile whose device color
space does not fit its slot is an error. A configuration with
"enabled": false finalizes to nothing and is shown as disabled (JSON: null).

Example:
    cms-decode show decode.json
    cms-decode show decode.json --json
"""

import json
import sys

from cms_decode.core.config_file import parse_config_file
from cms_decode.core.errors import ColorManagementError
from cms_decode.core.report import format_json, format_text
from cms_decode.core.types import Command
from cms_decode.core.validator import finalize

command = Command(name='show', help='Finalize a configuration file and print it.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('config', help='Path to a JSON configuration file')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> int:
    try:
        draft = parse_config_file(args.config)
    except (OSError, json.JSONDecodeError, ValueError, ColorManagementError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    try:
        config = finalize(draft)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        draft.close()
        return 1

    if config is None:
        released = draft.close()
        if released:
            print(f'cms-decode: disabled, released {len(released)} profile(s)', file=sys.stderr)

    print(format_json(config) if args.json else format_text(config, source=args.config))
    if config is not None:
        config.close()
    return 0
