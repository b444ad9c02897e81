"""Load ICC profiles and print their device color space and description.

Each file is loaded the same way a slot assignment would load it: unreadable,
truncated or non-ICC files, and profiles for a device space other than
CMYK, RGB or Gray, are reported as errors (exit 1).

Example:
    cms-decode profile DefaultCMYK.icc sRGB.icm
    cms-decode profile *.icc --json
"""

import sys

from cms_decode.core.errors import ProfileLoadError
from cms_decode.core.profile import load
from cms_decode.core.report import format_profiles_json, format_profiles_text
from cms_decode.core.types import Command

command = Command(name='profile', help='Describe ICC profile files.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('paths', nargs='+', metavar='ICC', help='Profile files (*.icc, *.icm)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> int:
    profiles = []
    failed = 0
    for path in args.paths:
        try:
            profiles.append(load(path))
        except ProfileLoadError as e:
            print(f'Error: {e}', file=sys.stderr)
            failed += 1

    print(format_profiles_json(profiles) if args.json else format_profiles_text(profiles))
    for p in profiles:
        p.release()
    return 1 if failed else 0
