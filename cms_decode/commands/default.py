"""Search for the default CMYK input profile (DefaultCMYK.icc).

Directories are tried in the order given. Without arguments the list comes
from CMS_PROFILE_DIRS (os.pathsep-separated, .env supported), falling back to
the current directory. Missing or invalid files are skipped silently; exit
status is 1 when no directory yields a usable CMYK profile.

Example:
    cms-decode default ./profiles /usr/share/color/icc
    CMS_PROFILE_DIRS=./profiles cms-decode default
"""

import sys

from cms_decode.core.env import profile_search_dirs
from cms_decode.core.profile import DEFAULT_CMYK_PROFILE, load_default
from cms_decode.core.report import format_profiles_json, format_profiles_text
from cms_decode.core.types import Command

command = Command(name='default', help=f'Find the default CMYK input profile ({DEFAULT_CMYK_PROFILE}).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('dirs', nargs='*', metavar='DIR', help='Directories to search, in order')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> int:
    dirs = args.dirs or profile_search_dirs()
    profile = load_default(dirs)
    if profile is None:
        searched = ', '.join(str(d) for d in dirs)
        print(f'cms-decode: no usable {DEFAULT_CMYK_PROFILE} in: {searched}', file=sys.stderr)
        return 1

    print(format_profiles_json([profile]) if args.json else format_profiles_text([profile]))
    profile.release()
    return 0
