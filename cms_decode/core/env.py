"""Environment configuration for cms-decode.

Settings come from environment variables, optionally seeded from a .env file:
  1. Variables already in the OS environment always win.
  2. An explicit --env-file is read if given.
  3. Otherwise the nearest .env walking up from cwd, stopping at the .git
     boundary so a .env outside the repository is never picked up.

Recognised variables:
  CMS_PROFILE_DIRS  os.pathsep-separated directories searched, in order, for
                    the default CMYK input profile.
"""

import os
from pathlib import Path

PROFILE_DIRS_VAR = 'CMS_PROFILE_DIRS'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes around values are stripped, # lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Seed os.environ from a .env file without overwriting existing keys.

    Returns the file that was read, or None.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def profile_search_dirs() -> list[Path]:
    """Default-profile search directories from CMS_PROFILE_DIRS, else [cwd]."""
    raw = os.environ.get(PROFILE_DIRS_VAR, '')
    dirs = [Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip()]
    return dirs or [Path.cwd()]
