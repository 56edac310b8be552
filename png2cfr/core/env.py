"""Configuration for png2cfr from the environment and .env files.

Lookup order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised keys:
  PNG2CFR_JOBS       worker processes used to encode variants (default 1)
  PNG2CFR_HIGHLIGHT  length after which the output tail is highlighted (default 1000)
  NO_COLOR           any non-empty value disables ANSI highlighting
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_JOBS = 1
DEFAULT_HIGHLIGHT = 1000


@dataclass
class Settings:
    jobs: int = DEFAULT_JOBS
    highlight: int = DEFAULT_HIGHLIGHT
    color: bool = True
    env_path: Path | None = None


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, not looking past the enclosing .git."""
    here = start.resolve()
    for directory in (here, *here.parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        if (directory / '.git').exists():
            break
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value pairs. Accepts an 'export ' prefix and quoted values."""
    lines = (line.strip() for line in path.read_text(encoding='utf-8').splitlines())
    result: dict[str, str] = {}
    for line in lines:
        if line.startswith('#'):
            continue
        key, sep, value = line.removeprefix('export ').partition('=')
        if sep and key.strip():
            result[key.strip()] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Fill unset os.environ keys from a .env file; returns the file used, if any."""
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        print(f'png2cfr: ignoring {name}={raw!r}, expected an integer', file=sys.stderr)
        return default
    if value < 0:
        print(f'png2cfr: ignoring {name}={raw!r}, expected a non-negative integer', file=sys.stderr)
        return default
    return value


def load_settings(env_file: str | None = None) -> Settings:
    """Load .env, then read png2cfr settings from the environment."""
    env_path = load_env(env_file)
    return Settings(
        jobs=max(_env_int('PNG2CFR_JOBS', DEFAULT_JOBS), 1),
        highlight=_env_int('PNG2CFR_HIGHLIGHT', DEFAULT_HIGHLIGHT),
        color=not os.environ.get('NO_COLOR'),
        env_path=env_path,
    )
