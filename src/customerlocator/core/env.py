"""
Project-root and `.env` helpers.

The CLI and tests may run from any working directory, but the default customers file
(`data/customers.json`) and a local `.env` live at the repo root. The root is the
nearest directory, from the working directory upwards, holding `pyproject.toml` or
`.env`; failing that, the nearest one above this module; failing that, the cwd.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

_ROOT_MARKERS = ("pyproject.toml", ".env")


def _find_marked_dir(start: Path) -> Path | None:
    for candidate in (start, *start.parents):
        if any((candidate / marker).is_file() for marker in _ROOT_MARKERS):
            return candidate
    return None


@lru_cache
def get_project_root() -> Path:
    """Return the project root directory (cached)."""
    return (
        _find_marked_dir(Path.cwd().resolve())
        or _find_marked_dir(Path(__file__).resolve().parent)
        or Path.cwd().resolve()
    )


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `<project root>/.env` once; variables already set in the process win."""
    env_path = get_project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a possibly-relative path against the project root."""
    p = Path(path).expanduser()
    if p.is_absolute():
        return p
    return (get_project_root() / p).resolve()
