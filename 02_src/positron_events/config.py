"""Project-level configuration and path helpers."""

from pathlib import Path
from typing import Union

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent.parent
DEFAULT_SCHEMA_PATH = PACKAGE_DIR / "schema" / "events.json"
DEFAULT_EVENTS_MODULE_PATH = PACKAGE_DIR / "models" / "events.py"


PathLike = Union[str, Path]


def resolve_path(env_value: PathLike | None, default: Path) -> Path:
    """Resolve an env-provided path, falling back to `default`.

    Relative values are taken relative to the project root.
    """
    if not env_value:
        return default

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate
