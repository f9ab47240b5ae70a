"""
Project metadata lookup.

Log records carry the service name and version. Both come from the installed
distribution when available, otherwise from the nearest ``pyproject.toml``
(source checkouts, tests).
"""
from functools import lru_cache
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any
import tomllib

DISTRIBUTION_NAME = "realestate-backoffice"


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    """Walk up from `start` until a pyproject.toml is found (at most `max_up` levels)."""
    current = start
    for _ in range(max_up):
        candidate = current / "pyproject.toml"
        if candidate.exists():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None


def read_pyproject_key(dotted_key: str, start: Path | None = None, default: Any = None) -> Any:
    """
    Return the value stored under `dotted_key` (e.g. "project.version") in the
    nearest pyproject.toml, or `default` when the file or key is missing.
    """
    pyproject = find_pyproject(start or Path(__file__).resolve().parent)
    if pyproject is None:
        return default

    try:
        with pyproject.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    node: Any = data
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


@lru_cache()
def get_project_name() -> str:
    return read_pyproject_key("project.name", default=DISTRIBUTION_NAME)


@lru_cache()
def get_project_version(default: str = "unknown") -> str:
    """Installed distribution version first, then pyproject.toml, then `default`."""
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    return read_pyproject_key("project.version", default=default)


__all__ = ["find_pyproject", "read_pyproject_key", "get_project_name", "get_project_version"]
