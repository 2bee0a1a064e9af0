"""Project version lookup shared by the health endpoint and tooling."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "routelocale"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[2] / "pyproject.toml"

_VERSION_PATTERN = re.compile(r'^version\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed version, or the one declared in ``pyproject.toml``."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return _read_pyproject_version(PYPROJECT_PATH)


def _read_pyproject_version(path: Path) -> str:
    if not path.exists():
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    # Only look inside the [project] table.
    _, _, project = path.read_text(encoding="utf-8").partition("[project]")
    table = project.split("\n[", 1)[0]
    match = _VERSION_PATTERN.search(table)
    if match is None:
        raise RuntimeError("Unable to determine project version from pyproject.toml")
    return match.group(1)


__all__ = ["PACKAGE_NAME", "get_project_version"]
