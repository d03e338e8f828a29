# topmark:header:start
#
#   project      : DiagExplain
#   file         : state.py
#   file_relpath : src/diagexplain/project/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Staleness of persisted build state.

A previous build leaves a JSON *build file* at ``<target>/build``:

```json
{"last_build_time": 1760000000.0}
```

The project is considered updated (its build output stale) when that file is
missing or unreadable, or when any declared input is newer than the recorded
build time. Declared inputs are ``Ballerina.toml``, ``Dependencies.toml`` and
every ``*.bal`` source below the root, excluding the target directory.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.constants import (
    BUILD_FILE_NAME,
    DEPENDENCIES_MANIFEST_NAME,
    PROJECT_MANIFEST_NAME,
    SOURCE_FILE_SUFFIX,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.project.model import Project

logger: DiagExplainLogger = get_logger(__name__)

LAST_BUILD_TIME_KEY = "last_build_time"


def read_last_build_time(build_file: Path) -> float | None:
    """Return the recorded build time, or ``None`` if the build file is missing or invalid."""
    try:
        data = json.loads(build_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable build file %s: %s", build_file, e)
        return None
    value = data.get(LAST_BUILD_TIME_KEY) if isinstance(data, dict) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("Build file %s has no valid '%s'", build_file, LAST_BUILD_TIME_KEY)
        return None
    return float(value)


def iter_declared_inputs(project: Project) -> Iterator[Path]:
    """Yield the files whose modification makes previous build output stale."""
    for name in (PROJECT_MANIFEST_NAME, DEPENDENCIES_MANIFEST_NAME):
        candidate = project.root / name
        if candidate.is_file():
            yield candidate

    target = project.target_dir.resolve()
    for source in project.root.rglob(f"*{SOURCE_FILE_SUFFIX}"):
        if source.resolve().is_relative_to(target):
            continue
        if source.is_file():
            yield source


def is_project_updated(project: Project) -> bool:
    """Return whether the project changed since its last build.

    Args:
        project (Project): The loaded project.

    Returns:
        bool: ``True`` if there is no valid build record or if a declared input
        is newer than it, ``False`` otherwise.
    """
    last_build = read_last_build_time(project.target_dir / BUILD_FILE_NAME)
    if last_build is None:
        logger.debug("No build record for %s; treating as updated", project.root)
        return True

    for path in iter_declared_inputs(project):
        if path.stat().st_mtime > last_build:
            logger.debug("%s modified after last build (%s)", path, last_build)
            return True
    return False
