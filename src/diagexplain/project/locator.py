# topmark:header:start
#
#   project      : DiagExplain
#   file         : locator.py
#   file_relpath : src/diagexplain/project/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the project enclosing a directory.

The walk starts at the given directory and moves up through its parents until
a directory containing the project marker (``Ballerina.toml``) is found. It
never writes to the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.constants import PROJECT_MANIFEST_NAME
from diagexplain.project.model import Project
from diagexplain.project.state import is_project_updated

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger

logger: DiagExplainLogger = get_logger(__name__)


def find_project_root(start: Path, *, marker: str = PROJECT_MANIFEST_NAME) -> Path | None:
    """Return the nearest directory at or above ``start`` that contains ``marker``.

    Args:
        start (Path): Directory to start from. Relative paths are made absolute.
        marker (str): Name of the file identifying a project root.

    Returns:
        Path | None: The project root, or ``None`` once the filesystem root has
        been checked without a match.
    """
    current: Path = start.absolute()
    for directory in (current, *current.parents):
        if (directory / marker).is_file():
            logger.debug("Project marker found in %s", directory)
            return directory
    logger.debug("No %s found at or above %s", marker, current)
    return None


@dataclass(frozen=True)
class ProjectRoot:
    """A discovered project root.

    Attributes:
        path (Path): Absolute path of the root directory.
        project (Project): The project loaded from that root.
        is_stale (bool): Whether previous build output no longer reflects the
            project's declared inputs.
    """

    path: Path
    project: Project
    is_stale: bool


class ProjectLocator:
    """Discover a project from a working directory and load it with its staleness."""

    def find(self, start: Path) -> Path | None:
        """Return the enclosing project root, or ``None`` if there is none."""
        return find_project_root(start)

    def load(self, root: Path) -> ProjectRoot:
        """Load the project at ``root`` and compute whether its build output is stale.

        Raises:
            ProjectLoadError: If the manifest cannot be loaded.
        """
        project = Project.load(root)
        return ProjectRoot(path=project.root, project=project, is_stale=self.is_stale(project))

    def is_stale(self, project: Project) -> bool:
        return is_project_updated(project)
