# topmark:header:start
#
#   project      : DiagExplain
#   file         : platform_dependencies.py
#   file_relpath : src/diagexplain/pipeline/tasks/platform_dependencies.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Task that resolves the Maven dependencies declared in ``Ballerina.toml``.

Each ``[[platform.<target>.dependency]]`` entry carries Maven coordinates:

```toml
[[platform.java21.dependency]]
groupId = "org.slf4j"
artifactId = "slf4j-api"
version = "2.0.9"
```

Resolved jars are placed in ``<target>/platform-libs``. Resolution itself is
delegated to a [`DependencyResolver`][diagexplain.pipeline.tasks.platform_dependencies.DependencyResolver];
the default one copies artifacts out of a local Maven repository.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from diagexplain.config.logging import get_logger
from diagexplain.constants import PLATFORM_LIBS_DIR_NAME
from diagexplain.pipeline.tasks.base import BaseTask, TaskError

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.pipeline.context import ProjectContext
    from diagexplain.project.manifest import PlatformDependency

logger: DiagExplainLogger = get_logger(__name__)

RESOLVE_DEPENDENCIES = "resolve-external-dependencies"


class DependencyResolutionError(TaskError):
    """A platform dependency could not be resolved."""


class DependencyResolver(Protocol):
    """Fetches one platform dependency into a destination directory."""

    def resolve(self, dependency: PlatformDependency, destination: Path) -> Path:
        """Place the artifact for ``dependency`` in ``destination`` and return its path.

        Raises:
            DependencyResolutionError: If the artifact cannot be obtained.
        """
        ...


class LocalRepositoryResolver:
    """Resolve artifacts from a local Maven repository layout.

    The artifact for ``group:artifact:version`` is expected at
    ``<repository>/<group as path>/<artifact>/<version>/<artifact>-<version>.jar``.
    """

    def __init__(self, repository: Path) -> None:
        self.repository = repository

    def artifact_path(self, dependency: PlatformDependency) -> Path:
        group_path = Path(*str(dependency.group_id).split("."))
        artifact = str(dependency.artifact_id)
        version = str(dependency.version)
        return self.repository / group_path / artifact / version / f"{artifact}-{version}.jar"

    def resolve(self, dependency: PlatformDependency, destination: Path) -> Path:
        source = self.artifact_path(dependency)
        if not source.is_file():
            raise DependencyResolutionError(
                f"cannot resolve {dependency.coordinates}: {source} not found"
            )
        destination.mkdir(parents=True, exist_ok=True)
        copied = destination / source.name
        shutil.copy2(source, copied)
        logger.debug("Resolved %s -> %s", dependency.coordinates, copied)
        return copied


@dataclass
class ResolvePlatformDependenciesTask(BaseTask):
    """Resolve every declared platform dependency, stopping at the first failure.

    Attributes:
        resolver (DependencyResolver | None): Resolver to use. ``None`` selects a
            [`LocalRepositoryResolver`][diagexplain.pipeline.tasks.platform_dependencies.LocalRepositoryResolver]
            over the project's configured Maven repository.
    """

    name: str = RESOLVE_DEPENDENCIES
    resolver: DependencyResolver | None = None

    def run(self, ctx: ProjectContext) -> None:
        dependencies = ctx.project.manifest.platform_dependencies
        if not dependencies:
            logger.debug("No platform dependencies declared")
            return

        for dependency in dependencies:
            if not dependency.is_complete:
                raise DependencyResolutionError(
                    f"platform.{dependency.platform} dependency {dependency.coordinates} "
                    "must declare 'groupId', 'artifactId' and 'version'"
                )

        resolver = self.resolver or LocalRepositoryResolver(ctx.project.options.maven_repository)
        destination = ctx.project.target_dir / PLATFORM_LIBS_DIR_NAME

        ctx.out.print("Resolving Maven dependencies")
        for dependency in dependencies:
            ctx.out.print(f"\tDownloading {dependency.coordinates}")
            resolver.resolve(dependency, destination)
        ctx.out.print("")
