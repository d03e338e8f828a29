# topmark:header:start
#
#   project      : DiagExplain
#   file         : model.py
#   file_relpath : src/diagexplain/project/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Loaded project handle.

A [`Project`][diagexplain.project.model.Project] wraps a project root, its
parsed ``Ballerina.toml`` and its effective
[`BuildOptions`][diagexplain.config.build_options.BuildOptions].

``Dependencies.toml`` is read on demand by
[`Project.dependency_manifest`][diagexplain.project.model.Project.dependency_manifest]
rather than at load time: build tools run by the pipeline may generate or
rewrite it, and the summary printed afterwards must reflect their output.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from diagexplain.config.build_options import BuildOptions, BuildOptionsError
from diagexplain.config.logging import get_logger
from diagexplain.constants import DEPENDENCIES_MANIFEST_NAME, PROJECT_MANIFEST_NAME
from diagexplain.project.errors import ProjectLoadError
from diagexplain.project.manifest import parse_dependency_manifest, parse_package_manifest

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.project.manifest import DependencyManifest, PackageManifest

logger: DiagExplainLogger = get_logger(__name__)


@dataclass(frozen=True)
class Project:
    """A loaded project.

    Attributes:
        root (Path): Absolute project root (the directory holding ``Ballerina.toml``).
        manifest (PackageManifest): Parsed package manifest.
        options (BuildOptions): Effective build options.
    """

    root: Path
    manifest: PackageManifest
    options: BuildOptions

    @classmethod
    def load(cls, root: Path, options: BuildOptions | None = None) -> Project:
        """Load the project rooted at ``root``.

        Args:
            root (Path): Project root directory.
            options (BuildOptions | None): Explicit build options. When ``None``,
                options are read from the manifest's ``[build-options]`` table.

        Returns:
            Project: The loaded project.

        Raises:
            ProjectLoadError: If the manifest is missing, unreadable or invalid.
        """
        root = root.resolve()
        manifest: PackageManifest = parse_package_manifest(root / PROJECT_MANIFEST_NAME)
        if options is None:
            try:
                options = BuildOptions.from_table(manifest.build_options, root=root)
            except BuildOptionsError as e:
                raise ProjectLoadError(f"invalid [build-options] in {root}: {e}") from e
        logger.info("Loaded project %s at %s", manifest.name or root.name, root)
        return cls(root=root, manifest=manifest, options=options)

    @property
    def package_name(self) -> str:
        """Package name from ``[package].name``, or the root directory name."""
        return self.manifest.name or self.root.name

    @property
    def target_dir(self) -> Path:
        return self.options.target_path(self.root)

    @property
    def dependencies_path(self) -> Path:
        return self.root / DEPENDENCIES_MANIFEST_NAME

    def dependency_manifest(self) -> DependencyManifest:
        """Read ``Dependencies.toml`` (fresh on every call).

        Raises:
            ProjectLoadError: If the file exists but is unreadable or invalid.
        """
        return parse_dependency_manifest(self.dependencies_path)
