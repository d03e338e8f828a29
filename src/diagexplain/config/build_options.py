# topmark:header:start
#
#   project      : DiagExplain
#   file         : build_options.py
#   file_relpath : src/diagexplain/config/build_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build options for a project, read from the ``[build-options]`` manifest table.

Recognized keys (all optional):

| Key                | Type   | Default              |
| ------------------ | ------ | -------------------- |
| `enable-cache`     | bool   | `false`              |
| `target-dir`       | string | `target`             |
| `maven-repository` | string | `~/.m2/repository`   |

Relative paths are resolved against the project root. The environment variable
``DIAGEXPLAIN_MAVEN_REPOSITORY`` takes precedence over `maven-repository`.
Unknown keys are ignored (with a debug log), wrongly typed values raise
[`BuildOptionsError`][diagexplain.config.build_options.BuildOptionsError].
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from diagexplain.config.logging import get_logger
from diagexplain.constants import DEFAULT_TARGET_DIR_NAME, ENV_MAVEN_REPOSITORY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from diagexplain.config.logging import DiagExplainLogger

logger: DiagExplainLogger = get_logger(__name__)

KEY_ENABLE_CACHE: Final[str] = "enable-cache"
KEY_TARGET_DIR: Final[str] = "target-dir"
KEY_MAVEN_REPOSITORY: Final[str] = "maven-repository"


class BuildOptionsError(ValueError):
    """Raised when the ``[build-options]`` table holds an invalid value."""


def default_maven_repository() -> Path:
    """Return the conventional local Maven repository (``~/.m2/repository``)."""
    return Path.home() / ".m2" / "repository"


@dataclass(frozen=True)
class BuildOptions:
    """Immutable build options for a single command invocation.

    Attributes:
        enable_cache (bool): Reuse previous build output; disables cleaning of
            the target directory.
        target_dir (Path | None): Build output directory. ``None`` means
            ``<project root>/target``.
        maven_repository (Path): Local repository used to resolve platform
            dependencies.
    """

    enable_cache: bool = False
    target_dir: Path | None = None
    maven_repository: Path = field(default_factory=default_maven_repository)

    def target_path(self, root: Path) -> Path:
        """Return the effective target directory for a project rooted at ``root``."""
        if self.target_dir is None:
            return root / DEFAULT_TARGET_DIR_NAME
        return self.target_dir

    @classmethod
    def from_table(cls, table: Mapping[str, Any], *, root: Path) -> BuildOptions:
        """Build options from a parsed ``[build-options]`` table.

        Args:
            table (Mapping[str, Any]): The table contents (may be empty).
            root (Path): Project root used to resolve relative paths.

        Returns:
            BuildOptions: The validated options, with environment overrides applied.

        Raises:
            BuildOptionsError: If a recognized key holds a value of the wrong type.
        """
        known = {KEY_ENABLE_CACHE, KEY_TARGET_DIR, KEY_MAVEN_REPOSITORY}
        for key in table:
            if key not in known:
                logger.debug("Ignoring unknown build option: %s", key)

        enable_cache = table.get(KEY_ENABLE_CACHE, False)
        if not isinstance(enable_cache, bool):
            raise BuildOptionsError(
                f"'{KEY_ENABLE_CACHE}' must be a boolean, got {type(enable_cache).__name__}"
            )

        target_dir = _optional_path(table, KEY_TARGET_DIR, root)
        maven_repository = _optional_path(table, KEY_MAVEN_REPOSITORY, root)

        env_repo = os.environ.get(ENV_MAVEN_REPOSITORY)
        if env_repo:
            logger.debug("Maven repository overridden by %s=%s", ENV_MAVEN_REPOSITORY, env_repo)
            maven_repository = Path(env_repo).expanduser()

        options = cls(
            enable_cache=enable_cache,
            target_dir=target_dir,
            maven_repository=maven_repository or default_maven_repository(),
        )
        logger.debug("Build options: %s", options)
        return options


def _optional_path(table: Mapping[str, Any], key: str, root: Path) -> Path | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise BuildOptionsError(f"'{key}' must be a non-empty string")
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path
