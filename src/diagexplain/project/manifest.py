# topmark:header:start
#
#   project      : DiagExplain
#   file         : manifest.py
#   file_relpath : src/diagexplain/project/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read project manifests (``Ballerina.toml`` and ``Dependencies.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures, then
mapped onto small frozen dataclasses. Only the parts of the manifests needed
by the `explain` command are modelled:

```toml
[package]
org = "acme"
name = "inventory"
version = "0.1.0"

[build-options]
enable-cache = false

[[tool.openapi]]
id = "client"
command = ["bal", "openapi", "-i", "api.yaml"]

[[platform.java21.dependency]]
groupId = "org.slf4j"
artifactId = "slf4j-api"
version = "2.0.9"
```

``Dependencies.toml`` contributes its ``[[package]]`` entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from diagexplain.config.logging import get_logger
from diagexplain.project.errors import ProjectLoadError

if TYPE_CHECKING:
    from pathlib import Path

    from diagexplain.config.logging import DiagExplainLogger

logger: DiagExplainLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ProjectLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ProjectLoadError(f"cannot read {path}: {e}") from e
    except (TomlkitParseError, UnicodeDecodeError) as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ProjectLoadError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


@dataclass(frozen=True)
class BuildToolEntry:
    """A ``[[tool.<type>]]`` entry: an external command run before the build.

    Attributes:
        tool_type: The ``<type>`` part of the table name (e.g. ``openapi``).
        id: Unique identifier of the entry within the project.
        command: Command to run, as an argv list or a single shell-style string.
        options: Free-form ``options`` sub-table, passed through untouched.
    """

    tool_type: str
    id: str | None
    command: str | list[str] | None
    options: TomlTable = field(default_factory=lambda: {})


@dataclass(frozen=True)
class PlatformDependency:
    """A ``[[platform.<target>.dependency]]`` entry (Maven coordinates)."""

    platform: str
    group_id: str | None
    artifact_id: str | None
    version: str | None

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @property
    def is_complete(self) -> bool:
        return bool(self.group_id and self.artifact_id and self.version)


@dataclass(frozen=True)
class DependencyPackage:
    """A resolved package listed in ``Dependencies.toml``."""

    org: str | None
    name: str
    version: str | None


@dataclass(frozen=True)
class DependencyManifest:
    """The content of ``Dependencies.toml`` (empty when the file does not exist)."""

    entries: tuple[DependencyPackage, ...] = ()

    def packages(self) -> tuple[DependencyPackage, ...]:
        """Return the dependency packages in manifest order."""
        return self.entries


@dataclass(frozen=True)
class PackageManifest:
    """The parts of ``Ballerina.toml`` consumed by DiagExplain."""

    org: str | None
    name: str | None
    version: str | None
    build_options: TomlTable
    tools: tuple[BuildToolEntry, ...]
    platform_dependencies: tuple[PlatformDependency, ...]


def _table(data: TomlTable, key: str, where: Path) -> TomlTable:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ProjectLoadError(f"'{key}' must be a table in {where}")
    return cast("TomlTable", value)


def _array_of_tables(data: TomlTable, key: str, where: Path) -> list[TomlTable]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise ProjectLoadError(f"'{key}' must be an array of tables in {where}")
    return cast("list[TomlTable]", value)


def _opt_str(table: TomlTable, key: str) -> str | None:
    value = table.get(key)
    return value if isinstance(value, str) else None


def parse_package_manifest(path: Path) -> PackageManifest:
    """Parse ``Ballerina.toml`` at ``path``.

    Raises:
        ProjectLoadError: If the file is unreadable or structurally invalid.
    """
    data: TomlTable = load_toml_dict(path)

    package = _table(data, "package", path)

    tools: list[BuildToolEntry] = []
    for tool_type, entries in _table(data, "tool", path).items():
        if not isinstance(entries, list):
            raise ProjectLoadError(f"'tool.{tool_type}' must be an array of tables in {path}")
        for entry in cast("list[Any]", entries):
            if not isinstance(entry, dict):
                raise ProjectLoadError(f"'tool.{tool_type}' entries must be tables in {path}")
            entry_t = cast("TomlTable", entry)
            command: Any = entry_t.get("command")
            options: Any = entry_t.get("options", {})
            tools.append(
                BuildToolEntry(
                    tool_type=tool_type,
                    id=_opt_str(entry_t, "id"),
                    command=command if isinstance(command, (str, list)) else None,
                    options=cast("TomlTable", options) if isinstance(options, dict) else {},
                )
            )

    dependencies: list[PlatformDependency] = []
    for platform, platform_table in _table(data, "platform", path).items():
        if not isinstance(platform_table, dict):
            raise ProjectLoadError(f"'platform.{platform}' must be a table in {path}")
        for dep in _array_of_tables(cast("TomlTable", platform_table), "dependency", path):
            dependencies.append(
                PlatformDependency(
                    platform=platform,
                    group_id=_opt_str(dep, "groupId"),
                    artifact_id=_opt_str(dep, "artifactId"),
                    version=_opt_str(dep, "version"),
                )
            )

    manifest = PackageManifest(
        org=_opt_str(package, "org"),
        name=_opt_str(package, "name"),
        version=_opt_str(package, "version"),
        build_options=_table(data, "build-options", path),
        tools=tuple(tools),
        platform_dependencies=tuple(dependencies),
    )
    logger.debug(
        "Parsed %s: package=%s, %d tools, %d platform dependencies",
        path,
        manifest.name,
        len(manifest.tools),
        len(manifest.platform_dependencies),
    )
    return manifest


def parse_dependency_manifest(path: Path) -> DependencyManifest:
    """Parse ``Dependencies.toml`` at ``path``; a missing file yields an empty manifest.

    Raises:
        ProjectLoadError: If the file exists but is unreadable or invalid.
    """
    if not path.is_file():
        logger.debug("No dependency manifest at %s", path)
        return DependencyManifest()

    data: TomlTable = load_toml_dict(path)
    entries: list[DependencyPackage] = []
    for pkg in _array_of_tables(data, "package", path):
        name = _opt_str(pkg, "name")
        if name is None:
            raise ProjectLoadError(f"dependency package without a name in {path}")
        entries.append(
            DependencyPackage(org=_opt_str(pkg, "org"), name=name, version=_opt_str(pkg, "version"))
        )
    return DependencyManifest(entries=tuple(entries))
