# topmark:header:start
#
#   project      : DiagExplain
#   file         : test_build_options.py
#   file_relpath : tests/config/test_build_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `[build-options]` parsing and environment overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from diagexplain.config.build_options import (
    BuildOptions,
    BuildOptionsError,
    default_maven_repository,
)
from tests.conftest import parametrize


def test_defaults(tmp_path: Path) -> None:
    options = BuildOptions.from_table({}, root=tmp_path)

    assert options == BuildOptions()
    assert options.target_path(tmp_path) == tmp_path / "target"
    assert options.maven_repository == default_maven_repository()


def test_relative_paths_resolve_against_root(tmp_path: Path) -> None:
    options = BuildOptions.from_table(
        {"enable-cache": True, "target-dir": "build/out", "maven-repository": "m2"},
        root=tmp_path,
    )

    assert options.enable_cache is True
    assert options.target_path(tmp_path) == tmp_path / "build" / "out"
    assert options.maven_repository == tmp_path / "m2"


def test_absolute_paths_are_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"

    options = BuildOptions.from_table({"target-dir": str(target)}, root=tmp_path / "proj")

    assert options.target_path(tmp_path / "proj") == target


def test_environment_overrides_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIAGEXPLAIN_MAVEN_REPOSITORY", str(tmp_path / "env-m2"))

    options = BuildOptions.from_table({"maven-repository": "m2"}, root=tmp_path)

    assert options.maven_repository == tmp_path / "env-m2"


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    assert BuildOptions.from_table({"observability": True}, root=tmp_path) == BuildOptions()


@parametrize(
    "table, fragment",
    [
        ({"enable-cache": "yes"}, "'enable-cache' must be a boolean"),
        ({"enable-cache": 1}, "'enable-cache' must be a boolean"),
        ({"target-dir": 3}, "'target-dir' must be a non-empty string"),
        ({"target-dir": "  "}, "'target-dir' must be a non-empty string"),
        ({"maven-repository": ["a"]}, "'maven-repository' must be a non-empty string"),
    ],
)
def test_invalid_values(tmp_path: Path, table: dict[str, Any], fragment: str) -> None:
    with pytest.raises(BuildOptionsError, match=fragment):
        BuildOptions.from_table(table, root=tmp_path)
