# topmark:header:start
#
#   project      : DiagExplain
#   file         : test_state.py
#   file_relpath : tests/project/test_state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for build-state staleness."""

from __future__ import annotations

import os
import time
from typing import TYPE_CHECKING

from diagexplain.project.model import Project
from diagexplain.project.state import (
    is_project_updated,
    iter_declared_inputs,
    read_last_build_time,
)
from tests.conftest import parametrize, write_project

if TYPE_CHECKING:
    from pathlib import Path

FUTURE = time.time() + 3600


def test_missing_build_file_means_updated(tmp_path: Path) -> None:
    project = Project.load(write_project(tmp_path / "proj"))

    assert is_project_updated(project)


def test_build_newer_than_inputs_is_fresh(tmp_path: Path) -> None:
    project = Project.load(
        write_project(tmp_path / "proj", sources={"main.bal": ""}, last_build_time=FUTURE)
    )

    assert not is_project_updated(project)


@parametrize("touched", ["Ballerina.toml", "Dependencies.toml", "modules/db/db.bal"])
def test_modified_input_means_updated(tmp_path: Path, touched: str) -> None:
    root = write_project(
        tmp_path / "proj",
        dependencies="",
        sources={"modules/db/db.bal": ""},
        last_build_time=1000.0,
    )
    for path in iter_declared_inputs(Project.load(root)):
        os.utime(path, (500.0, 500.0))
    os.utime(root / touched, (2000.0, 2000.0))

    assert is_project_updated(Project.load(root))


def test_sources_inside_target_are_ignored(tmp_path: Path) -> None:
    root = write_project(tmp_path / "proj", last_build_time=1000.0)
    (root / "target" / "gen.bal").write_text("", encoding="utf-8")
    os.utime(root / "Ballerina.toml", (500.0, 500.0))

    project = Project.load(root)

    assert root.resolve() / "target" / "gen.bal" not in list(iter_declared_inputs(project))
    assert not is_project_updated(project)


@parametrize(
    "content",
    ["not json", "[]", "{}", '{"last_build_time": "yesterday"}', '{"last_build_time": true}'],
)
def test_invalid_build_file_reads_as_missing(tmp_path: Path, content: str) -> None:
    build_file = tmp_path / "build"
    build_file.write_text(content, encoding="utf-8")

    assert read_last_build_time(build_file) is None


def test_build_time_accepts_integers(tmp_path: Path) -> None:
    build_file = tmp_path / "build"
    build_file.write_text('{"last_build_time": 1700000000}', encoding="utf-8")

    assert read_last_build_time(build_file) == 1700000000.0
