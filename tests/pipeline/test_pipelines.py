# topmark:header:start
#
#   project      : DiagExplain
#   file         : test_pipelines.py
#   file_relpath : tests/pipeline/test_pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the explain pipeline assembly."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from diagexplain.pipeline.pipelines import EXPLAIN_TASK_ORDER, build_explain_pipeline
from diagexplain.pipeline.status import PipelineState
from tests.conftest import mark_pipeline, parametrize
from tests.pipeline.conftest import load_project, make_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@mark_pipeline
@parametrize(
    "stale, caching, expected",
    [
        (True, False, EXPLAIN_TASK_ORDER),
        (True, True, EXPLAIN_TASK_ORDER[1:]),
        (False, False, EXPLAIN_TASK_ORDER[1:]),
        (False, True, EXPLAIN_TASK_ORDER[1:]),
    ],
)
def test_task_plan(stale: bool, caching: bool, expected: tuple[str, ...]) -> None:
    pipeline = build_explain_pipeline(make_config(is_project_stale=stale, caching_enabled=caching))

    assert pipeline.task_names == expected
    assert pipeline.state == PipelineState.IDLE


def test_task_order_is_clean_tools_dependencies() -> None:
    assert EXPLAIN_TASK_ORDER == (
        "clean-stale-output",
        "run-external-build-tools",
        "resolve-external-dependencies",
    )


@mark_pipeline
def test_injected_collaborators_are_used(tmp_path: Path) -> None:
    calls: list[list[str]] = []

    def runner(argv: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
        calls.append(list(argv))
        return subprocess.CompletedProcess(list(argv), 1, stdout="", stderr="nope")

    project = load_project(
        tmp_path / "proj",
        '[package]\nname = "inventory"\n\n[[tool.openapi]]\nid = "a"\ncommand = ["gen"]\n',
    )
    pipeline = build_explain_pipeline(make_config(is_project_stale=False), tool_runner=runner)

    result = pipeline.run(project)

    assert calls == [["gen"]]
    assert result.state == PipelineState.FAILED
    assert result.error is not None
    assert result.error.task == "run-external-build-tools"
    assert result.error.index == 0
