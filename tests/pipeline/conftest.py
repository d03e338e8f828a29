# topmark:header:start
#
#   project      : DiagExplain
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared test utilities for the build-task pipeline.

Key utilities:
  * RecordingConsole: a ConsoleLike that keeps every printed line in memory.
  * load_project(root, manifest): lay out and load a project in one call.
  * make_config(...): a TaskPipelineConfig bound to a RecordingConsole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from diagexplain.pipeline.context import ProjectContext, TaskPipelineConfig
from diagexplain.pipeline.tasks.base import BaseTask, TaskError
from diagexplain.project.model import Project
from tests.conftest import write_project

if TYPE_CHECKING:
    from pathlib import Path


class RecordingConsole:
    """Console that records output instead of writing it."""

    def __init__(self) -> None:
        self.chunks: list[str] = []
        self.errors: list[str] = []

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.chunks.append(text + ("\n" if nl else ""))

    def warn(self, text: str, *, nl: bool = True) -> None:
        self.errors.append(text)

    def error(self, text: str, *, nl: bool = True) -> None:
        self.errors.append(text)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        return text

    @property
    def lines(self) -> list[str]:
        return "".join(self.chunks).splitlines()


def load_project(root: Path, manifest: str | None = None, **kwargs: Any) -> Project:
    """Write a project under ``root`` (see `write_project`) and load it."""
    if manifest is not None:
        kwargs["manifest"] = manifest
    return Project.load(write_project(root, **kwargs))


def make_config(
    *,
    is_project_stale: bool = True,
    caching_enabled: bool = False,
    console: RecordingConsole | None = None,
) -> TaskPipelineConfig:
    return TaskPipelineConfig(
        is_project_stale=is_project_stale,
        caching_enabled=caching_enabled,
        output_sink=console or RecordingConsole(),
    )


def make_context(project: Project, console: RecordingConsole | None = None) -> ProjectContext:
    return ProjectContext(project=project, out=console or RecordingConsole())


@dataclass
class ScriptedTask(BaseTask):
    """Task that records its invocation in ``log`` and optionally fails.

    Attributes:
        log (list[str]): Shared invocation log.
        fail_with (BaseException | None): Exception raised from `run()`, if any.
        only_when_stale (bool): Include the task only for stale projects.
    """

    log: list[str] = field(default_factory=lambda: [])
    fail_with: BaseException | None = None
    only_when_stale: bool = False

    def enabled(self, config: TaskPipelineConfig) -> bool:
        return config.is_project_stale or not self.only_when_stale

    def run(self, ctx: ProjectContext) -> None:
        self.log.append(self.name)
        if self.fail_with is not None:
            raise self.fail_with


def failing(name: str, log: list[str], message: str = "boom") -> ScriptedTask:
    return ScriptedTask(name=name, log=log, fail_with=TaskError(message))
