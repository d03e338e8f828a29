# topmark:header:start
#
#   project      : DiagExplain
#   file         : protocols.py
#   file_relpath : src/diagexplain/pipeline/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural protocol implemented by pipeline tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from diagexplain.pipeline.context import ProjectContext, TaskPipelineConfig
    from diagexplain.pipeline.executor import TaskResult


class Task(Protocol):
    """A named unit of work run by a [`TaskPipeline`][diagexplain.pipeline.executor.TaskPipeline].

    Attributes:
        name (str): Stable identifier used for logs and reports.
    """

    name: str

    def enabled(self, config: TaskPipelineConfig) -> bool:
        """Return whether the task belongs in a pipeline built with ``config``.

        Evaluated once, when the pipeline is built.
        """
        ...

    def __call__(self, ctx: ProjectContext) -> TaskResult:
        """Run the task against ``ctx`` and report its outcome."""
        ...
