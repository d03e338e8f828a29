# topmark:header:start
#
#   project      : DiagExplain
#   file         : base.py
#   file_relpath : src/diagexplain/pipeline/tasks/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for pipeline tasks.

The pipeline invokes tasks as *callables*. `BaseTask` implements the common
lifecycle:

    result = task(ctx)  # internally: run() -> TaskResult

Subclasses override `run()` (and `enabled()` when their inclusion depends on
the pipeline configuration) and signal failure by raising
[`TaskError`][diagexplain.pipeline.tasks.base.TaskError]. Filesystem errors
(`OSError`) escaping `run()` are reported as failures too. Anything else is a
programming error and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.pipeline.executor import TaskResult

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.pipeline.context import ProjectContext, TaskPipelineConfig

logger: DiagExplainLogger = get_logger(__name__)


class TaskError(Exception):
    """Raised by a task to report that it could not complete."""


@dataclass
class BaseTask:
    """Reusable foundation for pipeline tasks.

    Attributes:
        name (str): Stable task identifier for logs and reports.
    """

    name: str

    def __call__(self, ctx: ProjectContext) -> TaskResult:
        """Run the task and convert expected failures into a `TaskResult`.

        Args:
            ctx (ProjectContext): The context shared by all tasks of the run.

        Returns:
            TaskResult: ``SUCCEEDED`` if `run()` returned normally, ``FAILED`` if it
            raised `TaskError` or `OSError`.
        """
        logger.debug("BaseTask: %s - running", self.name)
        try:
            self.run(ctx)
        except TaskError as e:
            logger.error("Task %s failed: %s", self.name, e)
            return TaskResult.failed(self.name, str(e), cause=e)
        except OSError as e:
            logger.error("Task %s failed with a filesystem error: %s", self.name, e)
            return TaskResult.failed(self.name, f"{type(e).__name__}: {e}", cause=e)
        logger.debug("BaseTask: %s - done", self.name)
        return TaskResult.succeeded(self.name)

    def enabled(self, config: TaskPipelineConfig) -> bool:
        """Return whether the task should be part of a pipeline built with ``config``.

        Default: ``True``.
        """
        return True

    def run(self, ctx: ProjectContext) -> None:
        """Perform the task's work. Subclasses must override this method."""
        raise NotImplementedError(f"{type(self).__name__}.run()")
