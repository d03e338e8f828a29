# topmark:header:start
#
#   project      : DiagExplain
#   file         : executor.py
#   file_relpath : src/diagexplain/pipeline/executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered, fail-fast execution of build tasks against a project.

A [`TaskPipeline`][diagexplain.pipeline.executor.TaskPipeline] is assembled
with a [`TaskPipelineBuilder`][diagexplain.pipeline.executor.TaskPipelineBuilder]
from ``(task, include)`` pairs. Inclusion is decided once, at build time: a
task is included iff ``include`` is true and ``task.enabled(config)`` returns
true. The resulting task order is the order in which tasks were added.

Design goals:
  - No CLI dependencies: the executor never imports Click. Presentation
    (printing the outcome, choosing an exit status) is the caller's job.
  - Structured results: [`run`][diagexplain.pipeline.executor.TaskPipeline.run]
    returns a [`PipelineResult`][diagexplain.pipeline.executor.PipelineResult]
    instead of raising; task failures are data, not exceptions.
  - Fail-fast: the first failed task stops the run. There is no retry and no
    rollback of side effects from tasks that already succeeded.

Typical usage:

    pipeline = (
        TaskPipelineBuilder()
        .add_task(CleanTargetDirTask())
        .add_task(RunBuildToolsTask())
        .build(config)
    )
    result = pipeline.run(project)
    if not result.ok:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.pipeline.context import ProjectContext
from diagexplain.pipeline.status import PipelineState, TaskStatus

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.pipeline.context import TaskPipelineConfig
    from diagexplain.pipeline.protocols import Task
    from diagexplain.project.model import Project

logger: DiagExplainLogger = get_logger(__name__)


@dataclass(frozen=True)
class TaskResult:
    """Outcome of a single task invocation.

    Attributes:
        task (str): Name of the task.
        status (TaskStatus): Whether the task succeeded.
        message (str): Human-readable failure description (empty on success).
        cause (BaseException | None): The exception that caused the failure, if any.
    """

    task: str
    status: TaskStatus
    message: str = ""
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.status == TaskStatus.SUCCEEDED

    @classmethod
    def succeeded(cls, task: str) -> TaskResult:
        return cls(task=task, status=TaskStatus.SUCCEEDED)

    @classmethod
    def failed(cls, task: str, message: str, cause: BaseException | None = None) -> TaskResult:
        return cls(task=task, status=TaskStatus.FAILED, message=message, cause=cause)


@dataclass(frozen=True)
class PipelineError:
    """Why a pipeline run stopped.

    Attributes:
        index (int): Position of the failed task among the *included* tasks.
        task (str): Name of the failed task.
        message (str): Failure description reported by the task.
        cause (BaseException | None): Underlying exception, if any.
    """

    index: int
    task: str
    message: str
    cause: BaseException | None = None

    def __str__(self) -> str:
        return f"task #{self.index} '{self.task}' failed: {self.message}"


@dataclass(frozen=True)
class PipelineResult:
    """Result of a pipeline run: ``COMPLETED`` or ``FAILED`` with a `PipelineError`.

    Attributes:
        state (PipelineState): Terminal state of the run.
        context (ProjectContext): The context the tasks ran against.
        completed (tuple[str, ...]): Names of the tasks that succeeded, in order.
        error (PipelineError | None): Set iff ``state`` is ``FAILED``.
    """

    state: PipelineState
    context: ProjectContext
    completed: tuple[str, ...] = ()
    error: PipelineError | None = None

    @property
    def ok(self) -> bool:
        return self.state == PipelineState.COMPLETED


class TaskPipeline:
    """An immutable, ordered sequence of included tasks plus its run state.

    Instances are produced by [`TaskPipelineBuilder.build`][diagexplain.pipeline.executor.TaskPipelineBuilder.build].
    Each pipeline runs at most once.

    Attributes:
        tasks (tuple[Task, ...]): Included tasks, in execution order.
        excluded (tuple[Task, ...]): Tasks dropped at build time.
        config (TaskPipelineConfig): The configuration the pipeline was built with.
        state (PipelineState): Current lifecycle state.
        current_index (int | None): Index of the running (or failed) task.
    """

    def __init__(
        self,
        tasks: tuple[Task, ...],
        *,
        config: TaskPipelineConfig,
        excluded: tuple[Task, ...] = (),
    ) -> None:
        self.tasks = tasks
        self.excluded = excluded
        self.config = config
        self.state: PipelineState = PipelineState.IDLE
        self.current_index: int | None = None

    @property
    def task_names(self) -> tuple[str, ...]:
        return tuple(task.name for task in self.tasks)

    def run(self, project: Project) -> PipelineResult:
        """Execute the included tasks sequentially against ``project``.

        Args:
            project (Project): The loaded project. The pipeline creates and
                exclusively owns the [`ProjectContext`][diagexplain.pipeline.context.ProjectContext]
                handed to each task.

        Returns:
            PipelineResult: ``COMPLETED`` if every task succeeded, otherwise
            ``FAILED`` with the index, name and cause of the first failed task.

        Raises:
            RuntimeError: If the pipeline has already been run.
        """
        if self.state != PipelineState.IDLE:
            raise RuntimeError(f"Pipeline already {self.state.value}; build a new one to rerun")

        ctx = ProjectContext(project=project, out=self.config.output_sink)
        self.state = PipelineState.RUNNING
        logger.info("Running pipeline with %d task(s): %s", len(self.tasks), self.task_names)

        for index, task in enumerate(self.tasks):
            self.current_index = index
            logger.info("Pipeline task %d/%d: %s", index + 1, len(self.tasks), task.name)
            result: TaskResult = task(ctx)
            if not result.ok:
                self.state = PipelineState.FAILED
                error = PipelineError(
                    index=index,
                    task=task.name,
                    message=result.message,
                    cause=result.cause,
                )
                logger.error("Pipeline halted: %s", error)
                return PipelineResult(
                    state=self.state,
                    context=ctx,
                    completed=tuple(ctx.completed),
                    error=error,
                )
            ctx.completed.append(task.name)

        self.state = PipelineState.COMPLETED
        self.current_index = None
        logger.info("Pipeline completed: %s", ctx.completed)
        return PipelineResult(state=self.state, context=ctx, completed=tuple(ctx.completed))


@dataclass
class TaskPipelineBuilder:
    """Declarative builder for a [`TaskPipeline`][diagexplain.pipeline.executor.TaskPipeline]."""

    entries: list[tuple[Task, bool]] = field(default_factory=lambda: [])

    def add_task(self, task: Task, include: bool = True) -> TaskPipelineBuilder:
        """Append ``task``; it is only considered if ``include`` is true.

        Returns:
            TaskPipelineBuilder: ``self``, for chaining.
        """
        self.entries.append((task, include))
        return self

    def build(self, config: TaskPipelineConfig) -> TaskPipeline:
        """Evaluate inclusion against ``config`` and freeze the task order."""
        included: list[Task] = []
        excluded: list[Task] = []
        for task, include in self.entries:
            if include and task.enabled(config):
                included.append(task)
            else:
                logger.debug("Excluding task %s (include=%s)", task.name, include)
                excluded.append(task)
        return TaskPipeline(tuple(included), config=config, excluded=tuple(excluded))
