# topmark:header:start
#
#   project      : DiagExplain
#   file         : context.py
#   file_relpath : src/diagexplain/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and mutable context of a task pipeline run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diagexplain.core.console_api import ConsoleLike
    from diagexplain.project.model import Project


@dataclass(frozen=True)
class TaskPipelineConfig:
    """Options consulted when deciding which tasks a pipeline includes.

    Attributes:
        is_project_stale (bool): Previous build output no longer reflects the
            project's declared inputs.
        caching_enabled (bool): Build output is reused across runs; stale output
            is never cleaned when set.
        output_sink (ConsoleLike): Write-only handle for task progress messages.
    """

    is_project_stale: bool
    caching_enabled: bool
    output_sink: ConsoleLike


@dataclass
class ProjectContext:
    """State shared by all tasks of one pipeline run.

    The pipeline owns the context for the duration of the run; tasks may
    mutate it and rely on the side effects of the tasks before them.

    Attributes:
        project (Project): The loaded project.
        out (ConsoleLike): Console for progress messages.
        completed (list[str]): Names of the tasks that finished successfully,
            in execution order.
    """

    project: Project
    out: ConsoleLike
    completed: list[str] = field(default_factory=lambda: [])
