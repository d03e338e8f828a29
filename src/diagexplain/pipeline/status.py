# topmark:header:start
#
#   project      : DiagExplain
#   file         : status.py
#   file_relpath : src/diagexplain/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for pipeline runs and individual tasks.

A pipeline moves through ``IDLE -> RUNNING -> COMPLETED | FAILED``. Each task
invocation ends as ``SUCCEEDED`` or ``FAILED``.
"""

from __future__ import annotations

from yachalk import chalk

from diagexplain.rendering.colored_enum import ColoredStrEnum


class PipelineState(ColoredStrEnum):
    """Lifecycle state of a task pipeline run."""

    IDLE = ("idle", chalk.gray)
    RUNNING = ("running", chalk.blue)
    COMPLETED = ("completed", chalk.green)
    FAILED = ("failed", chalk.red_bright)

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.COMPLETED, PipelineState.FAILED)


class TaskStatus(ColoredStrEnum):
    """Outcome of a single task invocation."""

    SUCCEEDED = ("succeeded", chalk.green)
    FAILED = ("failed", chalk.red_bright)
