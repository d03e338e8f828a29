# topmark:header:start
#
#   project      : DiagExplain
#   file         : clean_target.py
#   file_relpath : src/diagexplain/pipeline/tasks/clean_target.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Task that removes stale build output (the project's target directory)."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.pipeline.tasks.base import BaseTask, TaskError

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.pipeline.context import ProjectContext, TaskPipelineConfig

logger: DiagExplainLogger = get_logger(__name__)

CLEAN_STALE_OUTPUT = "clean-stale-output"


@dataclass
class CleanTargetDirTask(BaseTask):
    """Delete the target directory when the project changed since its last build.

    Included only when the project is stale and caching is disabled. A missing
    target directory is not an error.
    """

    name: str = CLEAN_STALE_OUTPUT

    def enabled(self, config: TaskPipelineConfig) -> bool:
        return config.is_project_stale and not config.caching_enabled

    def run(self, ctx: ProjectContext) -> None:
        root = ctx.project.root.resolve()
        target = ctx.project.target_dir.resolve()

        # Never delete the project itself (or anything above it)
        if target == root or root.is_relative_to(target):
            raise TaskError(f"refusing to clean target directory {target}: it contains the project")

        if not target.exists():
            logger.debug("Target directory %s does not exist; nothing to clean", target)
            return
        if not target.is_dir():
            raise TaskError(f"target path {target} is not a directory")

        logger.info("Cleaning target directory %s", target)
        shutil.rmtree(target)
