# topmark:header:start
#
#   project      : DiagExplain
#   file         : pipelines.py
#   file_relpath : src/diagexplain/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants for DiagExplain.

Overview
--------
- ``EXPLAIN``: clean stale output -> run build tools -> resolve platform dependencies

```mermaid
flowchart LR
  C[clean-stale-output] --> T[run-external-build-tools] --> D[resolve-external-dependencies]
```

Notes:
* The order is load-bearing: build tools may need a freshly cleaned target
  directory, and dependency resolution may need manifests the tools generate.
* Whether ``clean-stale-output`` runs is decided when the pipeline is built
  (stale project and caching disabled); the other tasks always run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from diagexplain.pipeline.executor import TaskPipelineBuilder
from diagexplain.pipeline.tasks.build_tools import (
    RUN_BUILD_TOOLS,
    RunBuildToolsTask,
    run_tool_command,
)
from diagexplain.pipeline.tasks.clean_target import CLEAN_STALE_OUTPUT, CleanTargetDirTask
from diagexplain.pipeline.tasks.platform_dependencies import (
    RESOLVE_DEPENDENCIES,
    ResolvePlatformDependenciesTask,
)

if TYPE_CHECKING:
    from diagexplain.pipeline.context import TaskPipelineConfig
    from diagexplain.pipeline.executor import TaskPipeline
    from diagexplain.pipeline.tasks.build_tools import ToolRunner
    from diagexplain.pipeline.tasks.platform_dependencies import DependencyResolver

#: Task names of the explain pipeline, in execution order.
EXPLAIN_TASK_ORDER: Final[tuple[str, ...]] = (
    CLEAN_STALE_OUTPUT,
    RUN_BUILD_TOOLS,
    RESOLVE_DEPENDENCIES,
)


def build_explain_pipeline(
    config: TaskPipelineConfig,
    *,
    tool_runner: ToolRunner | None = None,
    dependency_resolver: DependencyResolver | None = None,
) -> TaskPipeline:
    """Build the pipeline run by ``explain`` inside a project.

    Args:
        config (TaskPipelineConfig): Staleness, caching and output sink.
        tool_runner (ToolRunner | None): Override for running build tool commands.
        dependency_resolver (DependencyResolver | None): Override for resolving
            platform dependencies.

    Returns:
        TaskPipeline: The pipeline, ready to run.
    """
    return (
        TaskPipelineBuilder()
        # clean target dir for stale projects
        .add_task(CleanTargetDirTask(), include=True)
        # run build tools
        .add_task(RunBuildToolsTask(runner=tool_runner or run_tool_command))
        # resolve maven dependencies in Ballerina.toml
        .add_task(ResolvePlatformDependenciesTask(resolver=dependency_resolver))
        .build(config)
    )
