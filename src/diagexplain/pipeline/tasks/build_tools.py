# topmark:header:start
#
#   project      : DiagExplain
#   file         : build_tools.py
#   file_relpath : src/diagexplain/pipeline/tasks/build_tools.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Task that runs the build tools declared in ``Ballerina.toml``.

Each ``[[tool.<type>]]`` entry names an external command:

```toml
[[tool.openapi]]
id = "petstore"
command = ["bal", "openapi", "-i", "petstore.yaml", "--mode", "client"]
```

Tools run one after another with the project root as working directory.
Their standard output is relayed to the task's output sink. Tools commonly
generate sources or rewrite ``Dependencies.toml``; the tasks after this one
rely on that output.
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from diagexplain.config.logging import get_logger
from diagexplain.pipeline.tasks.base import BaseTask, TaskError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.pipeline.context import ProjectContext
    from diagexplain.project.manifest import BuildToolEntry

logger: DiagExplainLogger = get_logger(__name__)

RUN_BUILD_TOOLS = "run-external-build-tools"

ToolRunner = Callable[["Sequence[str]", "Path"], "subprocess.CompletedProcess[str]"]


def run_tool_command(argv: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """Run ``argv`` in ``cwd`` and capture its text output (no shell, no check).

    Undecodable output bytes are replaced rather than raising.
    """
    return subprocess.run(
        list(argv),
        cwd=cwd,
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
    )


def tool_argv(tool: BuildToolEntry) -> list[str]:
    """Return the argv for ``tool``.

    Raises:
        TaskError: If the entry has no id, no command, or an invalid command.
    """
    label = f"tool.{tool.tool_type}"
    if not tool.id:
        raise TaskError(f"build tool '{label}' is missing the 'id' field")
    if isinstance(tool.command, str):
        try:
            argv = shlex.split(tool.command)
        except ValueError as e:
            raise TaskError(f"build tool '{label}' ({tool.id}) has an invalid 'command': {e}") from e
    elif isinstance(tool.command, list) and all(isinstance(a, str) for a in tool.command):
        argv = list(tool.command)
    else:
        raise TaskError(f"build tool '{label}' ({tool.id}) has no valid 'command'")
    if not argv:
        raise TaskError(f"build tool '{label}' ({tool.id}) has an empty 'command'")
    return argv


@dataclass
class RunBuildToolsTask(BaseTask):
    """Run every declared build tool, stopping at the first failure.

    Attributes:
        runner (ToolRunner): Callable executing a command; defaults to
            [`run_tool_command`][diagexplain.pipeline.tasks.build_tools.run_tool_command].
    """

    name: str = RUN_BUILD_TOOLS
    runner: ToolRunner = field(default=run_tool_command)

    def run(self, ctx: ProjectContext) -> None:
        tools = ctx.project.manifest.tools
        if not tools:
            logger.debug("No build tools declared")
            return

        # Validate all entries before running any of them
        seen: set[str] = set()
        plan: list[tuple[BuildToolEntry, list[str]]] = []
        for tool in tools:
            argv = tool_argv(tool)
            if tool.id in seen:
                raise TaskError(f"duplicate build tool id '{tool.id}'")
            seen.add(str(tool.id))
            plan.append((tool, argv))

        ctx.out.print("")
        ctx.out.print("Executing Build Tools")
        for tool, argv in plan:
            ctx.out.print(f"\t{tool.tool_type}({tool.id})")
            logger.info("Running build tool %s: %s", tool.id, argv)
            completed = self.runner(argv, ctx.project.root)
            if completed.stdout:
                ctx.out.print(completed.stdout, nl=False)
            if completed.returncode != 0:
                detail = (completed.stderr or "").strip()
                raise TaskError(
                    f"build tool '{tool.id}' exited with status {completed.returncode}"
                    + (f": {detail}" if detail else "")
                )
        ctx.out.print("")
