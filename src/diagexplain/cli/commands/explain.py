# topmark:header:start
#
#   project      : DiagExplain
#   file         : explain.py
#   file_relpath : src/diagexplain/cli/commands/explain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagExplain `explain` command.

Explains a compiler diagnostic code and, when run inside a project, prepares
the project (clean stale output, run build tools, resolve platform
dependencies) before printing its package name and dependencies.

Exit status:
    * ``0`` on help, on any explanation outcome, when no project is detected,
      and after any failure once a project is detected (reported, but not fatal);
    * ``1`` when the argument list is missing, too long, or empty.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from diagexplain.cli.cmd_common import exit_with, get_effective_verbosity
from diagexplain.cli.console import get_console
from diagexplain.config.logging import get_logger
from diagexplain.constants import CLI_NAME, COMPILER_ERROR_PREFIX, EXPLAIN_COMMAND
from diagexplain.core.exit_codes import ExitCode
from diagexplain.diagnostic.catalog import DiagnosticCatalog
from diagexplain.diagnostic.explanation import ExplanationResolver, Found
from diagexplain.pipeline.context import TaskPipelineConfig
from diagexplain.pipeline.pipelines import build_explain_pipeline
from diagexplain.project.errors import ProjectLoadError
from diagexplain.project.locator import ProjectLocator

if TYPE_CHECKING:
    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.core.console_api import ConsoleLike
    from diagexplain.diagnostic.explanation import ExplanationRecord
    from diagexplain.pipeline.executor import PipelineResult
    from diagexplain.project.locator import ProjectRoot

logger: DiagExplainLogger = get_logger(__name__)

USAGE: str = f"{CLI_NAME} {EXPLAIN_COMMAND} <error-code>"

MSG_NO_ERROR_CODE = "no error code given"
MSG_TOO_MANY_ARGUMENTS = "too many arguments"
MSG_EMPTY_ERROR_CODE = "error code is empty"
MSG_EXECUTION_FAILED = "Error occurred while executing the explain command"


def print_input_error(console: ConsoleLike, message: str) -> None:
    """Print a validation error followed by the usage hint to stderr."""
    console.error(f"{CLI_NAME}: {message}")
    console.error("")
    console.error("USAGE:")
    console.error(f"    {USAGE}")
    console.error("")
    console.error(f"For more information try '{USAGE.rsplit(' ', 1)[0]} --help'")


def validate_arguments(args: tuple[str, ...]) -> str | None:
    """Return the error message for an invalid argument list, or ``None`` if valid."""
    if not args:
        return MSG_NO_ERROR_CODE
    if len(args) > 1:
        return MSG_TOO_MANY_ARGUMENTS
    if args[0] == "":
        return MSG_EMPTY_ERROR_CODE
    return None


def explain_error_code(console: ConsoleLike, error_code: str) -> ExplanationRecord:
    """Resolve ``error_code`` against the built-in catalog and print the outcome."""
    resolver = ExplanationResolver(DiagnosticCatalog.default())
    record: ExplanationRecord = resolver.resolve(error_code)
    if isinstance(record, Found):
        console.print(record.text)
    else:
        console.print(record.message)
    return record


def report_pipeline_result(console: ConsoleLike, found: ProjectRoot, result: PipelineResult) -> bool:
    """Print the project summary for a completed run; return ``False`` if nothing was printed."""
    if not result.ok:
        logger.error("Explain pipeline failed for %s: %s", found.path, result.error)
        return False
    try:
        packages = found.project.dependency_manifest().packages()
    except ProjectLoadError as e:
        logger.error("Cannot read dependencies of %s: %s", found.path, e)
        return False

    console.print(found.project.package_name)
    for package in packages:
        console.print(package.name)
    return True


def prepare_project(console: ConsoleLike, cwd: Path, *, verbosity: int) -> None:
    """Detect the enclosing project, run the explain pipeline and print its summary.

    Once a project is detected, no failure escapes this function: load errors,
    failed tasks and unexpected exceptions all end in the generic message.
    """
    locator = ProjectLocator()
    root: Path | None = locator.find(cwd)
    if root is None:
        console.print(f"Project not detected at: {cwd}")
        return

    console.print(f"Project detected at: {root}")
    try:
        ok = run_project_pipeline(console, locator, root, verbosity=verbosity)
    except ProjectLoadError as e:
        logger.error("Cannot load project at %s: %s", root, e)
        ok = False
    except Exception as e:
        logger.exception("Explain command failed for %s: %s", root, e)
        if verbosity > 0:
            console.warn(f"{type(e).__name__}: {e}")
        ok = False
    if not ok:
        console.print(MSG_EXECUTION_FAILED)


def run_project_pipeline(
    console: ConsoleLike, locator: ProjectLocator, root: Path, *, verbosity: int
) -> bool:
    """Load the project at ``root``, run the explain pipeline and print the summary.

    Returns:
        bool: ``True`` if the summary was printed.

    Raises:
        ProjectLoadError: If the project or its dependency manifest cannot be loaded.
    """
    found: ProjectRoot = locator.load(root)
    config = TaskPipelineConfig(
        is_project_stale=found.is_stale,
        caching_enabled=found.project.options.enable_cache,
        output_sink=console,
    )
    pipeline = build_explain_pipeline(config)
    if verbosity > 0:
        console.print(f"Tasks: {', '.join(pipeline.task_names) or '(none)'}")

    result: PipelineResult = pipeline.run(found.project)
    if verbosity > 0:
        console.print(f"Pipeline {result.state.render()}")
    if report_pipeline_result(console, found, result):
        return True
    if verbosity > 0 and result.error is not None:
        console.warn(str(result.error))
    return False


@click.command(
    name=EXPLAIN_COMMAND,
    help="Explain compiler diagnostic codes.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("args", metavar="<error-code>", nargs=-1)
@click.pass_context
def explain_command(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Explain a diagnostic code, then prepare and summarize the enclosing project.

    Args:
        ctx (click.Context): The current Click context.
        args (tuple[str, ...]): Positional arguments; exactly one non-empty
            error code is expected.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    problem = validate_arguments(args)
    if problem is not None:
        print_input_error(console, problem)
        exit_with(ctx, ExitCode.FAILURE)
        return

    error_code: str = args[0]
    if error_code.startswith(COMPILER_ERROR_PREFIX):
        explain_error_code(console, error_code)

    prepare_project(console, Path.cwd(), verbosity=vlevel)
