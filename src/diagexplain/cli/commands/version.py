# topmark:header:start
#
#   project      : DiagExplain
#   file         : version.py
#   file_relpath : src/diagexplain/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagExplain `version` command.

Prints the current DiagExplain version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from diagexplain.cli.cmd_common import get_effective_verbosity
from diagexplain.cli.console import get_console
from diagexplain.constants import DIAGEXPLAIN_VERSION

if TYPE_CHECKING:
    from diagexplain.core.console_api import ConsoleLike


class VersionFormat(str, Enum):
    """Output formats of the `version` command."""

    TEXT = "text"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of DiagExplain.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in VersionFormat]),
    default=VersionFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: str) -> None:
    """Show the current version of DiagExplain.

    Args:
        ctx (click.Context): The current Click context.
        output_format (str): ``text`` (default) or ``json``.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    if VersionFormat(output_format) == VersionFormat.JSON:
        console.print(json.dumps({"version": DIAGEXPLAIN_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("DiagExplain version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DIAGEXPLAIN_VERSION, bold=True)}")
    else:
        console.print(console.styled(DIAGEXPLAIN_VERSION, bold=True))
