# topmark:header:start
#
#   project      : DiagExplain
#   file         : cmd_common.py
#   file_relpath : src/diagexplain/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small, focused helpers used by multiple CLI commands. They avoid policy
(messages, exit code rules) and only encapsulate plumbing.
"""

from __future__ import annotations

import click

from diagexplain.config.logging import get_logger

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity set by the root group (0 if unset)."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def exit_with(ctx: click.Context, code: int) -> None:
    """Terminate the command with ``code`` (logged at debug level)."""
    logger.debug("Exiting %s with code %d", ctx.command_path, code)
    ctx.exit(code)
