# topmark:header:start
#
#   project      : DiagExplain
#   file         : errors.py
#   file_relpath : src/diagexplain/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DiagExplain CLI.

Usage:
    Raise these exceptions in CLI options and commands to signal errors with
    standardized exit codes. Click reports them on stderr as ``Error: <message>``.
"""

from __future__ import annotations

import click

from diagexplain.core.exit_codes import ExitCode


class DiagExplainError(click.ClickException):
    """Base class for all DiagExplain CLI errors."""

    exit_code = ExitCode.FAILURE


class DiagExplainUsageError(DiagExplainError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
