# topmark:header:start
#
#   project      : DiagExplain
#   file         : test_explain_arguments.py
#   file_relpath : tests/cli/test_explain_arguments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: argument validation and help of the `explain` command.

Invalid argument lists print an error and a usage hint on stderr and exit
with status 1 without touching the project. Help exits with status 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize, write_project

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
@parametrize(
    "argv, message",
    [
        (["explain"], "no error code given"),
        (["explain", "BCE2000", "BCE2001"], "too many arguments"),
        (["explain", ""], "error code is empty"),
    ],
)
def test_invalid_arguments_fail_with_usage_hint(argv: list[str], message: str) -> None:
    """Each invalid argument list yields its own message, the usage hint and status 1."""
    result = run_cli(argv)

    assert_FAILURE(result)
    err_lines = result.stderr.splitlines()
    assert err_lines[0] == f"diagexplain: {message}"
    assert "    diagexplain explain <error-code>" in err_lines
    assert result.stdout == ""


@mark_cli
def test_invalid_arguments_do_not_run_the_pipeline(tmp_path: Path) -> None:
    """Validation happens before project detection: nothing is cleaned or printed."""
    root = write_project(tmp_path / "proj")
    stale_output = root / "target" / "bin" / "app.jar"
    stale_output.parent.mkdir(parents=True)
    stale_output.write_text("jar", encoding="utf-8")

    result = run_cli_in(root, ["explain", "BCE2000", "extra"])

    assert_FAILURE(result)
    assert "Project detected" not in result.output
    assert stale_output.is_file()


@mark_cli
@parametrize("flag", ["--help", "-h"])
def test_help_exits_zero(flag: str) -> None:
    """Help is printed on stdout and is not an error."""
    result = run_cli(["explain", flag])

    assert_SUCCESS(result)
    assert "<error-code>" in result.stdout
    assert "Explain compiler diagnostic codes." in result.stdout


@mark_cli
def test_help_wins_over_error_code(tmp_path: Path) -> None:
    """With a help flag present, no explanation is printed and no project is probed."""
    result = run_cli_in(tmp_path, ["explain", "BCE2000", "--help"])

    assert_SUCCESS(result)
    assert "BCE2000:" not in result.stdout
    assert "Project not detected" not in result.stdout
