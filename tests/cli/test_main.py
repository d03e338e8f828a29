# topmark:header:start
#
#   project      : DiagExplain
#   file         : test_main.py
#   file_relpath : tests/cli/test_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: root group behavior (help, global options)."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Invoking the group alone prints a hint followed by the group help."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert result.stdout.startswith("Hint: use 'diagexplain explain <error-code>'")
    assert "explain" in result.stdout
    assert "version" in result.stdout


@mark_cli
def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """Passing both -v and -q is a usage error (exit 64)."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr


@mark_cli
@parametrize("argv", [["--color", "never", "version"], ["--no-color", "version"]])
def test_color_never_emits_plain_text(argv: list[str]) -> None:
    """Disabling color leaves no ANSI escape sequences in the output."""
    result = run_cli(argv)

    assert_SUCCESS(result)
    assert "\x1b[" not in result.stdout


@mark_cli
def test_color_always_styles_the_version() -> None:
    """Forcing color keeps the styling escape sequences."""
    result = run_cli(["--color", "always", "version"])

    assert_SUCCESS(result)
    assert "\x1b[" in result.stdout
