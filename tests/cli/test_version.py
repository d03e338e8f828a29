# topmark:header:start
#
#   project      : DiagExplain
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

import pytest
from packaging.version import InvalidVersion, Version

from diagexplain.constants import DIAGEXPLAIN_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)

    out: str = result.stdout.strip()
    assert out == DIAGEXPLAIN_VERSION

    try:
        Version(out)  # raises InvalidVersion if not PEP 440
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


@mark_cli
def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with the installed version."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert payload == {"version": DIAGEXPLAIN_VERSION}


@mark_cli
def test_version_verbose_adds_a_title() -> None:
    """At verbosity 1 the version is printed under a title."""
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "DiagExplain version:" in result.stdout
    assert result.stdout.rstrip().endswith(DIAGEXPLAIN_VERSION)
