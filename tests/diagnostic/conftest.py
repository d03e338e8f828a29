# topmark:header:start
#
#   project      : DiagExplain
#   file         : conftest.py
#   file_relpath : tests/diagnostic/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for diagnostic catalog and resolver tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FakeCode:
    """Minimal DiagnosticCode used to build ad-hoc registries."""

    diagnostic_id: str
    message_key: str
