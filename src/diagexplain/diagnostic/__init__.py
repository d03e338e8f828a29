# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic code registries, the lookup catalog and the explanation resolver.

Public surface:
    * [`DiagnosticCatalog`][diagexplain.diagnostic.catalog.DiagnosticCatalog]
    * [`ExplanationResolver`][diagexplain.diagnostic.explanation.ExplanationResolver]
    * [`Found`][diagexplain.diagnostic.explanation.Found] /
      [`NotFound`][diagexplain.diagnostic.explanation.NotFound]

Explanation texts are bundled as package data under ``error-codes/``.
"""

from __future__ import annotations

from diagexplain.diagnostic.catalog import DiagnosticCatalog
from diagexplain.diagnostic.codes import DiagnosticCode
from diagexplain.diagnostic.explanation import (
    ExplanationRecord,
    ExplanationResolver,
    Found,
    NotFound,
    NotFoundReason,
)

__all__ = [
    "DiagnosticCatalog",
    "DiagnosticCode",
    "ExplanationRecord",
    "ExplanationResolver",
    "Found",
    "NotFound",
    "NotFoundReason",
]
