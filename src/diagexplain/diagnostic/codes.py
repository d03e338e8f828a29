# topmark:header:start
#
#   project      : DiagExplain
#   file         : codes.py
#   file_relpath : src/diagexplain/diagnostic/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in diagnostic code registries.

A *registry* is any iterable of objects satisfying the
[`DiagnosticCode`][diagexplain.diagnostic.codes.DiagnosticCode] protocol. The
compiler ships two of them, both modelled as `Enum` classes so that iterating
the class yields its codes in declaration order:

* [`SyntaxDiagnosticCode`][diagexplain.diagnostic.codes.SyntaxDiagnosticCode]:
  parser-level errors (``BCE0xxx``).
* [`SemanticDiagnosticCode`][diagexplain.diagnostic.codes.SemanticDiagnosticCode]:
  semantic-analysis errors (``BCE2xxx`` and up).

Registries are static and never mutated at runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class DiagnosticCode(Protocol):
    """A stable diagnostic identifier paired with its message key."""

    @property
    def diagnostic_id(self) -> str:
        """Identifier in the form ``<PREFIX><digits>`` (e.g. ``BCE2000``)."""
        ...

    @property
    def message_key(self) -> str:
        """Key of the human-readable message template (e.g. ``undefined.module``)."""
        ...


class _CodeEnum(Enum):
    """Base for registries whose members are ``(diagnostic_id, message_key)`` pairs."""

    def __init__(self, diagnostic_id: str, message_key: str) -> None:
        self._diagnostic_id = diagnostic_id
        self._message_key = message_key

    @property
    def diagnostic_id(self) -> str:
        return self._diagnostic_id

    @property
    def message_key(self) -> str:
        return self._message_key


class SyntaxDiagnosticCode(_CodeEnum):
    """Errors reported by the parser."""

    ERROR_MISSING_TOKEN = ("BCE0000", "error.missing.token")
    ERROR_MISSING_SEMICOLON_TOKEN = ("BCE0002", "error.missing.semicolon.token")
    ERROR_MISSING_COLON_TOKEN = ("BCE0003", "error.missing.colon.token")
    ERROR_MISSING_OPEN_PAREN_TOKEN = ("BCE0004", "error.missing.open.paren.token")
    ERROR_MISSING_CLOSE_PAREN_TOKEN = ("BCE0005", "error.missing.close.paren.token")
    ERROR_MISSING_OPEN_BRACE_TOKEN = ("BCE0006", "error.missing.open.brace.token")
    ERROR_MISSING_CLOSE_BRACE_TOKEN = ("BCE0007", "error.missing.close.brace.token")
    ERROR_MISSING_OPEN_BRACKET_TOKEN = ("BCE0008", "error.missing.open.bracket.token")
    ERROR_MISSING_CLOSE_BRACKET_TOKEN = ("BCE0009", "error.missing.close.bracket.token")
    ERROR_MISSING_EQUAL_TOKEN = ("BCE0010", "error.missing.equal.token")
    ERROR_MISSING_COMMA_TOKEN = ("BCE0011", "error.missing.comma.token")
    ERROR_MISSING_IDENTIFIER = ("BCE0200", "error.missing.identifier")
    ERROR_MISSING_TYPE_DESC = ("BCE0300", "error.missing.type.desc")
    ERROR_INVALID_TOKEN = ("BCE0600", "error.invalid.token")
    ERROR_INVALID_ESCAPE_SEQUENCE = ("BCE0601", "error.invalid.escape.sequence")


class SemanticDiagnosticCode(_CodeEnum):
    """Errors reported by semantic analysis and code generation."""

    UNDEFINED_MODULE = ("BCE2000", "undefined.module")
    CYCLIC_MODULE_IMPORTS_DETECTED = ("BCE2001", "cyclic.module.imports.detected")
    UNUSED_MODULE_PREFIX = ("BCE2002", "unused.module.prefix")
    MODULE_NOT_FOUND = ("BCE2003", "module.not.found")
    REDECLARED_IMPORT_MODULE = ("BCE2004", "redeclared.import.module")
    INVALID_PACKAGE_NAME_QUALIFIER = ("BCE2005", "invalid.package.name.qualifier")
    REDECLARED_SYMBOL = ("BCE2008", "redeclared.symbol")
    UNDEFINED_SYMBOL = ("BCE2010", "undefined.symbol")
    UNDEFINED_FUNCTION = ("BCE2011", "undefined.function")
    UNDEFINED_FIELD_IN_RECORD = ("BCE2014", "undefined.field.in.record")
    INCOMPATIBLE_TYPES = ("BCE2066", "incompatible.types")
    UNREACHABLE_CODE = ("BCE2300", "unreachable.code")
    CANNOT_UPDATE_CONSTANT_VALUE = ("BCE2531", "cannot.update.constant.value")
    UNUSED_VARIABLE_WITH_INFERRED_TYPE_INCLUDING_ERROR = (
        "BCE3034",
        "unused.variable.with.inferred.type.including.error",
    )
