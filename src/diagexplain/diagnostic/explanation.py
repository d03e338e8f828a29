# topmark:header:start
#
#   project      : DiagExplain
#   file         : explanation.py
#   file_relpath : src/diagexplain/diagnostic/explanation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve diagnostic codes to their bundled explanation text.

Explanations are Markdown files named ``<code>.md`` shipped in the
``error-codes`` resource directory of [`diagexplain.diagnostic`][]. They are
read with `importlib.resources`, so the lookup works from an installed wheel as
well as from a source checkout.

The resolver never raises: unknown codes, missing resources and I/O or
decoding failures are all reported as a
[`NotFound`][diagexplain.diagnostic.explanation.NotFound] record.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from importlib.resources import files
from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.constants import ERROR_CODES_DIR, ERROR_CODES_PACKAGE, EXPLANATION_SUFFIX

if TYPE_CHECKING:
    import sys

    if sys.version_info < (3, 14):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.diagnostic.catalog import DiagnosticCatalog

logger: DiagExplainLogger = get_logger(__name__)


class NotFoundReason(str, Enum):
    """Why no explanation text could be produced for a code."""

    UNKNOWN_CODE = "unknown_code"
    NO_EXPLANATION_AVAILABLE = "no_explanation_available"


@dataclass(frozen=True)
class Found:
    """An explanation was found.

    Attributes:
        code: The diagnostic identifier that was resolved.
        text: Exact content of the explanation resource (no trimming, no newline
            translation).
    """

    code: str
    text: str

    @property
    def message(self) -> str:
        return self.text


@dataclass(frozen=True)
class NotFound:
    """No explanation is available for a code.

    Attributes:
        code: The diagnostic identifier that was requested.
        reason: Classification of the miss.
        message: User-facing description of the miss.
    """

    code: str
    reason: NotFoundReason
    message: str


ExplanationRecord = Found | NotFound


def default_explanations_root() -> Traversable:
    """Return the bundled ``error-codes`` resource directory."""
    return files(ERROR_CODES_PACKAGE).joinpath(ERROR_CODES_DIR)


def unknown_code_message(code: str) -> str:
    return f"Invalid error code: {code}"


def no_explanation_message(code: str, message_key: str) -> str:
    return f'Error code: {code} - "{message_key}" does not have an explanation'


class ExplanationResolver:
    """Map diagnostic codes to explanation records.

    Args:
        catalog (DiagnosticCatalog): Catalog used to validate codes and to
            obtain the message key for "no explanation" messages.
        root (Traversable | None): Directory holding ``<code>.md`` resources.
            Defaults to the bundled ``error-codes`` directory.
    """

    def __init__(self, catalog: DiagnosticCatalog, root: Traversable | None = None) -> None:
        self.catalog = catalog
        self.root: Traversable = root if root is not None else default_explanations_root()

    def resolve(self, code: str) -> ExplanationRecord:
        """Resolve ``code`` to an explanation record.

        Args:
            code (str): Diagnostic identifier, e.g. ``BCE2000``.

        Returns:
            ExplanationRecord: ``Found`` with the exact resource content, or
            ``NotFound`` with the reason and a user-facing message.
        """
        diagnostic = self.catalog.lookup(code)
        if diagnostic is None:
            logger.info("Unknown diagnostic code: %s", code)
            return NotFound(
                code=code,
                reason=NotFoundReason.UNKNOWN_CODE,
                message=unknown_code_message(code),
            )

        missing = NotFound(
            code=code,
            reason=NotFoundReason.NO_EXPLANATION_AVAILABLE,
            message=no_explanation_message(code, diagnostic.message_key),
        )
        try:
            resource: Traversable = self.root.joinpath(f"{code}{EXPLANATION_SUFFIX}")
            if not resource.is_file():
                logger.info("No explanation resource for %s at %s", code, resource)
                return missing
            # Decode bytes ourselves: read_text() would translate newlines.
            text: str = resource.read_bytes().decode("utf-8")
        except (OSError, ValueError) as exc:
            # UnicodeDecodeError is a ValueError; malformed paths raise either.
            logger.warning("Cannot read explanation for %s: %s", code, exc)
            return missing

        logger.debug("Resolved explanation for %s (%d chars)", code, len(text))
        return Found(code=code, text=text)
