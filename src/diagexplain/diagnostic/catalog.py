# topmark:header:start
#
#   project      : DiagExplain
#   file         : catalog.py
#   file_relpath : src/diagexplain/diagnostic/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Queryable catalog of diagnostic codes drawn from several registries.

The catalog is built once per command invocation from an *ordered* sequence
of registries. Lookup semantics are "first match in priority order": when two
registries define the same identifier, the one listed first wins. The catalog
indexes codes at construction time, so lookups are O(1) and yield exactly the
result of a linear scan.

Typical usage:
    ```python
    catalog = DiagnosticCatalog.default()
    code = catalog.lookup("BCE2000")
    if code is not None:
        print(code.message_key)
    ```

New registries are added by appending providers to the sequence handed to the
constructor; lookup logic never changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagexplain.config.logging import get_logger
from diagexplain.diagnostic.codes import SemanticDiagnosticCode, SyntaxDiagnosticCode

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from diagexplain.config.logging import DiagExplainLogger
    from diagexplain.diagnostic.codes import DiagnosticCode

logger: DiagExplainLogger = get_logger(__name__)

#: Built-in registries in lookup priority order.
DEFAULT_REGISTRIES: tuple[Iterable[DiagnosticCode], ...] = (
    SyntaxDiagnosticCode,
    SemanticDiagnosticCode,
)


class DiagnosticCatalog:
    """Read-only, prioritized view over one or more diagnostic code registries.

    Args:
        registries (Sequence[Iterable[DiagnosticCode]]): Registries in priority
            order (highest first). Each registry is iterated once, in its natural
            order, at construction time.
    """

    def __init__(self, registries: Sequence[Iterable[DiagnosticCode]]) -> None:
        self._codes: tuple[DiagnosticCode, ...] = tuple(
            code for registry in registries for code in registry
        )
        index: dict[str, DiagnosticCode] = {}
        for code in self._codes:
            if code.diagnostic_id in index:
                logger.debug(
                    "Diagnostic id %s already provided by a higher-priority registry; ignoring %r",
                    code.diagnostic_id,
                    code,
                )
                continue
            index[code.diagnostic_id] = code
        self._index: dict[str, DiagnosticCode] = index
        logger.debug(
            "DiagnosticCatalog: %d registries, %d codes, %d unique ids",
            len(registries),
            len(self._codes),
            len(self._index),
        )

    @classmethod
    def default(cls) -> DiagnosticCatalog:
        """Return a catalog over the built-in compiler registries."""
        return cls(DEFAULT_REGISTRIES)

    def lookup(self, code: str) -> DiagnosticCode | None:
        """Return the first registered code whose identifier equals ``code``.

        Args:
            code (str): The diagnostic identifier to look up (exact match).

        Returns:
            DiagnosticCode | None: The highest-priority match, or ``None`` if no
            registry defines the identifier.
        """
        return self._index.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._index

    def __iter__(self) -> Iterator[DiagnosticCode]:
        """Iterate all codes (duplicates included) in priority order."""
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)
