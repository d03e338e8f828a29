# topmark:header:start
#
#   project      : DiagExplain
#   file         : __main__.py
#   file_relpath : src/diagexplain/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DiagExplain via ``python -m diagexplain``.

Delegates to :func:`diagexplain.cli.main.cli`, the single authoritative CLI
entry point.

Examples:
    Explain a diagnostic code::

        python -m diagexplain explain BCE2000
"""

from __future__ import annotations

from diagexplain.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
