# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands for the DiagExplain CLI."""

from __future__ import annotations
