# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by the CLI and the pipeline layers."""

from __future__ import annotations
