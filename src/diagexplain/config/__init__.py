# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for DiagExplain.

Sub-modules:
    * [`diagexplain.config.logging`][]: TRACE-aware logger setup with colored output.
    * [`diagexplain.config.build_options`][]: build options read from the project manifest.
"""

from __future__ import annotations
