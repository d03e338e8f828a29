# topmark:header:start
#
#   project      : DiagExplain
#   file         : errors.py
#   file_relpath : src/diagexplain/project/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the project model."""

from __future__ import annotations


class ProjectLoadError(Exception):
    """A detected project could not be loaded (unreadable or malformed manifest)."""
