# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagExplain package.

DiagExplain explains compiler diagnostic codes and, when invoked inside a
project, runs the preparatory build tasks (cleaning stale output, running
build tools, resolving platform dependencies) before reporting the project's
package and dependency summary.
"""

from __future__ import annotations
