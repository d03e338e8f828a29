# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/project/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project model: root discovery, manifests, build options and staleness.

The `explain` command treats this package as an opaque collaborator: it finds
a root with [`find_project_root`][diagexplain.project.locator.find_project_root],
loads it with [`Project.load`][diagexplain.project.model.Project.load] and asks
[`is_project_updated`][diagexplain.project.state.is_project_updated] whether
previous build output is stale.
"""

from __future__ import annotations
