# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/pipeline/tasks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete pipeline tasks.

Each task subclasses [`BaseTask`][diagexplain.pipeline.tasks.base.BaseTask]:

* [`CleanTargetDirTask`][diagexplain.pipeline.tasks.clean_target.CleanTargetDirTask]
* [`RunBuildToolsTask`][diagexplain.pipeline.tasks.build_tools.RunBuildToolsTask]
* [`ResolvePlatformDependenciesTask`][diagexplain.pipeline.tasks.platform_dependencies.ResolvePlatformDependenciesTask]
"""

from __future__ import annotations
