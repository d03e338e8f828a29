# topmark:header:start
#
#   project      : DiagExplain
#   file         : __init__.py
#   file_relpath : src/diagexplain/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build-task pipeline.

Layers:
    * [`diagexplain.pipeline.executor`][]: builder, state machine and results.
    * [`diagexplain.pipeline.tasks`][]: concrete tasks.
    * [`diagexplain.pipeline.pipelines`][]: the named ``explain`` pipeline.

Nothing in this package imports Click; presentation belongs to the CLI.
"""

from __future__ import annotations
