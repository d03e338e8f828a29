# topmark:header:start
#
#   project      : DiagExplain
#   file         : exit_codes.py
#   file_relpath : src/diagexplain/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DiagExplain CLI.

DiagExplain aligns with the BSD `sysexits` convention where practical so that
other tooling can interpret failures consistently. Note that the `explain`
command deliberately exits with `SUCCESS` after a failed build-task pipeline:
that part of the command is best-effort and must not mask the explanation.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DiagExplain CLI.

    Attributes:
        SUCCESS: Successful execution (including a lenient pipeline failure).
        FAILURE: Generic failure; used for `explain` argument validation errors.
        USAGE_ERROR: Command-line invocation error (invalid flags). Mirrors
            BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
