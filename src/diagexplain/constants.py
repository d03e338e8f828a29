# topmark:header:start
#
#   project      : DiagExplain
#   file         : constants.py
#   file_relpath : src/diagexplain/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagExplain Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

DIAGEXPLAIN_VERSION: str = get_version("diagexplain")

# Name of the console script, used in usage hints:
CLI_NAME: Final[str] = "diagexplain"
EXPLAIN_COMMAND: Final[str] = "explain"

# Diagnostic codes emitted by the compiler front end share this prefix:
COMPILER_ERROR_PREFIX: Final[str] = "BCE"

# Bundled explanation texts live in this resource directory of the package below:
ERROR_CODES_PACKAGE: Final[str] = "diagexplain.diagnostic"
ERROR_CODES_DIR: Final[str] = "error-codes"
EXPLANATION_SUFFIX: Final[str] = ".md"

# Project layout
PROJECT_MANIFEST_NAME: Final[str] = "Ballerina.toml"
DEPENDENCIES_MANIFEST_NAME: Final[str] = "Dependencies.toml"
SOURCE_FILE_SUFFIX: Final[str] = ".bal"
DEFAULT_TARGET_DIR_NAME: Final[str] = "target"
BUILD_FILE_NAME: Final[str] = "build"
PLATFORM_LIBS_DIR_NAME: Final[str] = "platform-libs"

# Environment variables
ENV_LOG_LEVEL: Final[str] = "DIAGEXPLAIN_LOG_LEVEL"
ENV_MAVEN_REPOSITORY: Final[str] = "DIAGEXPLAIN_MAVEN_REPOSITORY"
