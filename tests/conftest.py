# topmark:header:start
#
#   project      : DiagExplain
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DiagExplain test suite.

This file sets up global fixtures, typed wrappers for pytest decorators, and
helpers to lay out throw-away projects on disk.

Notes:
    Tests that need a project should build it with
    [`write_project`][tests.conftest.write_project] under ``tmp_path`` rather
    than relying on files in the repository.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from diagexplain.config import logging
from diagexplain.constants import (
    BUILD_FILE_NAME,
    DEFAULT_TARGET_DIR_NAME,
    DEPENDENCIES_MANIFEST_NAME,
    ENV_LOG_LEVEL,
    ENV_MAVEN_REPOSITORY,
    PROJECT_MANIFEST_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot influence logging or dependency resolution.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_MAVEN_REPOSITORY, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole session so failures carry full detail."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_project(
    root: Path,
    *,
    manifest: str = '[package]\norg = "acme"\nname = "inventory"\nversion = "0.1.0"\n',
    dependencies: str | None = None,
    sources: dict[str, str] | None = None,
    last_build_time: float | None = None,
) -> Path:
    """Lay out a project under ``root`` and return ``root``.

    Args:
        root (Path): Directory to hold the project (created if missing).
        manifest (str): Content of ``Ballerina.toml``.
        dependencies (str | None): Content of ``Dependencies.toml`` (omitted if None).
        sources (dict[str, str] | None): Relative path -> content of source files.
        last_build_time (float | None): If set, write a build record to
            ``target/build`` with this timestamp.

    Returns:
        Path: The project root.
    """
    root.mkdir(parents=True, exist_ok=True)
    (root / PROJECT_MANIFEST_NAME).write_text(manifest, encoding="utf-8")
    if dependencies is not None:
        (root / DEPENDENCIES_MANIFEST_NAME).write_text(dependencies, encoding="utf-8")
    for rel, content in (sources or {}).items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    if last_build_time is not None:
        target = root / DEFAULT_TARGET_DIR_NAME
        target.mkdir(exist_ok=True)
        (target / BUILD_FILE_NAME).write_text(
            json.dumps({"last_build_time": last_build_time}), encoding="utf-8"
        )
    return root
