# topmark:header:start
#
#   project      : DiagExplain
#   file         : colored_enum.py
#   file_relpath : src/diagexplain/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` is a `str, Enum` whose `.value` is a plain string and which
carries a colorizer (typically a `yachalk` style) exposed via `.color`.

Example:
    ```python
    from yachalk import chalk

    class Cluster(ColoredStrEnum):
        OK    = ("ok", chalk.green)
        ERROR = ("error", chalk.red_bright)

    print(Cluster.OK.value)            # 'ok'
    print(Cluster.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`.
    """

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        # Keep the enum *value* a plain string; the colorizer lives beside it
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        return self._value_

    @property
    def color(self) -> Colorizer:
        return self._color

    def render(self) -> str:
        """Return the value decorated with the member's colorizer."""
        return self._color(self._value_)
