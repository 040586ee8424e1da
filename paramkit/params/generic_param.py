"""String-addressable parameter values.

This module provides:
- ``GenericParam``: the capability every registry entry exposes
  (``set_value(str) -> bool`` / ``get_value() -> str``).
- ``SpecializedParam``: adapter over a host-side setter/getter pair.
- ``IntParam``/``FloatParam``/``BoolParam``/``ChoiceParam``/``StringParam``:
  self-storing typed values with bounds and choice validation.

Values always cross the registry boundary as strings. A value that cannot be
parsed, or that falls outside its bounds, is rejected with ``False`` and the
previous value is kept.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

LOGGER = logging.getLogger("paramkit.generic_param")

_TRUE_TOKENS = {"1", "true", "yes", "on", "y", "t"}
_FALSE_TOKENS = {"0", "false", "no", "off", "n", "f"}

PARAM_KINDS = ("int", "float", "bool", "str")


def _parse_bool(token: str) -> bool:
    lowered = token.strip().lower()
    if lowered in _TRUE_TOKENS:
        return True
    if lowered in _FALSE_TOKENS:
        return False
    raise ValueError(f"not a boolean token: {token!r}")


def _parse_int(token: str) -> int:
    text = token.strip()
    try:
        return int(text)
    except ValueError:
        as_float = float(text)
        if not math.isfinite(as_float) or not as_float.is_integer():
            raise ValueError(f"not an integer: {token!r}") from None
        return int(as_float)


def _parse_float(token: str) -> float:
    out = float(token.strip())
    if math.isnan(out):
        raise ValueError("NaN is not a valid parameter value")
    return out


_PARSERS: dict[str, Callable[[str], Any]] = {
    "int": _parse_int,
    "float": _parse_float,
    "bool": _parse_bool,
    "str": str,
}


def parse_value(kind: str, token: str) -> Any:
    """Parse ``token`` as ``kind``; raises ``ValueError`` when it does not fit."""
    parser = _PARSERS.get(kind)
    if parser is None:
        raise ValueError(f"Unsupported parameter kind '{kind}'")
    return parser(str(token))


def format_value(value: Any) -> str:
    """Canonical string form of a typed value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return repr(value)
    return str(value)


class GenericParam(ABC):
    """Named value that can be set and read through its string form."""

    def __init__(self, name: str, range_suggestion: str = ""):
        token = str(name or "").strip()
        if not token:
            raise ValueError("parameter name is required")
        self._name = token
        self.range_suggestion = str(range_suggestion or "")

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def set_value(self, value: str) -> bool:
        """Assign from a string; return ``False`` when the value is rejected."""

    @abstractmethod
    def get_value(self) -> str:
        """Return the canonical string form of the current value."""

    def __str__(self) -> str:
        return f"{self._name} = {self.get_value()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self.get_value()!r})"


class SpecializedParam(GenericParam):
    """Adapter exposing a host setter/getter pair as a ``GenericParam``."""

    def __init__(
        self,
        name: str,
        setter: Callable[[Any], Any],
        getter: Callable[[], Any] | None = None,
        *,
        kind: str = "str",
        range_suggestion: str = "",
    ):
        super().__init__(name, range_suggestion)
        if not callable(setter):
            raise TypeError(f"setter for '{self.name}' must be callable")
        if getter is not None and not callable(getter):
            raise TypeError(f"getter for '{self.name}' must be callable")
        if kind not in _PARSERS:
            raise ValueError(f"Unsupported parameter kind '{kind}' for '{self.name}'")
        self.kind = kind
        self._setter = setter
        self._getter = getter
        self._last: Any = None

    def set_value(self, value: str) -> bool:
        try:
            parsed = parse_value(self.kind, value)
            self._setter(parsed)
        except (TypeError, ValueError) as exc:
            LOGGER.debug("Rejected value %r for '%s': %s", value, self.name, exc)
            return False
        self._last = parsed
        return True

    def get_value(self) -> str:
        if self._getter is None:
            return format_value(self._last)
        return format_value(self._getter())


class _StoredParam(GenericParam):
    """Typed value held by the parameter itself."""

    kind = "str"

    def __init__(self, name: str, default: Any, range_suggestion: str = ""):
        super().__init__(name, range_suggestion)
        initial = parse_value(self.kind, format_value(default))
        if not self._accepts(initial):
            raise ValueError(f"Default {default!r} is not valid for '{self.name}'")
        self._value = initial

    @property
    def value(self) -> Any:
        return self._value

    def _accepts(self, parsed: Any) -> bool:
        return True

    def set_value(self, value: str) -> bool:
        try:
            parsed = parse_value(self.kind, value)
        except (TypeError, ValueError) as exc:
            LOGGER.debug("Rejected value %r for '%s': %s", value, self.name, exc)
            return False
        if not self._accepts(parsed):
            LOGGER.debug(
                "Rejected value %r for '%s': outside %s", value, self.name, self.range_suggestion
            )
            return False
        self._value = parsed
        return True

    def get_value(self) -> str:
        return format_value(self._value)


class _BoundedParam(_StoredParam):
    """Value checked against inclusive ``[low, high]`` bounds.

    ``step`` only feeds the range suggestion shown to UIs; values off the
    step grid are still accepted.
    """

    def __init__(
        self,
        name: str,
        default: Any,
        *,
        low: Any = None,
        high: Any = None,
        step: Any = None,
    ):
        if low is not None and high is not None and low > high:
            raise ValueError(f"low must not exceed high for '{name}'")
        self.low = low
        self.high = high
        self.step = step
        super().__init__(name, default, self._bounds_suggestion())

    def _bounds_suggestion(self) -> str:
        if self.low is None or self.high is None:
            return ""
        if self.step is None:
            return f"{format_value(self.low)}:{format_value(self.high)}"
        return f"{format_value(self.low)}:{format_value(self.step)}:{format_value(self.high)}"

    def _accepts(self, parsed: Any) -> bool:
        if self.low is not None and parsed < self.low:
            return False
        if self.high is not None and parsed > self.high:
            return False
        return True


class IntParam(_BoundedParam):
    kind = "int"

    def __init__(
        self,
        name: str,
        default: int,
        *,
        low: int | None = None,
        high: int | None = None,
        step: int | None = None,
    ):
        super().__init__(
            name,
            int(default),
            low=None if low is None else int(low),
            high=None if high is None else int(high),
            step=1 if step is None else int(step),
        )


class FloatParam(_BoundedParam):
    kind = "float"

    def __init__(
        self,
        name: str,
        default: float,
        *,
        low: float | None = None,
        high: float | None = None,
        step: float | None = None,
    ):
        super().__init__(
            name,
            float(default),
            low=None if low is None else float(low),
            high=None if high is None else float(high),
            step=None if step is None else float(step),
        )


class BoolParam(_StoredParam):
    kind = "bool"

    def __init__(self, name: str, default: bool = False):
        super().__init__(name, bool(default), "0,1")


class ChoiceParam(_StoredParam):
    """Enumerated value; members are compared by their string form."""

    kind = "str"

    def __init__(self, name: str, default: Any, *, choices: Sequence[Any]):
        self.choices = tuple(format_value(item) for item in choices)
        if not self.choices:
            raise ValueError(f"choices are required for '{name}'")
        super().__init__(name, default, ",".join(self.choices))

    def _accepts(self, parsed: Any) -> bool:
        return parsed in self.choices


class StringParam(_StoredParam):
    kind = "str"

    def __init__(self, name: str, default: str = ""):
        super().__init__(name, str(default))
