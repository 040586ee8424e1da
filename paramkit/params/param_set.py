"""Registry of string-addressable parameters.

``ParamSet`` maps keys to shared ``GenericParam`` objects. Several registries
may hold the same parameter object; setting it through one is visible through
every other. Failed lookups are reported on the registry's logger and surface
as ``False``/``None``, never as exceptions.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, TextIO

from paramkit.params.generic_param import GenericParam, SpecializedParam

NAMESPACE_SEPARATOR = "."


class ParamSet:
    """Named collection of parameters with bulk access and prefix-merge."""

    def __init__(self, logger: logging.Logger | None = None):
        self._params: dict[str, GenericParam] = {}
        self._logger = logger or logging.getLogger("paramkit.param_set")

    def add(self, param: GenericParam) -> GenericParam:
        if not isinstance(param, GenericParam):
            raise TypeError(f"Expected GenericParam, got {type(param).__name__}")
        self._params[param.name] = param
        return param

    def declare_param(
        self,
        name: str,
        setter: Callable[[Any], Any],
        getter: Callable[[], Any] | None = None,
        *,
        range_suggestion: str = "",
        kind: str = "str",
    ) -> SpecializedParam:
        param = SpecializedParam(
            name,
            setter,
            getter,
            kind=kind,
            range_suggestion=range_suggestion,
        )
        self.add(param)
        return param

    def has_param(self, key: str) -> bool:
        return key in self._params

    def _report_missing(self, key: str) -> None:
        self._logger.error("Parameter '%s' was not found", key)

    def set_param(self, key: str, value: Any) -> bool:
        param = self._params.get(key)
        if param is None:
            self._report_missing(key)
            return False
        return bool(param.set_value(str(value)))

    def set_params(self, kv: Mapping[str, Any]) -> bool:
        """Set every entry of ``kv``; continues past failures and ANDs the results."""
        result = True
        for key, value in kv.items():
            ok = self.set_param(key, value)
            result = result and ok
        return result

    def get_param(self, key: str) -> str | None:
        param = self._params.get(key)
        if param is None:
            self._report_missing(key)
            return None
        return param.get_value()

    def get_param_names(self) -> list[str]:
        return sorted(self._params)

    def get_param_values(self) -> list[str]:
        """Current values, aligned index-for-index with ``get_param_names()``."""
        return [self._params[name].get_value() for name in self.get_param_names()]

    def get_params(self) -> Mapping[str, GenericParam]:
        """Live read-only view of the backing parameters (no copies)."""
        return MappingProxyType(self._params)

    def get_params_snapshot(self, out: dict[str, str] | None = None) -> dict[str, str]:
        """Point-in-time ``key -> value`` strings, written into ``out`` when given."""
        target = {} if out is None else out
        for key, param in self._params.items():
            target[key] = param.get_value()
        return target

    def include(self, other: ParamSet, prefix: str = "") -> None:
        """Share every parameter of ``other``, namespaced as ``prefix.key`` if a prefix is set."""
        # Copied first so that ``other`` may be this registry.
        incoming = list(other.get_params().items())
        if not prefix:
            for key, param in incoming:
                self._params[key] = param
            return
        for key, param in incoming:
            self._params[f"{prefix}{NAMESPACE_SEPARATOR}{key}"] = param

    def clear(self) -> None:
        self._params.clear()

    def size(self) -> int:
        return len(self._params)

    def print(self, out: TextIO | None = None) -> None:
        # Storage order, not sorted.
        stream = sys.stdout if out is None else out
        for key, param in self._params.items():
            stream.write(f"{key} = {param.get_value()}\n")

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_param_names())

    def __getitem__(self, key: str) -> GenericParam:
        return self._params[key]

    def __repr__(self) -> str:
        return f"ParamSet({len(self._params)} params)"
