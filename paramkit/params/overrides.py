"""Build ``key -> value`` override mappings from CLI tokens and YAML documents."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from paramkit.params.generic_param import format_value
from paramkit.params.param_set import NAMESPACE_SEPARATOR, ParamSet

LOGGER = logging.getLogger("paramkit.overrides")


def parse_override_tokens(tokens: Sequence[str] | None) -> dict[str, str]:
    """Parse ``key=value`` tokens; the value keeps everything after the first ``=``."""
    out: dict[str, str] = {}
    for token in tokens or ():
        text = str(token)
        if "=" not in text:
            raise ValueError(f"Invalid override '{text}'. Expected key=value.")
        key, value = text.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid override '{text}'. Key is empty.")
        out[key] = value
    return out


def flatten_namespaces(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into dotted keys matching ``ParamSet.include`` prefixes."""
    out: dict[str, str] = {}
    for raw_key, value in data.items():
        key = str(raw_key)
        full_key = f"{prefix}{NAMESPACE_SEPARATOR}{key}" if prefix else key
        if isinstance(value, Mapping):
            out.update(flatten_namespaces(value, full_key))
        else:
            out[full_key] = format_value(value)
    return out


def load_overrides_file(path: str | Path) -> dict[str, str]:
    with open(path, encoding="utf-8") as file:
        loaded = yaml.safe_load(file)
    if loaded is None:
        return {}
    if not isinstance(loaded, Mapping):
        raise ValueError(f"Overrides file '{path}' must contain a mapping at the top level.")
    return flatten_namespaces(loaded)


def apply_overrides(param_set: ParamSet, overrides: Mapping[str, Any]) -> bool:
    LOGGER.info("Applying %d parameter override(s)", len(overrides))
    return param_set.set_params(overrides)
