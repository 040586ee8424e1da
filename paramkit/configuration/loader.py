"""Configuration loader with env overrides."""

import json
import os
from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeVar

import yaml
from dotenv import load_dotenv
from paramkit.configuration.schema import RegistryConfig, RuntimeConfig, SystemConfig

T = TypeVar("T")

ENV_PREFIX = "PK_"


def _as_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return default


def load_yaml_config(config_path: str = "config.yaml") -> dict[str, Any]:
    """Load YAML config from the working directory or an absolute path.

    A missing file yields an empty mapping so that defaults apply.
    """
    raw_path = Path(config_path)
    candidates: list[Path] = [raw_path] if raw_path.is_absolute() else [Path.cwd() / raw_path]
    path = next((candidate for candidate in candidates if candidate.exists()), None)
    if path is None:
        return {}
    with open(path, encoding="utf-8") as file:
        loaded = yaml.safe_load(file) or {}
    if not isinstance(loaded, dict):
        return {}
    return loaded


def _parse_env_scalar(raw: str) -> Any:
    lowered = raw.strip().lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if raw.strip().startswith(("[", "{")):
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            return raw
    try:
        if "." in raw:
            return float(raw)
        return int(raw)
    except ValueError:
        return raw


def _set_nested_value(container: dict[str, Any], path_tokens: list[str], value: Any) -> None:
    cur: dict[str, Any] = container
    for token in path_tokens[:-1]:
        key = token.lower()
        node = cur.get(key)
        if not isinstance(node, dict):
            node = {}
            cur[key] = node
        cur = node
    cur[path_tokens[-1].lower()] = value


def apply_env_overrides(data: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Apply `PK_` env overrides onto the config dictionary."""
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in data.items()}
    for key, raw_value in env.items():
        if not key.startswith(ENV_PREFIX):
            continue
        if key.startswith("PK__"):
            tokens = [token for token in key[4:].split("__") if token]
        else:
            tokens = [token for token in key[3:].split("__") if token]
        # Single-token keys such as PK_CONFIG_PATH are not config sections.
        if len(tokens) < 2:
            continue
        _set_nested_value(merged, tokens, _parse_env_scalar(raw_value))
    return merged


def _coerce_dataclass_kwargs(raw: dict[str, Any], model_cls: type[T]) -> dict[str, Any]:
    allowed = {item.name for item in fields(model_cls)}
    return {key: value for key, value in raw.items() if key in allowed}


def build_runtime_config(data: dict[str, Any], env: Mapping[str, str]) -> RuntimeConfig:
    """Build a strongly typed runtime config from raw dict + environment."""
    mapped = apply_env_overrides(data, env)

    system_raw = mapped.get("system", {}) if isinstance(mapped.get("system", {}), dict) else {}
    registry_raw = (
        mapped.get("registry", {}) if isinstance(mapped.get("registry", {}), dict) else {}
    )

    runtime = RuntimeConfig(
        system=SystemConfig(**_coerce_dataclass_kwargs(system_raw, SystemConfig)),
        registry=RegistryConfig(**_coerce_dataclass_kwargs(registry_raw, RegistryConfig)),
    )

    runtime.system.log_level = str(runtime.system.log_level or "INFO").strip().upper()
    runtime.system.json_log = _as_bool(runtime.system.json_log, False)
    runtime.system.log_dir = str(runtime.system.log_dir or "").strip() or "logs"
    runtime.registry.namespace_separator = str(runtime.registry.namespace_separator)
    runtime.registry.overrides_file = str(runtime.registry.overrides_file or "").strip()
    runtime.registry.strict = _as_bool(runtime.registry.strict, True)
    return runtime


def load_runtime_config(
    config_path: str | None = None, env: Mapping[str, str] | None = None
) -> RuntimeConfig:
    """Load `.env`, read YAML, apply overrides, and produce typed config."""
    load_dotenv()
    effective_env = os.environ if env is None else env
    path = config_path or effective_env.get("PK_CONFIG_PATH") or "config.yaml"
    raw = load_yaml_config(config_path=path)
    return build_runtime_config(raw, effective_env)
