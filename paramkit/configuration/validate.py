"""Runtime configuration validation."""

from __future__ import annotations

import logging
from pathlib import Path

from paramkit.configuration.schema import RuntimeConfig
from paramkit.params.param_set import NAMESPACE_SEPARATOR


def validate_runtime_config(runtime: RuntimeConfig) -> None:
    """Validate runtime configuration invariants."""
    level = runtime.system.log_level.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"system.log_level '{runtime.system.log_level}' is not a logging level.")

    if runtime.registry.namespace_separator != NAMESPACE_SEPARATOR:
        raise ValueError(
            f"registry.namespace_separator must be '{NAMESPACE_SEPARATOR}', "
            f"got '{runtime.registry.namespace_separator}'."
        )

    overrides_file = runtime.registry.overrides_file
    if overrides_file and not Path(overrides_file).is_file():
        raise ValueError(f"registry.overrides_file '{overrides_file}' does not exist.")
