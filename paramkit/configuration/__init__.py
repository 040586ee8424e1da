"""Typed configuration API."""

from paramkit.configuration.loader import load_runtime_config
from paramkit.configuration.schema import RegistryConfig, RuntimeConfig, SystemConfig
from paramkit.configuration.validate import validate_runtime_config

__all__ = [
    "RegistryConfig",
    "RuntimeConfig",
    "SystemConfig",
    "load_runtime_config",
    "validate_runtime_config",
]
