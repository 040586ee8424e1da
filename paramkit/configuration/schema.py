"""Typed runtime configuration schema."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SystemConfig:
    """System-level runtime settings."""

    log_level: str = "INFO"
    json_log: bool = False
    log_dir: str = "logs"


@dataclass(slots=True)
class RegistryConfig:
    """Parameter registry settings.

    ``namespace_separator`` is fixed to ``"."`` by ``ParamSet.include``; the
    setting is only checked by ``validate_runtime_config``, never applied.
    """

    namespace_separator: str = "."
    overrides_file: str = ""
    strict: bool = True


@dataclass(slots=True)
class RuntimeConfig:
    """Full runtime configuration bundle."""

    system: SystemConfig = field(default_factory=SystemConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)
