"""Command-line configurator for parameter registries.

Usage:
    python -m paramkit.configure --set range=2.5 --set sampler.seed=7
    python -m paramkit.configure --file overrides.yaml --sorted
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import yaml
from paramkit.configuration import load_runtime_config, validate_runtime_config
from paramkit.params import (
    BoolParam,
    ChoiceParam,
    FloatParam,
    IntParam,
    ParamSet,
    apply_overrides,
    load_overrides_file,
    parse_override_tokens,
)
from paramkit.utils.logging_utils import setup_logging


class _PlannerSettings:
    def __init__(self):
        self.range = 0.0
        self.goal_bias = 0.05

    def set_range(self, value: float) -> None:
        if value < 0.0:
            raise ValueError("range must be non-negative")
        self.range = value

    def set_goal_bias(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError("goal_bias must be in [0, 1]")
        self.goal_bias = value


def build_demo_param_set() -> ParamSet:
    """Planner registry with a sampler registry merged under ``sampler``."""
    settings = _PlannerSettings()
    planner = ParamSet()
    planner.declare_param(
        "range",
        settings.set_range,
        lambda: settings.range,
        kind="float",
        range_suggestion="0.:1.:10000.",
    )
    planner.declare_param(
        "goal_bias",
        settings.set_goal_bias,
        lambda: settings.goal_bias,
        kind="float",
        range_suggestion="0.:.05:1.",
    )
    planner.add(BoolParam("intermediate_states", False))

    sampler = ParamSet()
    sampler.add(IntParam("seed", 0, low=0, high=2**31 - 1))
    sampler.add(ChoiceParam("strategy", "uniform", choices=("uniform", "gaussian", "bridge")))
    sampler.add(FloatParam("stddev", 1.0, low=0.0, high=100.0))
    planner.include(sampler, "sampler")
    return planner


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect and set registry parameters.")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Parameter override; may be repeated.",
    )
    parser.add_argument("--file", default="", help="YAML document of parameter overrides.")
    parser.add_argument("--config", default=None, help="Runtime config YAML path.")
    parser.add_argument(
        "--sorted",
        action="store_true",
        help="Print parameters in sorted name order instead of storage order.",
    )
    return parser


def main(argv: Sequence[str] | None = None, param_set: ParamSet | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    runtime = load_runtime_config(config_path=args.config)
    validate_runtime_config(runtime)
    logger = setup_logging(
        "paramkit",
        level=runtime.system.log_level,
        log_dir=runtime.system.log_dir,
        json_log=runtime.system.json_log,
    )

    try:
        cli_overrides = parse_override_tokens(args.overrides)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    params = param_set if param_set is not None else build_demo_param_set()
    ok = True
    for path in (runtime.registry.overrides_file, args.file):
        if not path:
            continue
        try:
            file_overrides = load_overrides_file(path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.error("Could not load overrides file '%s': %s", path, exc)
            return 2
        ok = apply_overrides(params, file_overrides) and ok
    if cli_overrides:
        ok = apply_overrides(params, cli_overrides) and ok

    if args.sorted:
        for name, value in zip(params.get_param_names(), params.get_param_values()):
            sys.stdout.write(f"{name} = {value}\n")
    else:
        params.print(sys.stdout)

    if ok:
        return 0
    if runtime.registry.strict:
        logger.error("One or more parameter overrides were not applied.")
        return 1
    logger.warning("One or more parameter overrides were not applied.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
