from __future__ import annotations

import logging
import textwrap

import pytest
from paramkit import configure


@pytest.fixture
def runtime_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.yaml"
    path.write_text(
        textwrap.dedent(
            f"""
            system:
              log_level: "INFO"
              log_dir: "{tmp_path / 'logs'}"
            """
        ).strip(),
        encoding="utf-8",
    )
    root = logging.getLogger()
    root_level = root.level
    yield path
    package_logger = logging.getLogger("paramkit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
    for handler in list(root.handlers):
        if getattr(handler, "_paramkit_root_file_handler", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(root_level)


def test_demo_registry_namespaces_sampler_params():
    params = configure.build_demo_param_set()
    assert params.get_param_names() == [
        "goal_bias",
        "intermediate_states",
        "range",
        "sampler.seed",
        "sampler.stddev",
        "sampler.strategy",
    ]


def test_cli_applies_overrides_and_prints_sorted(runtime_config, capsys):
    code = configure.main(
        [
            "--config",
            str(runtime_config),
            "--set",
            "range=2.5",
            "--set",
            "sampler.strategy=gaussian",
            "--sorted",
        ]
    )
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "goal_bias = 0.05",
        "intermediate_states = 0",
        "range = 2.5",
        "sampler.seed = 0",
        "sampler.stddev = 1.0",
        "sampler.strategy = gaussian",
    ]


def test_cli_file_then_set_precedence(runtime_config, tmp_path, capsys):
    overrides = tmp_path / "overrides.yaml"
    overrides.write_text("range: 4.0\nsampler:\n  seed: 9\n", encoding="utf-8")
    code = configure.main(
        ["--config", str(runtime_config), "--file", str(overrides), "--set", "range=6"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "range = 6.0" in out
    assert "sampler.seed = 9" in out


def test_cli_reports_failure_exit_code(runtime_config, capsys):
    code = configure.main(
        ["--config", str(runtime_config), "--set", "missing=1", "--set", "goal_bias=0.5"]
    )
    out = capsys.readouterr().out
    assert code == 1
    assert "goal_bias = 0.5" in out


def test_cli_non_strict_registry_exits_zero(runtime_config, monkeypatch, capsys):
    monkeypatch.setenv("PK__REGISTRY__STRICT", "false")
    code = configure.main(["--config", str(runtime_config), "--set", "goal_bias=2"])
    capsys.readouterr()
    assert code == 0


def test_cli_malformed_token(runtime_config, capsys):
    code = configure.main(["--config", str(runtime_config), "--set", "range"])
    capsys.readouterr()
    assert code == 2


def test_cli_missing_overrides_file(runtime_config, tmp_path, capsys):
    code = configure.main(["--config", str(runtime_config), "--file", str(tmp_path / "nope.yaml")])
    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""


@pytest.mark.parametrize("text", ["range: [1, 2\n", "- a\n- b\n"])
def test_cli_malformed_overrides_file(runtime_config, tmp_path, capsys, text):
    overrides = tmp_path / "overrides.yaml"
    overrides.write_text(text, encoding="utf-8")
    code = configure.main(["--config", str(runtime_config), "--file", str(overrides)])
    capsys.readouterr()
    assert code == 2
