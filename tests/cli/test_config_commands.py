"""Tests for the configuration CLI commands."""

# pylint: disable=missing-function-docstring

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from systems_locator.cli import main_app
from systems_locator.cli.configuration import load_configuration, render_config

runner = CliRunner()

SAMPLE_CONFIG = '''
class Audio:
    pass


class Input:
    pass


class SampleConfig:
    def configure(self, builder):
        builder.prefab_path = "Systems"
        builder.prefab_paths.append("Debug")
        builder.add(Audio, required=True)
        builder.add(Input, create_if_not_present=True)


class Outer:
    class Inner:
        pass


def nested(builder):
    builder.add(Outer.Inner)


def empty(builder):
    pass


NOT_CALLABLE = 3
'''


@pytest.fixture
def config_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "sample_locator_config.py").write_text(SAMPLE_CONFIG, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "sample_locator_config"


def test_init_writes_scaffold(tmp_path: Path):
    target = tmp_path / "pkg" / "game_config.py"

    result = runner.invoke(main_app, ["config", "init", "--path", str(target)])

    assert result.exit_code == 0
    source = target.read_text(encoding="utf-8")
    assert "class GameConfig:" in source
    assert 'builder.prefab_path = "Systems"' in source
    compile(source, str(target), "exec")


def test_init_refuses_to_overwrite(tmp_path: Path):
    target = tmp_path / "game_config.py"
    target.write_text("# mine\n", encoding="utf-8")

    result = runner.invoke(main_app, ["config", "init", "--path", str(target)])

    assert result.exit_code == 1
    assert target.read_text(encoding="utf-8") == "# mine\n"


def test_init_force_overwrites(tmp_path: Path):
    target = tmp_path / "game_config.py"
    target.write_text("# mine\n", encoding="utf-8")

    result = runner.invoke(
        main_app,
        ["config", "init", "--path", str(target), "--force", "--class-name", "LevelConfig"],
    )

    assert result.exit_code == 0
    assert "class LevelConfig:" in target.read_text(encoding="utf-8")


def test_render_config_uses_prefab_path():
    assert 'builder.prefab_path = "Global/Systems"' in render_config("Cfg", "Global/Systems")


def test_inspect_lists_declared_systems(config_module: str):
    result = runner.invoke(main_app, ["config", "inspect", f"{config_module}:SampleConfig"])

    assert result.exit_code == 0
    assert "Audio" in result.output
    assert "Input" in result.output
    assert "Debug" in result.output


def test_inspect_empty_configuration(config_module: str):
    result = runner.invoke(main_app, ["config", "inspect", f"{config_module}:empty"])

    assert result.exit_code == 0
    assert "No systems declared" in result.output


def test_inspect_bad_target_exits_with_error():
    result = runner.invoke(main_app, ["config", "inspect", "no_colon_here"])

    assert result.exit_code == 1
    assert "MODULE:ATTRIBUTE" in result.output


def test_load_configuration_rejects_non_callables(config_module: str):
    with pytest.raises(ValueError):
        load_configuration(f"{config_module}:NOT_CALLABLE")
    with pytest.raises(ValueError):
        load_configuration(f"{config_module}:missing")


def test_inspect_shows_nested_class_under_its_module(config_module: str):
    result = runner.invoke(main_app, ["config", "inspect", f"{config_module}:nested"])

    assert result.exit_code == 0
    assert "Outer.Inner" in result.output
    assert f"{config_module}.Outer" not in result.output


def test_load_configuration_imports_from_cwd_without_leaking_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    (tmp_path / "cwd_locator_config.py").write_text(SAMPLE_CONFIG, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    before = list(sys.path)

    configure = load_configuration("cwd_locator_config:SampleConfig")

    assert callable(configure)
    assert sys.path == before
