"""Tests for Secure Window configuration loading."""

from secure_window.core import config as config_module
from secure_window.core.config import AppConfig, BackendName, get_config, set_config


def test_config_defaults() -> None:
    config = AppConfig()
    assert config.channel.name == "secure_window"
    assert config.backend.name is BackendName.AUTO
    assert config.backend.x11_display is None
    assert config.log_level == "WARNING"
    assert config.secure_on_start is False


def test_config_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SECURE_WINDOW_BACKEND__NAME", "x11")
    monkeypatch.setenv("SECURE_WINDOW_CHANNEL__NAME", "privacy")
    monkeypatch.setenv("SECURE_WINDOW_SECURE_ON_START", "true")

    config = AppConfig()
    assert config.backend.name is BackendName.X11
    assert config.channel.name == "privacy"
    assert config.secure_on_start is True


def test_config_file(tmp_path) -> None:
    path = tmp_path / "nested" / "config.toml"
    config = AppConfig(log_level="DEBUG", backend={"name": "memory"})
    config.save(path)

    assert 'log_level = "DEBUG"' in path.read_text()
    loaded = AppConfig.load(path)
    assert loaded.log_level == "DEBUG"
    assert loaded.backend.name is BackendName.MEMORY


def test_missing_file_gives_defaults(tmp_path) -> None:
    assert AppConfig.load(tmp_path / "absent.toml") == AppConfig()


def test_global_config_is_cached() -> None:
    first = get_config()
    assert get_config() is first

    replacement = AppConfig(log_level="INFO")
    set_config(replacement)
    assert get_config() is replacement
    assert config_module._config is replacement


def test_malformed_file_falls_back_to_defaults(tmp_path, caplog) -> None:
    path = tmp_path / "config.toml"
    path.write_text("log_level = \n")

    assert AppConfig.load(path) == AppConfig()
    assert "Ignoring unreadable config file" in caplog.text


def test_unknown_key_falls_back_to_defaults(tmp_path, caplog) -> None:
    path = tmp_path / "config.toml"
    path.write_text('loglevel = "DEBUG"\n')

    assert AppConfig.load(path) == AppConfig()
    assert "Ignoring unreadable config file" in caplog.text


def test_bad_config_file_does_not_break_cli(tmp_path, monkeypatch, capsys) -> None:
    from secure_window.__main__ import main

    path = tmp_path / "broken.toml"
    path.write_text("[backend\n")
    monkeypatch.setattr(config_module, "CONFIG_FILE", path)

    assert main(["--backend", "memory", "--window", "16", "on"]) == 0
    assert capsys.readouterr().out.strip() == "secureModeOn"
