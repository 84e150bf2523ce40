# File: tests/test_config_loader.py

"""
Tests for configuration loading, logging setup and seed resolution in
`aqi_sim/config_loader.py`.
"""
import logging
import pytest
import sys
import os

# --- Setup Project Root Path ---
TEST_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(TEST_DIR, '..'))
if PROJECT_ROOT not in sys.path:
     sys.path.insert(0, PROJECT_ROOT)

from aqi_sim import config_loader
from aqi_sim.config_loader import (
    CONFIG, DEFAULT_CONFIG_PATH, SEED_ENV_VAR, get_config, get_seed, init_config, load_config, setup_logging
)
from aqi_sim.exceptions import ConfigError, ConfigFileNotFoundError


@pytest.fixture(autouse=True)
def clear_seed_env(monkeypatch):
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)


# --- load_config ---

def test_project_config_loads():
    config = load_config(DEFAULT_CONFIG_PATH)
    assert "logging" in config
    assert config["simulation"]["seed"] is None

def test_get_config_returns_module_config():
    assert get_config() is CONFIG

def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigFileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))

def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("logging: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(str(path))

def test_load_config_non_mapping_root(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(str(path))

def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)) == {}


# --- setup_logging ---

def test_setup_logging_console_level():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging({"logging": {"level": "DEBUG", "log_console_level": "ERROR"}})
        console = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
        assert len(console) == 1
        assert console[0].level == logging.ERROR
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


# --- get_seed ---

def test_seed_override_wins(monkeypatch):
    monkeypatch.setenv(SEED_ENV_VAR, "3")
    assert get_seed({"simulation": {"seed": 1}}, override=9) == 9

def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv(SEED_ENV_VAR, "3")
    assert get_seed({"simulation": {"seed": 1}}) == 3

def test_seed_from_config():
    assert get_seed({"simulation": {"seed": 1}}) == 1

def test_seed_defaults_to_none():
    assert get_seed({}) is None
    assert get_seed({"simulation": None}) is None

def test_invalid_environment_seed(monkeypatch):
    monkeypatch.setenv(SEED_ENV_VAR, "abc")
    with pytest.raises(ConfigError):
        get_seed({})

@pytest.mark.parametrize("bad_seed", ["12", 1.5, True])
def test_invalid_config_seed(bad_seed):
    with pytest.raises(ConfigError):
        get_seed({"simulation": {"seed": bad_seed}})

@pytest.mark.parametrize("source", ["override", "env", "config"])
def test_negative_seed_is_rejected(monkeypatch, source):
    """numpy refuses negative seeds, so they are reported as config errors instead."""
    if source == "env":
        monkeypatch.setenv(SEED_ENV_VAR, "-3")
    with pytest.raises(ConfigError):
        if source == "override":
            get_seed({}, override=-1)
        else:
            get_seed({"simulation": {"seed": -2}})

def test_zero_seed_is_valid():
    assert get_seed({}, override=0) == 0


# --- init_config ---

def test_missing_default_config_logs_info_only(monkeypatch, tmp_path, caplog):
    missing = str(tmp_path / "config" / "config.yaml")
    monkeypatch.setattr(config_loader, "DEFAULT_CONFIG_PATH", missing)
    caplog.set_level(logging.INFO)
    assert init_config(missing) == {}
    assert any("Using built-in defaults" in r.getMessage() for r in caplog.records)
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

def test_missing_custom_config_logs_warning(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    assert init_config(str(tmp_path / "custom.yaml")) == {}
    assert any(r.levelno == logging.WARNING for r in caplog.records)
