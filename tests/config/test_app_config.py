#!filepath: tests/config/test_app_config.py
import pytest
import yaml
from pydantic import ValidationError

from deoptlens.config import AppConfig, LogConfig, ViewConfig
from deoptlens.utils.logger import init_logging, logs


@pytest.fixture
def sample_config_file(tmp_path):
    data = {
        "log": {"dir": None, "level": "DEBUG"},
        "view": {"unknown_location_text": "n/a", "timestamp_precision": 1},
    }
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_default_config_loads(monkeypatch):
    monkeypatch.delenv("DEOPTLENS_LOG_LEVEL", raising=False)
    cfg = AppConfig.load()
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.view, ViewConfig)
    assert cfg.view.history_uri_scheme == "deoptlens-function-history"


def test_values_from_file(sample_config_file, monkeypatch):
    monkeypatch.delenv("DEOPTLENS_LOG_LEVEL", raising=False)
    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.log.level == "DEBUG"
    assert cfg.view.unknown_location_text == "n/a"
    assert cfg.view.timestamp_precision == 1
    assert cfg.view.address_width == 12


def test_env_overrides_log_level(sample_config_file, monkeypatch):
    monkeypatch.setenv("DEOPTLENS_LOG_LEVEL", "ERROR")
    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.log.level == "ERROR"


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path="/does/not/exist.yml")


def test_invalid_value_fails(tmp_path, monkeypatch):
    monkeypatch.delenv("DEOPTLENS_LOG_LEVEL", raising=False)
    bad = tmp_path / "bad.yaml"
    bad.write_text(yaml.safe_dump({"view": {"timestamp_precision": -1}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad))


def test_init_logging_with_file_sink(tmp_path):
    init_logging(LogConfig(dir=str(tmp_path / "logs"), level="INFO"))
    logs.info("hello")
    assert (tmp_path / "logs").is_dir()
    init_logging(LogConfig())
