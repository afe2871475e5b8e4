import importlib
import logging

import pytest

import main
from config import Settings, settings


@pytest.fixture(autouse=True)
def _isolated_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_no_command_prints_usage(capsys):
    assert main.main([]) == 128
    assert "usage: kvdel" in capsys.readouterr().out


def test_help(capsys):
    assert main.main(["--help"]) == 0
    assert "del" in capsys.readouterr().out


def test_unknown_command(capsys):
    assert main.main(["put", "a", "b"]) == 128
    assert "unknown command 'put'" in capsys.readouterr().err


def test_bad_flags_fail_without_contacting_the_store(capsys):
    # nothing listens on this endpoint; validation must fail first
    assert main.main(["del", "--endpoint", "http://127.0.0.1:9", "--prefix", "--from-key", "a"]) == 128
    assert "cannot be set at the same time" in capsys.readouterr().err


def test_writes_json_log_file(tmp_path):
    main.main(["del", "--endpoint", "http://127.0.0.1:9", "a", "b", "c"])
    log_file = tmp_path / "logs" / "kvdel.jsonl"
    assert log_file.exists()


def test_invalid_endpoint_setting(monkeypatch, capsys):
    monkeypatch.setattr(Settings, "ENDPOINT", "etcd:2379")
    assert main.main(["del", "a"]) == 1
    assert "KVDEL_ENDPOINT" in capsys.readouterr().err


def test_malformed_timeout_env_is_reported(monkeypatch, capsys):
    settings_module = importlib.import_module("config.settings")
    monkeypatch.setattr(settings_module, "_ENV_ERRORS", [])
    monkeypatch.setenv("KVDEL_COMMAND_TIMEOUT", "soon")

    assert settings_module._float_env("KVDEL_COMMAND_TIMEOUT", 5.0) == 5.0
    assert main.main(["del", "a"]) == 1
    assert "KVDEL_COMMAND_TIMEOUT must be a number of seconds, got 'soon'" in capsys.readouterr().err
