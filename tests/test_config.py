"""Tests for configuration loading."""

from __future__ import annotations

import os

import pytest

from minifa import config


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("true", True), ("YES", True), (" True ", True),
    ("0", False), ("false", False), ("", False), ("maybe", False),
])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("MINIFA_TEST_FLAG", value)
    assert config.env_flag("MINIFA_TEST_FLAG") is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("MINIFA_TEST_FLAG", raising=False)
    assert config.env_flag("MINIFA_TEST_FLAG") is False
    assert config.env_flag("MINIFA_TEST_FLAG", default=True) is True


def test_totp_constants():
    assert config.DEFAULT_TIME_STEP == 30
    assert config.CODE_DIGITS == 6
    assert config.EXPORT_FILENAME == "totp-accounts.csv"


def test_refresh_interval_default(monkeypatch):
    monkeypatch.delenv("MINIFA_REFRESH_INTERVAL", raising=False)
    assert config.get_refresh_interval() == 1.0


def test_refresh_interval_from_env(monkeypatch):
    monkeypatch.setenv("MINIFA_REFRESH_INTERVAL", "0.25")
    assert config.get_refresh_interval() == 0.25


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_refresh_interval_invalid(monkeypatch, value):
    monkeypatch.setenv("MINIFA_REFRESH_INTERVAL", value)
    assert config.get_refresh_interval() == config.DEFAULT_REFRESH_INTERVAL


def test_data_directory_override(monkeypatch, tmp_path):
    target = tmp_path / "data"
    monkeypatch.setenv("MINIFA_DATA_DIR", str(target))
    assert config.get_data_directory() == str(target)
    assert target.is_dir()


def test_data_directory_not_created_on_request(monkeypatch, tmp_path):
    target = tmp_path / "data"
    monkeypatch.setenv("MINIFA_DATA_DIR", str(target))
    config.get_data_directory(create=False)
    assert not target.exists()


def test_portable_mode(monkeypatch, tmp_path):
    monkeypatch.delenv("MINIFA_DATA_DIR", raising=False)
    monkeypatch.setenv("MINIFA_PORTABLE", "1")
    monkeypatch.chdir(tmp_path)
    assert config.get_data_directory() == os.path.join(str(tmp_path), ".minifa")


def test_log_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("MINIFA_LOG_DIR", raising=False)
    monkeypatch.setenv("MINIFA_DATA_DIR", str(tmp_path))
    assert config.get_log_directory() == os.path.join(str(tmp_path), "logs")

    monkeypatch.setenv("MINIFA_LOG_DIR", str(tmp_path / "elsewhere"))
    assert config.get_log_directory() == str(tmp_path / "elsewhere")
