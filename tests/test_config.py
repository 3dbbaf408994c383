import logging

import pytest

from crisp import config


def test_defaults(monkeypatch):
    for var in ("CRISP_RECURSION_LIMIT", "CRISP_PROMPT", "CRISP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_recursion_limit() == 5000
    assert config.get_prompt() == "> "
    assert config.get_log_level() == logging.WARNING


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("CRISP_RECURSION_LIMIT", " 20000 ")
    monkeypatch.setenv("CRISP_LOG_LEVEL", "debug")
    assert config.get_recursion_limit() == 20000
    assert config.get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("CRISP_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING


@pytest.mark.parametrize("raw", ["lots", "0", "-5"])
def test_bad_recursion_limit(monkeypatch, raw):
    monkeypatch.setenv("CRISP_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError):
        config.get_recursion_limit()
