import logging
import sys

from dirsize.logging_config import setup_logging


def test_setup_logging_targets_stderr_with_env_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.setenv("DIRSIZE_LOG_LEVEL", "debug")

    setup_logging()

    assert seen["stream"] is sys.stderr
    assert seen["level"] == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.setenv("DIRSIZE_LOG_LEVEL", "chatty")

    setup_logging()

    assert seen["level"] == logging.INFO
