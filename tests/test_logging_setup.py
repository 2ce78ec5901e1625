"""Tests für logging_setup.py"""

import logging

import pytest

from src.aks.logging_setup import configure_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_handler_added_once(clean_root_logger):
    configure_logging("DEBUG")
    configure_logging("DEBUG")
    own = [h for h in clean_root_logger.handlers if getattr(h, "_aks_handler", False)]
    assert len(own) == 1
    assert clean_root_logger.level == logging.DEBUG


def test_level_from_environment(clean_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    configure_logging()
    assert clean_root_logger.level == logging.WARNING
