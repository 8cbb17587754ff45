"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from pickingtrainer.logger_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_installs_rich_handler(restore_root_logger) -> None:
    setup_logging("debug")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], RichHandler)


def test_setup_logging_unknown_level_defaults_to_info(restore_root_logger) -> None:
    setup_logging("chatty")
    assert restore_root_logger.level == logging.INFO
