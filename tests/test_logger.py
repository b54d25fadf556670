"""Tests for qlparse logging setup."""

import logging

from rich.logging import RichHandler

from qlparse.logger import LOGGER, setup_logging
from qlparse.parser import parse_query


def test_setup_logging_sets_level():
    logger = setup_logging("DEBUG")
    assert logger is LOGGER
    assert logger.level == logging.DEBUG
    setup_logging("warning")
    assert LOGGER.level == logging.WARNING


def test_setup_logging_adds_one_handler():
    setup_logging("INFO")
    setup_logging("INFO")
    assert sum(isinstance(h, RichHandler) for h in LOGGER.handlers) == 1


def test_parser_logs_root_shape(caplog):
    caplog.set_level(logging.DEBUG, logger="qlparse")
    parse_query("{ a b }")
    assert "query root with 2 fields" in caplog.text


def test_parser_logs_mutation(caplog):
    caplog.set_level(logging.DEBUG, logger="qlparse")
    parse_query("mutation")
    assert "mutation root" in caplog.text
