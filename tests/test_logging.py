"""Tests for logging and environment-driven settings."""

import logging

import pytest

from tictactoe.config import color_enabled
from tictactoe.core.grid import Grid
from tictactoe.logging_config import FORMATS, ROOT_LOGGER, get_logger, setup_logging

from tests.helpers import O


def test_records_go_to_stderr(capsys):
    setup_logging("INFO")
    get_logger("tictactoe.game.controller").info("hello from the controller")

    out, err = capsys.readouterr()
    assert "hello from the controller" in err
    assert "hello from the controller" not in out
    assert "tictactoe.game.controller - INFO" in err


def test_grid_placement_logged_at_debug(capsys):
    setup_logging("DEBUG")
    Grid.empty().place(0, 0, O)

    err = capsys.readouterr().err
    assert "tictactoe.core.grid - DEBUG - placed o at (0, 0)" in err


def test_warning_level_hides_debug(capsys):
    setup_logging("WARNING")
    Grid.empty().place(1, 1, O)
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize("level", ["loud", "", "BASIC_FORMAT"])
def test_unknown_level_falls_back_to_warning(level):
    assert setup_logging(level).level == logging.WARNING


def test_level_names_are_case_insensitive():
    assert setup_logging("debug").level == logging.DEBUG


@pytest.mark.parametrize("style,expected", [("detailed", "detailed"), ("simple", "simple"), ("json", "simple")])
def test_format_style(style, expected):
    logger = setup_logging("INFO", style)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == FORMATS[expected]


def test_setup_twice_keeps_one_handler():
    setup_logging("INFO")
    logger = setup_logging("ERROR")
    assert len(logger.handlers) == 1
    assert logger.name == ROOT_LOGGER


def test_module_loggers_share_the_package_tree():
    root = setup_logging("INFO")
    log = get_logger("tictactoe.core.grid")
    assert log.name == "tictactoe.core.grid"

    parents = []
    node = log.parent
    while node is not None:
        parents.append(node)
        node = node.parent
    assert root in parents


@pytest.mark.parametrize("environ,expected", [
    ({}, True),
    ({"NO_COLOR": ""}, True),
    ({"NO_COLOR": "1"}, False),
    ({"NO_COLOR": "yes", "TERM": "xterm"}, False),
])
def test_no_color(environ, expected):
    assert color_enabled(environ) is expected
