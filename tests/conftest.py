"""Shared fixtures."""

import logging

import pytest

from tictactoe.game.players import Player
from tictactoe.logging_config import ROOT_LOGGER

from tests.helpers import O, X, ScriptedIO


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def scripted_io():
    return ScriptedIO()


@pytest.fixture
def players():
    return (Player("Ada", O), Player("Bob", X))
