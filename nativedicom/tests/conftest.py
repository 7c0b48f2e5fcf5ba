# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Fixtures used in different tests."""

import logging
from pathlib import Path

import pytest

from nativedicom import config


TESTFILES = Path(__file__).parent / "testfiles"


def get_testdata_file(name):
    """Return the path to the test file `name`."""
    return TESTFILES / name


@pytest.fixture
def sample_path():
    return get_testdata_file("sample.xml")


@pytest.fixture
def debug_logging():
    logger = logging.getLogger("nativedicom")
    handlers = list(logger.handlers)
    config.debug(True, False)
    yield
    config.debug(False, False)
    logger.handlers = handlers


@pytest.fixture
def no_write_indent():
    value = config.write_indent
    config.write_indent = None
    yield
    config.write_indent = value
