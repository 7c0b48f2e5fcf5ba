# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Unit tests for the nativedicom.config module."""

import logging

from nativedicom import config
from nativedicom.config import debug
from nativedicom.filereader import xmlread


class TestDebug:
    """Tests for config.debug()."""

    def setup_method(self):
        self.logger = logging.getLogger("nativedicom")

    def teardown_method(self):
        # Reset to just NullHandler
        self.logger.handlers = [self.logger.handlers[0]]
        debug(False, False)

    def test_default(self, sample_path, caplog):
        """Test that the default logging handler is a NullHandler."""
        assert 1 == len(self.logger.handlers)
        assert isinstance(self.logger.handlers[0], logging.NullHandler)
        assert logging.WARNING == self.logger.level
        assert not config.debugging

        with caplog.at_level(logging.DEBUG, logger="nativedicom"):
            xmlread(sample_path)

            assert "Reading file" in caplog.text
            assert "top-level attribute(s)" not in caplog.text

    def test_debug_on_handler_null(self, sample_path, caplog):
        """Test debug(True, False)."""
        debug(True, False)
        assert 1 == len(self.logger.handlers)
        assert isinstance(self.logger.handlers[0], logging.NullHandler)
        assert logging.DEBUG == self.logger.level
        assert config.debugging

        with caplog.at_level(logging.DEBUG, logger="nativedicom"):
            xmlread(sample_path)

            assert "Reading file" in caplog.text
            assert "Parsed 12 top-level attribute(s)" in caplog.text

    def test_debug_off_handler_null(self, sample_path, caplog):
        """Test debug(False, False)."""
        debug(False, False)
        assert 1 == len(self.logger.handlers)
        assert logging.WARNING == self.logger.level
        assert not config.debugging

        xmlread(sample_path)
        assert "" == caplog.text

    def test_debug_on_handler_stream(self):
        """Test debug(True, True)."""
        debug(True, True)
        assert 2 == len(self.logger.handlers)
        assert isinstance(self.logger.handlers[0], logging.NullHandler)
        assert isinstance(self.logger.handlers[1], logging.StreamHandler)
        assert config.debugging

    def test_debug_off_handler_stream(self):
        """Test debug(False, True)."""
        debug(False, True)
        assert 2 == len(self.logger.handlers)
        assert isinstance(self.logger.handlers[1], logging.StreamHandler)
        assert not config.debugging


class TestWriteSettings:
    def test_defaults(self):
        assert "  " == config.write_indent
        assert config.write_xml_declaration is True
