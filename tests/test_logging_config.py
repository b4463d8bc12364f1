"""Tests for CLI logging setup."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from perlassist.logging_config import configure_logging, level_for_verbosity


class TestVerbosityLevels:
    @pytest.mark.parametrize(
        ("verbosity", "level"),
        [(-1, logging.ERROR), (0, logging.ERROR), (1, logging.WARNING), (2, logging.INFO), (3, logging.DEBUG), (9, logging.DEBUG)],
    )
    def test_mapping(self, verbosity: int, level: int) -> None:
        assert level_for_verbosity(verbosity) == level


class TestConfigureLogging:
    def test_single_rich_handler(self) -> None:
        configure_logging(1, force=True)
        configure_logging(3, force=True)
        logger = logging.getLogger("perlassist")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.level == logging.DEBUG

    def test_without_force_only_level_changes(self) -> None:
        configure_logging(1, force=True)
        handler = logging.getLogger("perlassist").handlers[0]
        configure_logging(2)
        logger = logging.getLogger("perlassist")
        assert logger.handlers == [handler]
        assert logger.level == logging.INFO
