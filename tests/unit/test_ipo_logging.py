# Path: tests/unit/test_ipo_logging.py
"""
Unit Tests for IPO logging setup.
"""

import logging

import pytest

from route_finder.core.logger import (
    get_input_logger,
    get_output_logger,
    get_process_logger,
    setup_ipo_logging,
)
from route_finder.core.logger.ipo_logging import IPOFilter


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test run had it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggerNames:
    """Test layer logger naming."""

    def test_layer_prefixes(self):
        """Loggers are named after their IPO layer."""
        assert get_input_logger('route_reader').name == 'input.route_reader'
        assert get_process_logger('session').name == 'process.session'
        assert get_output_logger('formatters').name == 'output.formatters'


class TestIPOFilter:
    """Test the layer filter."""

    def test_filters_by_prefix(self):
        """Only records from the layer pass."""
        layer_filter = IPOFilter('process')
        passing = logging.LogRecord('process.session', logging.INFO, '', 0, 'm', None, None)
        blocked = logging.LogRecord('input.route_data', logging.INFO, '', 0, 'm', None, None)

        assert layer_filter.filter(passing)
        assert not layer_filter.filter(blocked)


class TestSetupIPOLogging:
    """Test handler installation."""

    def test_console_only(self, restore_root_logger):
        """Without a log directory only the console handler is added."""
        setup_ipo_logging(log_dir=None, log_level='WARNING', console_output=True)

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.WARNING

    def test_no_console(self, restore_root_logger):
        """Console output can be switched off."""
        setup_ipo_logging(console_output=False)

        assert restore_root_logger.handlers == []

    def test_layer_files(self, restore_root_logger, temp_dir):
        """Each layer logs to its own file plus the combined file."""
        log_dir = temp_dir / 'logs'
        setup_ipo_logging(log_dir=log_dir, log_level='DEBUG', console_output=False)

        get_process_logger('test').info('tree rebuilt')
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert 'tree rebuilt' in (log_dir / 'process_activity.log').read_text()
        assert 'tree rebuilt' in (log_dir / 'full_activity.log').read_text()
        assert 'tree rebuilt' not in (log_dir / 'input_activity.log').read_text()

    def test_unknown_level_defaults_to_info(self, restore_root_logger):
        """Unrecognised level names fall back to INFO."""
        setup_ipo_logging(log_level='CHATTY', console_output=False)

        assert restore_root_logger.level == logging.INFO
