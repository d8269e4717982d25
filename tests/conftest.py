# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for route_finder

Provides common test fixtures used across all test modules.
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from fixtures.sample_data import SAMPLE_CSV, create_csv, make_route


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'ROUTE_FINDER_DEBUG': 'true',

        # Source
        'ROUTE_FINDER_SOURCE': '/tmp/route_finder_test/route-finder.csv',
        'ROUTE_FINDER_HTTP_TIMEOUT': '5',
        'ROUTE_FINDER_HTTP_MAX_RETRIES': '1',

        # Logging
        'ROUTE_FINDER_LOG_DIR': '',
        'ROUTE_FINDER_LOG_LEVEL': 'DEBUG',
        'ROUTE_FINDER_LOG_CONSOLE': 'false',

        # Output
        'ROUTE_FINDER_OUTPUT_FORMAT': 'text',
        'ROUTE_FINDER_EXPAND_LEVELS': '3',
        'ROUTE_FINDER_UNICODE_TREE': 'false',
        'ROUTE_FINDER_JSON_INDENT': '4',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def sample_csv():
    """Provide a small route-finder export with five routes."""
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_file(temp_dir, sample_csv):
    """Write the sample export to a .csv file."""
    csv_path = temp_dir / 'route-finder.csv'
    csv_path.write_text(sample_csv, encoding='utf-8')
    return csv_path


@pytest.fixture
def route_factory():
    """Provide the make_route builder."""
    return make_route


@pytest.fixture
def csv_factory():
    """Provide the create_csv builder."""
    return create_csv


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'debug': True,
        'source': '/tmp/route_finder_test/route-finder.csv',
        'http_timeout': 5,
        'http_max_retries': 1,
        'log_dir': None,
        'log_level': 'DEBUG',
        'log_console': False,
        'output_format': 'text',
        'expand_levels': 2,
        'unicode_tree': False,
        'json_indent': 2,
    }.get(key, default)
    return config


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton between tests."""
    from route_finder.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
