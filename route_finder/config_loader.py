# Path: route_finder/config_loader.py
"""
Configuration Loader for route_finder

Loads configuration from a .env file and the environment.
Singleton pattern ensures consistent configuration across all components.

Every setting has a default, so the tool runs without any .env file.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Source Defaults
DEFAULT_SOURCE: str = 'route-finder.csv'
DEFAULT_HTTP_TIMEOUT: int = 30
DEFAULT_HTTP_MAX_RETRIES: int = 3

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Output Defaults
DEFAULT_OUTPUT_FORMAT: str = 'text'
DEFAULT_EXPAND_LEVELS: int = 2
DEFAULT_JSON_INDENT: int = 2

ENV_PREFIX: str = 'ROUTE_FINDER_'


class ConfigLoader:
    """
    Singleton configuration loader for route_finder.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        source = config.get('source')            # Returns str
        expand = config.get('expand_levels')     # Returns int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the first .env
        found in the working directory or the project root.
        """
        if ConfigLoader._initialized:
            return

        # route_finder/config_loader.py -> project root is one level up
        project_root = Path(__file__).resolve().parent.parent
        for env_path in (Path.cwd() / '.env', project_root / '.env'):
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, interpolate=True)
                break

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types

        Raises:
            ValueError: If output_format is not a known format
        """
        config = {
            # ================================================================
            # DEBUG (forces DEBUG log level)
            # ================================================================
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # SOURCE
            # ================================================================
            'source': self._get_env('SOURCE', DEFAULT_SOURCE),
            'http_timeout': self._get_int('HTTP_TIMEOUT', DEFAULT_HTTP_TIMEOUT),
            'http_max_retries': self._get_int(
                'HTTP_MAX_RETRIES', DEFAULT_HTTP_MAX_RETRIES
            ),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', True),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_format': self._get_env('OUTPUT_FORMAT', DEFAULT_OUTPUT_FORMAT).lower(),
            'expand_levels': self._get_int('EXPAND_LEVELS', DEFAULT_EXPAND_LEVELS),
            'unicode_tree': self._get_bool('UNICODE_TREE', False),
            'json_indent': self._get_int('JSON_INDENT', DEFAULT_JSON_INDENT),
        }

        if config['output_format'] not in ('text', 'json'):
            raise ValueError(
                f"Unknown output format: {config['output_format']} "
                f"(check {ENV_PREFIX}OUTPUT_FORMAT)"
            )

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Variable name without the ROUTE_FINDER_ prefix

        Returns:
            Path object, or None when unset or empty
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None or value == '':
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"source={self._config.get('source')}, "
            f"output_format={self._config.get('output_format')})"
        )


__all__ = ['ConfigLoader']
