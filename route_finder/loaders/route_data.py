# Path: route_finder/loaders/route_data.py
"""
Route Data Loader for route_finder

Doorkeeper for raw route data. Acquires the CSV text from a local file
or an HTTP(S) URL and hands it over as a decoded string.
Does NOT interpret contents - that's for route_reader.py.

Acquisition failures are raised as SourceError; the caller treats them
as "no input available".
"""

from pathlib import Path
from typing import Optional, Union

import requests
from requests import Session
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from route_finder.core.logger import get_input_logger
from route_finder.exceptions import SourceError
from .constants import (
    CSV_EXTENSION,
    URL_SCHEMES,
    UTF8_BOM,
    MSG_NOT_CSV,
    MSG_READ_FAILED,
    MSG_FETCH_FAILED,
    HTTP_USER_AGENT,
)


class RouteDataLoader:
    """
    Reads raw route CSV text from a file path or URL.

    Example:
        loader = RouteDataLoader(config)
        text = loader.read_text('route-finder.csv')
        text = loader.read_text('https://example.com/route-finder.csv')
    """

    def __init__(self, config=None):
        """
        Initialize route data loader.

        Args:
            config: ConfigLoader instance (source, http_timeout, http_max_retries)
        """
        if config is None:
            from route_finder.config_loader import ConfigLoader
            config = ConfigLoader()

        self.config = config
        self.logger = get_input_logger('route_data')
        self.http_timeout = self.config.get('http_timeout', 30)
        self.max_retries = max(1, self.config.get('http_max_retries', 3))
        self._session: Optional[Session] = None

    @staticmethod
    def is_url(source: Union[str, Path]) -> bool:
        """Check whether a source refers to an HTTP(S) resource."""
        return isinstance(source, str) and source.lower().startswith(URL_SCHEMES)

    def read_text(self, source: Optional[Union[str, Path]] = None) -> str:
        """
        Acquire route CSV text.

        Args:
            source: File path or URL; defaults to the configured source

        Returns:
            Decoded CSV text

        Raises:
            SourceError: If the source is missing, unreadable or not CSV
        """
        if source is None:
            source = self.config.get('source')
        if not source:
            raise SourceError("No route data source configured")

        if self.is_url(source):
            content = self._fetch(str(source))
        else:
            content = self._read_file(Path(source))

        return self._decode(content)

    def _read_file(self, path: Path) -> bytes:
        """Read a local CSV file."""
        if path.suffix.lower() != CSV_EXTENSION:
            raise SourceError(MSG_NOT_CSV)

        try:
            content = path.read_bytes()
        except OSError as e:
            self.logger.error(f"Cannot read {path}: {e}")
            raise SourceError(f"{MSG_READ_FAILED}: {path}") from e

        self.logger.info(f"Read {len(content)} bytes from {path}")
        return content

    def _fetch(self, url: str) -> bytes:
        """Fetch a CSV over HTTP, retrying transient network failures."""
        fetch = retry(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            retry=retry_if_exception_type((requests.exceptions.ConnectionError,
                                           requests.exceptions.Timeout)),
            reraise=True,
        )(self._get)

        try:
            return fetch(url)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Error fetching {url}: {e}")
            raise SourceError(MSG_FETCH_FAILED) from e

    def _get(self, url: str) -> bytes:
        """Single GET attempt."""
        self.logger.debug(f"Fetching {url}")
        response = self.session.get(url, timeout=self.http_timeout, allow_redirects=True)
        response.raise_for_status()
        self.logger.info(f"Fetched {url}: {len(response.content)} bytes")
        return response.content

    @property
    def session(self) -> Session:
        """Lazily created HTTP session with pooling."""
        if self._session is None:
            self._session = Session()
            self._session.headers.update({
                'User-Agent': HTTP_USER_AGENT,
                'Accept': 'text/csv, text/plain, */*',
            })
        return self._session

    def _decode(self, content: bytes) -> str:
        """Decode UTF-8 bytes, dropping a leading byte order mark."""
        try:
            text = content.decode('utf-8')
        except UnicodeDecodeError as e:
            self.logger.error(f"Source is not valid UTF-8: {e}")
            raise SourceError(MSG_READ_FAILED) from e
        if text.startswith(UTF8_BOM):
            text = text[len(UTF8_BOM):]
        return text


__all__ = ['RouteDataLoader']
