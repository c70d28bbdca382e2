"""
Episode data access: a local directory or an HTTP(S) base URL.
Holds index.json and the subtitle files it points to.
"""

import logging
import requests
from pathlib import Path

from quotefinder.core.constants import REQUEST_TIMEOUT_SEC

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """A document under the data root could not be read."""


def _clean_relative(relative_path: str) -> str:
    rel = relative_path.strip()
    if rel.startswith('./'):
        rel = rel[2:]
    return rel.lstrip('/')


class DataSource:
    """Reads text documents relative to a data root."""

    def __init__(self, root: str | Path, timeout: float = REQUEST_TIMEOUT_SEC):
        self.root = str(root)
        self.timeout = timeout

    @property
    def is_remote(self) -> bool:
        return self.root.lower().startswith(('http://', 'https://'))

    def describe(self) -> str:
        return self.root if self.is_remote else str(Path(self.root).resolve())

    def locate(self, relative_path: str) -> str:
        rel = _clean_relative(relative_path)
        if self.is_remote:
            return f"{self.root.rstrip('/')}/{rel}"
        return str(Path(self.root) / rel)

    def read_text(self, relative_path: str) -> str:
        """
        Return the document's text.
        Raises DataSourceError on any read, network or decode failure.
        """
        location = self.locate(relative_path)
        if self.is_remote:
            return self._fetch(location)

        try:
            return Path(location).read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Cannot read {location}: {e}") from e

    def _fetch(self, url: str) -> str:
        try:
            resp = requests.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise DataSourceError(f"Timed out fetching {url}") from e
        except requests.exceptions.ConnectionError as e:
            raise DataSourceError(f"Network error fetching {url}") from e
        except requests.exceptions.RequestException as e:
            raise DataSourceError(f"Request for {url} failed: {e}") from e

        if resp.status_code != 200:
            raise DataSourceError(f"Fetching {url} returned {resp.status_code}")

        # Servers often omit the charset for .srt/.json
        resp.encoding = 'utf-8-sig'
        logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
        return resp.text
