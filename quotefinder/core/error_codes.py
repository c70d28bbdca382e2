"""
Standardised error handling for QuoteFinder.
"""

from quotefinder.core.constants import ErrorCode, CALLER_ERRORS, HTTP_STATUS


class SearchError(Exception):
    """Raised when a search cannot run: bad caller input or no registry."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

    @property
    def status(self) -> int:
        return http_status_for(self.code)


def is_caller_error(code: str) -> bool:
    return code in CALLER_ERRORS


def http_status_for(code: str) -> int:
    return HTTP_STATUS.get(code, 500)
