import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class RelayRequestError(Exception):
    """A client input error on the relay endpoint (missing field, bad action)."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamAPIError(Exception):
    """The Google Sheets API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CheckoutServiceError(Exception):
    """A checkout client call was rejected by the relay or the Sheets API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def extract_error_message(response, payload_key_path: tuple[str, ...]) -> str:
    """Pulls an error message out of a JSON error response.

    Walks ``payload_key_path`` through the decoded body (e.g. ``("error", "message")``
    for the Sheets API, ``("error",)`` for the relay). Falls back to
    ``HTTP <status>`` if the body is not JSON or the message is missing or empty.
    """
    try:
        payload: Any = response.json()
    except ValueError:
        payload = None

    for key in payload_key_path:
        if not isinstance(payload, dict):
            payload = None
            break
        payload = payload.get(key)

    if payload:
        return str(payload)
    return f"HTTP {response.status_code}"


def log_error(message: str, exc_info=False):
    """Logs an error message, optionally including exception details."""
    logger.error(f"ERROR: {message}", exc_info=exc_info)
