"""Utility functions for Google Sheets API requests."""

from typing import Optional

# Project imports
from device_checkout.config.config import SHEETS_API_URL, SHEET_RANGE


def build_values_url(spreadsheet_id: str, append: bool = False) -> str:
    """Builds the values endpoint URL for the checkout range.

    e.g. ``.../spreadsheets/<id>/values/Sheet1!A:E`` or, for appends,
    ``.../spreadsheets/<id>/values/Sheet1!A:E:append``.
    """
    url = f"{SHEETS_API_URL}/{spreadsheet_id}/values/{SHEET_RANGE}"
    if append:
        url += ":append"
    return url


def build_auth(access_token: Optional[str] = None, api_key: Optional[str] = None) -> tuple[dict, dict]:
    """Returns the (headers, params) pair that authenticates a Sheets API call.

    A bearer token wins over an API key when both are given.
    """
    headers = {'Content-Type': 'application/json'}
    params = {}
    if access_token is not None:
        headers['Authorization'] = f"Bearer {access_token}"
    elif api_key is not None:
        params['key'] = api_key
    else:
        raise ValueError("Either an access token or an API key is required")
    return headers, params


def short_id(spreadsheet_id: Optional[str]) -> str:
    """Truncates a spreadsheet ID for log lines."""
    if not spreadsheet_id:
        return "(none)"
    return f"{str(spreadsheet_id)[:6]}..."
