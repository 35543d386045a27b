"""Module for talking to the Google Sheets values API.

Provides functions to:
- Exchange a service account credential for a bearer token.
- Append one row to the checkout range.
- Read the checkout range.
"""

# Public API for the sheets service

from .client import get_service_account_token, append_row, read_values
from .utils import build_values_url, short_id

__all__ = [
    'get_service_account_token',
    'append_row',
    'read_values',
    'build_values_url',
    'short_id',
]
