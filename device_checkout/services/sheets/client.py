"""Handles service account authentication and raw Google Sheets values calls."""

import logging
from typing import Any, Dict, List, Mapping, Optional

import requests
import google.auth.transport.requests
from google.oauth2 import service_account

# Project imports
from device_checkout.config.config import (
    GOOGLE_TOKEN_URI,
    SCOPES,
    SHEETS_REQUEST_TIMEOUT,
    VALUE_INPUT_OPTION,
)
from device_checkout.utils.error_utils import UpstreamAPIError, extract_error_message

# Local imports
from .utils import build_auth, build_values_url, short_id

logger = logging.getLogger(__name__)


def get_service_account_token(service_account_info: Mapping[str, Any]) -> str:
    """Exchanges a service account credential for a short-lived bearer token.

    Args:
        service_account_info: The parsed service account JSON. Only
            ``client_email`` and ``private_key`` are required.

    Returns:
        The OAuth2 access token, or an empty string if none was issued.

    Raises:
        ValueError: If the credential is malformed.
        google.auth.exceptions.RefreshError: If the token exchange is refused.
    """
    info = {"token_uri": GOOGLE_TOKEN_URI, **service_account_info}
    creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    creds.refresh(google.auth.transport.requests.Request())
    logger.debug(f"Obtained access token for {info.get('client_email')}")
    return creds.token or ''


def _raise_for_upstream_error(response: requests.Response, spreadsheet_id: str) -> None:
    if response.ok:
        return
    message = extract_error_message(response, ("error", "message"))
    logger.error(f"Sheets API error for {short_id(spreadsheet_id)}: {response.status_code} {message}")
    raise UpstreamAPIError(message, response.status_code)


def append_row(spreadsheet_id: str, row: List[Any], access_token: Optional[str] = None, api_key: Optional[str] = None) -> None:
    """Appends a single row to the checkout range with USER_ENTERED input.

    The body of a successful response is not read.

    Raises:
        UpstreamAPIError: On a non-2xx response.
    """
    headers, params = build_auth(access_token=access_token, api_key=api_key)
    params['valueInputOption'] = VALUE_INPUT_OPTION
    body = {
        'values': [row],
        'majorDimension': 'ROWS',
    }
    logger.info(f"Appending row to sheet {short_id(spreadsheet_id)}")
    response = requests.post(
        build_values_url(spreadsheet_id, append=True),
        params=params,
        headers=headers,
        json=body,
        timeout=SHEETS_REQUEST_TIMEOUT,
    )
    _raise_for_upstream_error(response, spreadsheet_id)


def read_values(spreadsheet_id: str, access_token: Optional[str] = None, api_key: Optional[str] = None) -> Dict[str, Any]:
    """Reads the whole checkout range.

    Returns:
        The Sheets API ValueRange body, unmodified.

    Raises:
        UpstreamAPIError: On a non-2xx response.
    """
    headers, params = build_auth(access_token=access_token, api_key=api_key)
    logger.info(f"Reading rows from sheet {short_id(spreadsheet_id)}")
    response = requests.get(
        build_values_url(spreadsheet_id),
        params=params,
        headers=headers,
        timeout=SHEETS_REQUEST_TIMEOUT,
    )
    _raise_for_upstream_error(response, spreadsheet_id)
    return response.json()
