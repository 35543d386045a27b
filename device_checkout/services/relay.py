"""Request handling for the sheets relay endpoint.

The relay accepts ``{action, spreadsheetId, data?}`` bodies, resolves a
service account token and forwards one append or read call to the Sheets
API. Every failure ends up in ``handle_sheets_request`` as a
``(status, payload)`` pair; nothing is retried.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

# Project imports
from device_checkout.config.config_loader import get_config
from device_checkout.services.sheets import append_row, get_service_account_token, read_values, short_id
from device_checkout.utils.error_utils import RelayRequestError, log_error

logger = logging.getLogger(__name__)

RelayResult = Tuple[int, Optional[Any]]


def _is_missing(value: Any) -> bool:
    """None and falsy scalars ('', 0, False) are missing; an empty list is not."""
    return value is None or (isinstance(value, (str, bool, int, float)) and not value)


def _parse_body(raw_body: bytes) -> Dict[str, Any]:
    """Decodes the request body. Empty or non-object bodies count as ``{}``."""
    if not raw_body or not raw_body.strip():
        return {}
    body = json.loads(raw_body)
    if not isinstance(body, dict):
        logger.warning(f"Request body is a JSON {type(body).__name__}, not an object. Ignoring it.")
        return {}
    return body


def _dispatch(body: Dict[str, Any]) -> RelayResult:
    action = body.get('action')
    spreadsheet_id = body.get('spreadsheetId')
    data = body.get('data')

    if _is_missing(spreadsheet_id):
        raise RelayRequestError('spreadsheetId is required')

    access_token = get_service_account_token(get_config().service_account_info)

    if action == 'append':
        if _is_missing(data):
            raise RelayRequestError('data is required for append action')
        append_row(spreadsheet_id, data, access_token=access_token)
        logger.info(f"Appended checkout row to sheet {short_id(spreadsheet_id)}")
        return 200, {'success': True}

    if action == 'read':
        sheet_data = read_values(spreadsheet_id, access_token=access_token)
        row_count = len(sheet_data.get('values') or []) if isinstance(sheet_data, dict) else 0
        logger.info(f"Read {row_count} rows from sheet {short_id(spreadsheet_id)}")
        return 200, sheet_data

    raise RelayRequestError('Invalid action')


def handle_sheets_request(method: str, raw_body: bytes) -> RelayResult:
    """Handles one relay request.

    Args:
        method: The HTTP method of the request.
        raw_body: The undecoded request body.

    Returns:
        A ``(status_code, payload)`` tuple. ``payload`` is None when the
        response has no body (CORS preflight).
    """
    if method.upper() == 'OPTIONS':
        return 200, None

    try:
        return _dispatch(_parse_body(raw_body))
    except RelayRequestError as e:
        logger.warning(f"Rejected relay request: {e.message}")
        return e.status_code, {'error': e.message}
    except Exception as e:
        log_error(f"API error: {e}", exc_info=True)
        return 500, {'error': str(e) or 'Internal server error'}
