"""Checkout service that goes through the sheets relay endpoint."""

import logging
from typing import Any, Dict, List, Optional

import requests

from device_checkout.config.config import CHECKOUT_API_URL, SHEETS_ENDPOINT_PATH, SHEETS_REQUEST_TIMEOUT
from device_checkout.utils.error_utils import CheckoutServiceError, extract_error_message

from .base import CheckoutSheetService

logger = logging.getLogger(__name__)


class RelayCheckoutService(CheckoutSheetService):
    """Talks to the relay, which holds the service account credential."""

    def __init__(self, base_url: Optional[str] = None):
        base_url = base_url or CHECKOUT_API_URL
        self.endpoint = f"{base_url.rstrip('/')}{SHEETS_ENDPOINT_PATH}"

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        logger.debug(f"POST {self.endpoint} action={payload.get('action')}")
        response = requests.post(
            self.endpoint,
            json=payload,
            headers={'Content-Type': 'application/json'},
            timeout=SHEETS_REQUEST_TIMEOUT,
        )
        if not response.ok:
            raise CheckoutServiceError(extract_error_message(response, ("error",)), response.status_code)
        return response

    def _append_row(self, spreadsheet_id: str, row: List[Any]) -> None:
        self._post({
            'action': 'append',
            'spreadsheetId': spreadsheet_id,
            'data': row,
        })

    def _fetch_values(self, spreadsheet_id: str) -> Dict[str, Any]:
        response = self._post({
            'action': 'read',
            'spreadsheetId': spreadsheet_id,
        })
        return response.json()
