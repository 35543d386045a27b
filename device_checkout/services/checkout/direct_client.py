"""Checkout service that calls the Google Sheets API directly with an API key."""

import logging
from typing import Any, Dict, List

from device_checkout.services.sheets import append_row, read_values
from device_checkout.utils.error_utils import CheckoutServiceError, UpstreamAPIError

from .base import CheckoutSheetService

logger = logging.getLogger(__name__)


class DirectCheckoutService(CheckoutSheetService):
    """Skips the relay; every call carries ``api_key`` as the ``key`` query parameter."""

    def __init__(self, api_key: str):
        if not api_key:
            raise ValueError("An API key is required for direct Google Sheets access")
        self.api_key = api_key

    def _append_row(self, spreadsheet_id: str, row: List[Any]) -> None:
        try:
            append_row(spreadsheet_id, row, api_key=self.api_key)
        except UpstreamAPIError as e:
            raise CheckoutServiceError(e.message, e.status_code) from e

    def _fetch_values(self, spreadsheet_id: str) -> Dict[str, Any]:
        try:
            return read_values(spreadsheet_id, api_key=self.api_key)
        except UpstreamAPIError as e:
            raise CheckoutServiceError(e.message, e.status_code) from e
