"""Checkout Service Package.

Exports the client operations for recording and listing device checkouts,
plus the factory that picks the relay or direct implementation.
"""

import logging
from typing import List, Optional

from device_checkout.config import config

from .base import CheckoutSheetService
from .direct_client import DirectCheckoutService
from .models import CheckoutRecord, CheckoutStatus, DeviceType
from .relay_client import RelayCheckoutService

logger = logging.getLogger(__name__)

CLIENT_MODES = ('relay', 'direct')


def create_checkout_service(mode: Optional[str] = None, base_url: Optional[str] = None, api_key: Optional[str] = None) -> CheckoutSheetService:
    """Builds the checkout service for the configured deployment mode.

    Args:
        mode: 'relay' or 'direct'. Defaults to CHECKOUT_CLIENT_MODE.
        base_url: Relay base URL (relay mode). Defaults to CHECKOUT_API_URL.
        api_key: Sheets API key (direct mode). Defaults to GOOGLE_SHEETS_API_KEY.
    """
    mode = (mode or config.CHECKOUT_CLIENT_MODE).lower()
    if mode == 'relay':
        return RelayCheckoutService(base_url or config.CHECKOUT_API_URL)
    if mode == 'direct':
        return DirectCheckoutService(api_key or config.GOOGLE_SHEETS_API_KEY)
    raise ValueError(f"Unknown checkout client mode '{mode}'. Expected one of {CLIENT_MODES}")


def send_checkout_to_sheet(spreadsheet_id: str, record: CheckoutRecord, service: Optional[CheckoutSheetService] = None) -> None:
    """Appends ``record`` to the sheet. Raises on any failure."""
    (service or create_checkout_service()).append(spreadsheet_id, record)


def get_checkout_records(spreadsheet_id: str, service: Optional[CheckoutSheetService] = None) -> List[CheckoutRecord]:
    """Returns every checkout record in the sheet, header row excluded."""
    return (service or create_checkout_service()).read(spreadsheet_id)


__all__ = [
    'CheckoutRecord',
    'CheckoutStatus',
    'DeviceType',
    'CheckoutSheetService',
    'RelayCheckoutService',
    'DirectCheckoutService',
    'create_checkout_service',
    'send_checkout_to_sheet',
    'get_checkout_records',
]
