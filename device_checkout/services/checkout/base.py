"""Common behaviour shared by the checkout service implementations."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .models import CheckoutRecord
from .rows import records_from_values

logger = logging.getLogger(__name__)


class CheckoutSheetService(ABC):
    """Appends and reads CheckoutRecords in a spreadsheet.

    Subclasses only move rows over the wire; shaping, logging and
    re-raising live here.
    """

    @abstractmethod
    def _append_row(self, spreadsheet_id: str, row: List[Any]) -> None:
        """Sends one A-E row to the sheet."""

    @abstractmethod
    def _fetch_values(self, spreadsheet_id: str) -> Dict[str, Any]:
        """Returns the Sheets ValueRange body for the checkout range."""

    def append(self, spreadsheet_id: str, record: CheckoutRecord) -> None:
        """Appends ``record`` as a new row. Errors are logged and re-raised."""
        try:
            self._append_row(spreadsheet_id, record.to_row())
            logger.info("Data sent to Google Sheet successfully")
        except Exception as e:
            logger.error(f"Error sending data to Google Sheet: {e}", exc_info=True)
            raise

    def read(self, spreadsheet_id: str) -> List[CheckoutRecord]:
        """Reads every checkout record below the header row. Errors are logged and re-raised."""
        try:
            data = self._fetch_values(spreadsheet_id)
            return records_from_values(data.get('values'))
        except Exception as e:
            logger.error(f"Error retrieving checkout records: {e}", exc_info=True)
            raise
