"""Functions for turning raw sheet values into CheckoutRecords."""

import logging
from enum import Enum
from typing import Any, List, Optional, Sequence, Type, Union

from .models import CheckoutRecord, CheckoutStatus, DeviceType

logger = logging.getLogger(__name__)

RECORD_COLUMN_COUNT = 5
HEADER_ROW_COUNT = 1


def coerce_cell(value: Any) -> str:
    """Stringifies a cell value the way the sheet displays it.

    None becomes '', booleans become 'true'/'false' and whole floats lose
    their trailing '.0'.
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def cast_enum(enum_cls: Type[Enum], value: str) -> Union[Enum, str]:
    """Casts to ``enum_cls`` when ``value`` is a member, otherwise returns it unchanged."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def record_from_row(row: Sequence[Any]) -> Optional[CheckoutRecord]:
    """Maps one sheet row to a CheckoutRecord.

    Returns None for rows with fewer than five values. Extra columns are ignored.
    """
    if not row or len(row) < RECORD_COLUMN_COUNT:
        return None

    cells = [coerce_cell(value) for value in row[:RECORD_COLUMN_COUNT]]
    return CheckoutRecord(
        person_name=cells[0],
        device_type=cast_enum(DeviceType, cells[1]),
        device_id=cells[2],
        checkout_time=cells[3],
        status=cast_enum(CheckoutStatus, cells[4]),
    )


def records_from_values(values: Optional[Sequence[Sequence[Any]]]) -> List[CheckoutRecord]:
    """Converts a Sheets ValueRange ``values`` array into records.

    The first row is always treated as the header and skipped. Short rows
    are dropped.
    """
    records = []
    for row in (values or [])[HEADER_ROW_COUNT:]:
        record = record_from_row(row)
        if record is not None:
            records.append(record)
    logger.debug(f"Mapped {len(records)} records from {len(values or [])} sheet rows")
    return records
