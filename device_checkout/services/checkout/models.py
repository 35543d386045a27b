"""Domain types for device checkout events."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Union


class DeviceType(str, Enum):
    GOOGLE_PIXEL = 'Google Pixel'
    APPLE_IPHONE = 'Apple iPhone'
    MAC_MINI = 'Mac Mini'


class CheckoutStatus(str, Enum):
    CHECKED_OUT = 'checked-out'
    CHECKED_IN = 'checked-in'


@dataclass
class CheckoutRecord:
    """One checkout/check-in event, stored as a single sheet row (columns A-E).

    ``device_type`` and ``status`` hold the raw string when a row read back
    from the sheet does not match any enum member.
    """
    person_name: str
    device_type: Union[DeviceType, str]
    device_id: str
    checkout_time: str
    status: Union[CheckoutStatus, str]

    def to_row(self) -> List[Any]:
        """Returns the five cell values in column order A-E."""
        return [
            self.person_name,
            _plain(self.device_type),
            self.device_id,
            self.checkout_time,
            _plain(self.status),
        ]


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
