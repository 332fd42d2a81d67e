from enum import Enum, StrEnum
from typing import Any


class Role(Enum):

    MANAGER = {
        'title': 'Manager',
        'description': (
            'Station owner or manager. Registers the station, administers staff, tanks, pumps, '
            'deliveries and prices.'
        )
    }
    SUPERVISOR = {
        'title': 'Supervisor',
        'description': 'Supervises shifts and attendants of the station.'
    }
    ACCOUNTANT = {
        'title': 'Accountant',
        'description': 'Keeps the books of the station.'
    }
    CASHIER = {
        'title': 'Cashier',
        'description': 'Takes payments at the station.'
    }
    ATTENDANT = {
        'title': 'Attendant',
        'description': 'Dispenses fuel at the pumps.'
    }


class FuelType(StrEnum):

    PETROL = "Petrol"
    DIESEL = "Diesel"
    KEROSENE = "Kerosene"
    GAS = "Gas"
    PMS = "PMS"
    AGO = "AGO"

    @classmethod
    def _missing_(cls, value: Any):
        value = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == value:
                return member
        return None


class PumpStatus(StrEnum):

    ACTIVE = "Active"
    IDLE = "Idle"
    MAINTENANCE = "Maintenance"
    INACTIVE = "Inactive"


class DeliveryStatus(StrEnum):

    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (DeliveryStatus.COMPLETED, DeliveryStatus.CANCELLED)
