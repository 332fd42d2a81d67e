from dataclasses import dataclass

from fillstation.database.models import StaffOrm
from fillstation.utils import enums
from fillstation.utils.exceptions import ForbiddenException


@dataclass(frozen=True)
class Actor:
    """
    Authenticated staff member on whose behalf an operation is performed.
    Repositories scope every query to the actor's station.
    """
    id: str
    role: str
    station_id: str | None

    @classmethod
    def from_staff(cls, staff: StaffOrm) -> "Actor":
        return cls(
            id=str(staff.id),
            role=staff.role,
            station_id=str(staff.station_id) if staff.station_id else None
        )

    @property
    def is_manager(self) -> bool:
        return self.role == enums.Role.MANAGER.name

    def require_station(self) -> str:
        if not self.station_id:
            raise ForbiddenException('You are not attached to a filling station')
        return self.station_id
