import uuid
from typing import List, Optional

from sqlalchemy import select as sa_select

from fillstation.database.models import StaffOrm
from fillstation.repositories.base import BaseRepository


class StaffRepository(BaseRepository):

    async def get_staff(self, staff_id: uuid.UUID) -> Optional[StaffOrm]:
        stmt = (
            sa_select(StaffOrm)
            .where(StaffOrm.id == staff_id)
            .where(StaffOrm.station_id == self.station_id)
        )
        staff = await self.select_first(stmt)
        return staff

    async def get_staff_list(self) -> List[StaffOrm]:
        stmt = (
            sa_select(StaffOrm)
            .where(StaffOrm.station_id == self.station_id)
            .order_by(StaffOrm.last_name, StaffOrm.first_name)
        )
        staff_list = await self.select_all(stmt)
        return staff_list
