from typing import List, Optional

from sqlalchemy import select as sa_select, update as sa_update
from sqlalchemy.orm import joinedload

from fillstation.database.models import DeliveryOrm
from fillstation.repositories.base import BaseRepository
from fillstation.utils.enums import DeliveryStatus


class DeliveryRepository(BaseRepository):

    async def get_delivery(self, delivery_id: str) -> Optional[DeliveryOrm]:
        stmt = (
            sa_select(DeliveryOrm)
            .options(joinedload(DeliveryOrm.tank))
            .where(DeliveryOrm.id == delivery_id)
            .where(DeliveryOrm.station_id == self.station_id)
        )
        delivery = await self.select_first(stmt)
        return delivery

    async def get_deliveries(self) -> List[DeliveryOrm]:
        stmt = (
            sa_select(DeliveryOrm)
            .options(joinedload(DeliveryOrm.tank))
            .where(DeliveryOrm.station_id == self.station_id)
            .order_by(DeliveryOrm.delivery_date.desc(), DeliveryOrm.created_at.desc())
        )
        deliveries = await self.select_all(stmt)
        return deliveries

    async def change_status(self, delivery_id: str, from_status: DeliveryStatus, to_status: DeliveryStatus) -> bool:
        """
        Moves the delivery to the new status only if it still has the expected one.
        Returns False when another request has changed the status first.
        """
        stmt = (
            sa_update(DeliveryOrm)
            .where(DeliveryOrm.id == delivery_id)
            .where(DeliveryOrm.status == from_status.value)
            .values(status=to_status.value)
        )
        result = await self.execute(stmt)
        return result.rowcount == 1
