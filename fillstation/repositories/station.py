from typing import Optional

from sqlalchemy import select as sa_select, delete as sa_delete, func

from fillstation.database.models import StationOrm, StaffOrm, TankOrm, PumpOrm, PumpSaleOrm, DeliveryOrm
from fillstation.repositories.base import BaseRepository


class StationRepository(BaseRepository):

    async def get_station(self, station_id: str) -> Optional[StationOrm]:
        stmt = sa_select(StationOrm).where(StationOrm.id == station_id)
        station = await self.select_first(stmt)
        return station

    async def get_station_by_license(self, license_number: str, exclude_id: str | None = None) -> Optional[StationOrm]:
        stmt = sa_select(StationOrm).where(func.lower(StationOrm.license_number) == license_number.lower())
        if exclude_id:
            stmt = stmt.where(StationOrm.id != exclude_id)

        station = await self.select_first(stmt)
        return station

    async def delete_station(self, station_id: str) -> None:
        # Everything the station owns is removed in one transaction
        tank_ids = sa_select(TankOrm.id).where(TankOrm.station_id == station_id).scalar_subquery()
        pump_ids = sa_select(PumpOrm.id).where(PumpOrm.tank_id.in_(tank_ids)).scalar_subquery()

        await self.execute(sa_delete(PumpSaleOrm).where(PumpSaleOrm.pump_id.in_(pump_ids)))
        await self.execute(sa_delete(PumpOrm).where(PumpOrm.tank_id.in_(tank_ids)))
        await self.execute(sa_delete(DeliveryOrm).where(DeliveryOrm.station_id == station_id))
        await self.execute(sa_delete(TankOrm).where(TankOrm.station_id == station_id))
        await self.execute(sa_delete(StaffOrm).where(StaffOrm.station_id == station_id))
        await self.delete_object(StationOrm, station_id)
