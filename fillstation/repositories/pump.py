from typing import List, Optional, Any

from sqlalchemy import select as sa_select, update as sa_update, delete as sa_delete, func, distinct
from sqlalchemy.orm import joinedload, selectinload

from fillstation.database.models import TankOrm, PumpOrm, PumpSaleOrm
from fillstation.repositories.base import BaseRepository
from fillstation.schemas.pump import PumpSaleSchema
from fillstation.utils.enums import FuelType


class PumpRepository(BaseRepository):

    def _pumps_stmt(self):
        return (
            sa_select(PumpOrm)
            .options(
                joinedload(PumpOrm.tank),
                selectinload(PumpOrm.daily_ltr_sales)
            )
            .join(PumpOrm.tank)
            .where(TankOrm.station_id == self.station_id)
        )

    async def get_pump(self, pump_id: str) -> Optional[PumpOrm]:
        stmt = self._pumps_stmt().where(PumpOrm.id == pump_id)
        pump = await self.select_first(stmt)
        return pump

    async def get_pumps(self) -> List[PumpOrm]:
        stmt = self._pumps_stmt().order_by(TankOrm.created_at, PumpOrm.created_at)
        pumps = await self.select_all(stmt)
        return pumps

    async def replace_sales(self, pump_id: str, sales: List[PumpSaleSchema]) -> None:
        await self.execute(sa_delete(PumpSaleOrm).where(PumpSaleOrm.pump_id == pump_id))
        for sale in sales:
            await self.add_object(
                PumpSaleOrm(
                    pump_id=pump_id,
                    date=sale.date,
                    ltr_sale=sale.ltr_sale,
                    price_per_ltr=sale.price_per_ltr
                )
            )

    async def set_price_by_fuel_type(self, fuel_type: FuelType, price: float) -> tuple[int, int]:
        """
        Sets the price on every pump of every station tank holding the fuel type.
        Nothing is committed. Returns the number of tanks carrying pumps and the number of pumps updated.
        """
        tank_ids = (
            sa_select(TankOrm.id)
            .where(TankOrm.station_id == self.station_id)
            .where(func.lower(TankOrm.fuel_type) == fuel_type.value.lower())
            .scalar_subquery()
        )

        stmt = sa_select(func.count(distinct(PumpOrm.tank_id))).where(PumpOrm.tank_id.in_(tank_ids))
        matched = await self.select_single_field(stmt) or 0

        stmt = (
            sa_update(PumpOrm)
            .where(PumpOrm.tank_id.in_(tank_ids))
            .values(price_per_ltr=price)
        )
        result = await self.execute(stmt)
        return matched, result.rowcount

    async def get_sales_by_fuel_type(self) -> List[Any]:
        stmt = (
            sa_select(
                TankOrm.fuel_type,
                func.coalesce(func.sum(PumpSaleOrm.ltr_sale), 0),
                func.coalesce(func.sum(PumpSaleOrm.ltr_sale * PumpSaleOrm.price_per_ltr), 0)
            )
            .select_from(PumpSaleOrm)
            .join(PumpOrm, PumpOrm.id == PumpSaleOrm.pump_id)
            .join(TankOrm, TankOrm.id == PumpOrm.tank_id)
            .where(TankOrm.station_id == self.station_id)
            .group_by(TankOrm.fuel_type)
            .order_by(TankOrm.fuel_type)
        )
        dataset = await self.select_all(stmt, scalars=False)
        return dataset
