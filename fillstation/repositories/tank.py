from typing import List, Optional

from sqlalchemy import select as sa_select, update as sa_update, delete as sa_delete, func

from fillstation.database.models import TankOrm, PumpOrm, PumpSaleOrm, DeliveryOrm
from fillstation.repositories.base import BaseRepository
from fillstation.schemas.tank import TankCreateSchema
from fillstation.utils.exceptions import CapacityExceededException, BadRequestException, NotFoundException


class TankRepository(BaseRepository):

    async def create(self, create_schema: TankCreateSchema) -> TankOrm:
        new_tank = TankOrm(
            station_id=self.station_id,
            title=create_schema.title,
            fuel_type=create_schema.fuel_type.value,
            limit=create_schema.limit,
            threshold=create_schema.threshold
        )
        await self.save_object(new_tank)
        return new_tank

    async def get_tank(self, tank_id: str) -> Optional[TankOrm]:
        stmt = (
            sa_select(TankOrm)
            .where(TankOrm.id == tank_id)
            .where(TankOrm.station_id == self.station_id)
        )
        tank = await self.select_first(stmt)
        return tank

    async def get_tanks(self) -> List[TankOrm]:
        stmt = (
            sa_select(TankOrm)
            .where(TankOrm.station_id == self.station_id)
            .order_by(TankOrm.created_at)
        )
        tanks = await self.select_all(stmt)
        return tanks

    async def get_tank_by_title(self, title: str, exclude_id: str | None = None) -> Optional[TankOrm]:
        stmt = (
            sa_select(TankOrm)
            .where(TankOrm.station_id == self.station_id)
            .where(func.lower(TankOrm.title) == title.strip().lower())
        )
        if exclude_id:
            stmt = stmt.where(TankOrm.id != exclude_id)

        tank = await self.select_first(stmt)
        return tank

    async def increment_quantity(self, tank_id: str, quantity: float) -> None:
        """
        Adds the quantity to the tank in the current transaction.

        The check and the write are a single conditional UPDATE, so two concurrent
        increments can not both pass the limit check. When the row is not updated
        the whole transaction is rolled back and the reason is reported.
        """
        stmt = (
            sa_update(TankOrm)
            .where(TankOrm.id == tank_id)
            .where(TankOrm.station_id == self.station_id)
            .where(TankOrm.current_quantity + quantity <= TankOrm.limit)
            .where(TankOrm.current_quantity + quantity >= 0)
            .values(current_quantity=TankOrm.current_quantity + quantity)
        )
        result = await self.execute(stmt)
        if result.rowcount == 1:
            self.logger.info(f"Tank {tank_id}: quantity changed by {quantity:g} ltr(s)")
            return

        stmt = (
            sa_select(TankOrm.current_quantity, TankOrm.limit)
            .where(TankOrm.id == tank_id)
            .where(TankOrm.station_id == self.station_id)
        )
        dataset = await self.select_helper(stmt, scalars=False)
        row = dataset.first()
        await self.session.rollback()

        if not row:
            raise NotFoundException('Tank not found')

        current_quantity, limit = row
        if current_quantity + quantity < 0:
            raise BadRequestException(
                f"Cannot withdraw {-quantity:g} ltr(s). The tank holds only {current_quantity:g} ltr(s)."
            )

        raise CapacityExceededException(quantity, current_quantity, limit)

    async def count_pumps(self, tank_id: str) -> int:
        stmt = sa_select(func.count(PumpOrm.id)).where(PumpOrm.tank_id == tank_id)
        amount = await self.select_single_field(stmt)
        return amount or 0

    async def delete_tank(self, tank_id: str) -> None:
        # Pumps and their sales go together with the tank, deliveries keep their records
        pump_ids = sa_select(PumpOrm.id).where(PumpOrm.tank_id == tank_id).scalar_subquery()
        await self.execute(sa_delete(PumpSaleOrm).where(PumpSaleOrm.pump_id.in_(pump_ids)))
        await self.execute(sa_delete(PumpOrm).where(PumpOrm.tank_id == tank_id))
        await self.execute(
            sa_update(DeliveryOrm)
            .where(DeliveryOrm.tank_id == tank_id)
            .values(tank_id=None)
        )
        await self.delete_object(TankOrm, tank_id)
