from typing import List, Dict

from fillstation.database.models import PumpOrm, PumpSaleOrm
from fillstation.repositories.pump import PumpRepository
from fillstation.repositories.tank import TankRepository
from fillstation.schemas.pump import PumpCreateSchema, PumpReadSchema, PumpSaleSchema, PumpEditSchema, \
    PumpListSchema, PumpDeletedSchema, FuelPricesSchema, FuelPriceResultSchema, SalesSummarySchema, FuelSalesSchema
from fillstation.utils.enums import FuelType
from fillstation.utils.exceptions import NotFoundException, BadRequestException


class PumpService:

    def __init__(self, repository: PumpRepository) -> None:
        self.repository = repository
        self.tank_repository = TankRepository(repository.session, repository.actor)
        self.logger = repository.logger

    @staticmethod
    def read_schema(pump: PumpOrm, fuel_type: str | None, sales: List[PumpSaleOrm]) -> PumpReadSchema:
        return PumpReadSchema(
            id=pump.id,
            tank_id=pump.tank_id,
            fuel_type=fuel_type,
            title=pump.title,
            status=pump.status,
            price_per_ltr=pump.price_per_ltr,
            start_date=pump.start_date,
            last_maintenance=pump.last_maintenance,
            daily_ltr_sales=[PumpSaleSchema.model_validate(sale) for sale in sales]
        )

    async def create(self, create_schema: PumpCreateSchema) -> PumpReadSchema:
        tank = await self.tank_repository.get_tank(create_schema.tank_id)
        if not tank:
            raise NotFoundException('Tank not found')

        # Pumps without a title are numbered by their position in the tank
        title = create_schema.title.strip() if create_schema.title else None
        if not title:
            pumps_amount = await self.tank_repository.count_pumps(tank.id)
            title = f"Pump {pumps_amount + 1}"

        pump = PumpOrm(
            tank_id=tank.id,
            title=title,
            price_per_ltr=create_schema.price_per_ltr,
            start_date=create_schema.start_date,
            status=create_schema.status.value,
            last_maintenance=create_schema.last_maintenance
        )
        await self.repository.save_object(pump)
        self.logger.info(f"Pump {pump.id} ({pump.title}) has been added to tank {tank.id}")
        return self.read_schema(pump, tank.fuel_type, [])

    async def get_pump(self, pump_id: str) -> PumpOrm:
        pump = await self.repository.get_pump(pump_id)
        if not pump:
            raise NotFoundException('Pump not found')

        return pump

    async def get_pumps(self) -> PumpListSchema:
        pumps = await self.repository.get_pumps()
        return PumpListSchema(
            total_pumps=len(pumps),
            pumps=[self.read_schema(pump, pump.tank.fuel_type, pump.daily_ltr_sales) for pump in pumps]
        )

    async def edit(self, pump_id: str, edit_schema: PumpEditSchema) -> PumpReadSchema:
        pump = await self.get_pump(pump_id)
        update_data = {
            field: value for field, value in edit_schema.model_dump(exclude_unset=True).items()
            if value is not None or field == 'last_maintenance'
        }
        update_data.pop('daily_ltr_sales', None)
        if 'status' in update_data:
            update_data['status'] = update_data['status'].value

        pump.update_without_saving(update_data)
        if edit_schema.daily_ltr_sales is not None:
            # Every entry is already validated, the stored list is replaced as a whole
            await self.repository.replace_sales(pump.id, edit_schema.daily_ltr_sales)

        await self.repository.commit()

        pump = await self.get_pump(pump_id)
        return self.read_schema(pump, pump.tank.fuel_type, pump.daily_ltr_sales)

    async def delete(self, pump_id: str) -> PumpDeletedSchema:
        pump = await self.get_pump(pump_id)
        deleted = PumpDeletedSchema(deleted_pump_id=pump.id, tank_id=pump.tank_id, fuel_type=pump.tank.fuel_type)

        await self.repository.replace_sales(pump.id, [])
        await self.repository.delete_object(PumpOrm, pump.id)
        self.logger.info(f"Pump {pump_id} has been deleted from tank {deleted.tank_id}")
        return deleted

    async def set_prices(self, prices_schema: FuelPricesSchema) -> List[FuelPriceResultSchema]:
        if not prices_schema.prices:
            raise BadRequestException('No fuel prices given')

        # All fuel types are checked before anything is written
        prices: Dict[FuelType, float] = {}
        for name, price in prices_schema.prices.items():
            try:
                prices[FuelType(name)] = price
            except ValueError:
                raise BadRequestException(f'Unknown fuel type: "{name}"')

        results = []
        for fuel_type, price in prices.items():
            matched, modified = await self.repository.set_price_by_fuel_type(fuel_type, price)
            results.append(
                FuelPriceResultSchema(
                    fuel_type=fuel_type.value,
                    price_per_ltr=price,
                    matched=matched,
                    modified=modified
                )
            )

        await self.repository.commit()
        for result in results:
            self.logger.info(
                f"Station {self.repository.station_id}: {result.fuel_type} price set to {result.price_per_ltr:g} "
                f"on {result.modified} pump(s) of {result.matched} tank(s)"
            )

        return results

    async def get_sales_summary(self) -> SalesSummarySchema:
        dataset = await self.repository.get_sales_by_fuel_type()
        fuel_types = [
            FuelSalesSchema(fuel_type=fuel_type, liters=float(liters), revenue=float(revenue))
            for fuel_type, liters, revenue in dataset
        ]
        return SalesSummarySchema(
            fuel_types=fuel_types,
            total_liters=sum(item.liters for item in fuel_types),
            total_revenue=sum(item.revenue for item in fuel_types)
        )
