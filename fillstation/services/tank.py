from fillstation.database.models import TankOrm
from fillstation.repositories.tank import TankRepository
from fillstation.schemas.tank import TankCreateSchema, TankCollectionReadSchema, TankReadSchema, TankEditSchema
from fillstation.utils.exceptions import DBDuplicateException, NotFoundException, BadRequestException


class TankService:

    def __init__(self, repository: TankRepository) -> None:
        self.repository = repository
        self.logger = repository.logger

    async def check_title(self, title: str, exclude_id: str | None = None) -> None:
        if await self.repository.get_tank_by_title(title, exclude_id):
            raise DBDuplicateException(f'A tank titled "{title}" already exists in this station')

    async def create(self, create_schema: TankCreateSchema) -> TankCollectionReadSchema:
        await self.check_title(create_schema.title)
        tank = await self.repository.create(create_schema)
        self.logger.info(f"Tank {tank.id} ({tank.title}, {tank.fuel_type}) has been added")
        return await self.get_collection()

    async def get_collection(self) -> TankCollectionReadSchema:
        tanks = await self.repository.get_tanks()
        return TankCollectionReadSchema(
            station_id=self.repository.station_id,
            total=sum(tank.current_quantity for tank in tanks),
            tanks=[TankReadSchema.model_validate(tank) for tank in tanks]
        )

    async def get_tank(self, tank_id: str) -> TankOrm:
        tank = await self.repository.get_tank(tank_id)
        if not tank:
            raise NotFoundException('Tank not found')

        return tank

    async def edit(self, tank_id: str, edit_schema: TankEditSchema) -> TankReadSchema:
        tank = await self.get_tank(tank_id)
        update_data = {
            field: value for field, value in edit_schema.model_dump(exclude_unset=True).items()
            if value is not None
        }

        if 'title' in update_data:
            await self.check_title(update_data['title'], tank.id)

        if 'fuel_type' in update_data:
            update_data['fuel_type'] = update_data['fuel_type'].value

        quantity = update_data.pop('current_quantity', None)
        limit = update_data.get('limit', tank.limit)
        if not quantity and limit < tank.current_quantity:
            raise BadRequestException(
                f"The limit of {limit:g} ltr(s) is lower than the current quantity of "
                f"{tank.current_quantity:g} ltr(s)"
            )

        tank.update_without_saving(update_data)
        if quantity:
            # Checked against the new limit, the pending changes are flushed first
            await self.repository.increment_quantity(tank.id, quantity)

        await self.repository.commit()
        await self.repository.session.refresh(tank)
        return TankReadSchema.model_validate(tank)

    async def delete(self, tank_id: str) -> None:
        tank = await self.get_tank(tank_id)
        await self.repository.delete_tank(tank.id)
        self.logger.info(f"Tank {tank_id} has been deleted")
