from fillstation.auth.manager import create_user
from fillstation.database.models import StationOrm
from fillstation.repositories.station import StationRepository
from fillstation.schemas.staff import StaffCreateSchema, StaffReadSchema
from fillstation.schemas.station import StationRegisterSchema, StationRegisteredSchema, StationReadSchema, \
    StationEditSchema
from fillstation.utils import enums
from fillstation.utils.exceptions import DBDuplicateException, NotFoundException


class StationService:

    def __init__(self, repository: StationRepository) -> None:
        self.repository = repository
        self.logger = repository.logger

    async def register(self, register_schema: StationRegisterSchema) -> StationRegisteredSchema:
        """
        Creates the station and its manager account in one transaction
        """
        license_number = register_schema.station.license_number
        if await self.repository.get_station_by_license(license_number):
            raise DBDuplicateException('A station with this license number already exists')

        station = StationOrm(**register_schema.station.model_dump())
        await self.repository.add_object(station)

        manager_data = register_schema.manager.model_dump(exclude_unset=True)
        manager_data['role'] = enums.Role.MANAGER.name
        manager_data['station_id'] = station.id
        try:
            # The account creation commits the station as well
            manager = await create_user(self.repository.session, StaffCreateSchema(**manager_data))

        except Exception:
            await self.repository.session.rollback()
            raise

        self.logger.info(f"Station {station.id} ({station.name}) has been registered by {manager.email}")
        return StationRegisteredSchema(
            station=StationReadSchema.model_validate(station),
            manager=StaffReadSchema.model_validate(manager)
        )

    async def get_station(self) -> StationOrm:
        station = await self.repository.get_station(self.repository.station_id)
        if not station:
            raise NotFoundException('Station not found')

        return station

    async def edit(self, edit_schema: StationEditSchema) -> StationOrm:
        station = await self.get_station()
        # Only the image can be cleared, other fields are mandatory
        update_data = {
            field: value for field, value in edit_schema.model_dump(exclude_unset=True).items()
            if value is not None or field == "image"
        }

        license_number = update_data.get('license_number')
        if license_number and await self.repository.get_station_by_license(license_number, station.id):
            raise DBDuplicateException('A station with this license number already exists')

        await self.repository.update_object(station, update_data)
        return station

    async def delete(self) -> None:
        station = await self.get_station()
        station_id, name = station.id, station.name
        await self.repository.delete_station(station_id)
        self.logger.info(f"Station {station_id} ({name}) has been deleted")
