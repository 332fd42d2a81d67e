import uuid
from typing import List

from fillstation.auth.manager import create_user, update_user
from fillstation.database.models import StaffOrm
from fillstation.repositories.staff import StaffRepository
from fillstation.schemas.staff import StaffCreateSchema, StaffEditSchema, NotificationPreferencesSchema
from fillstation.utils.exceptions import NotFoundException, BadRequestException

# Fields that may be cleared by sending null
NULLABLE_FIELDS = ('shift_type', 'pay_type')


class StaffService:

    def __init__(self, repository: StaffRepository) -> None:
        self.repository = repository
        self.logger = repository.logger

    async def create(self, create_schema: StaffCreateSchema) -> StaffOrm:
        # New staff always joins the station of the manager
        create_schema.station_id = self.repository.station_id
        staff = await create_user(self.repository.session, create_schema)
        self.logger.info(f"Staff {staff.id} ({staff.role}) has been added to station {staff.station_id}")
        return staff

    async def get_staff(self, staff_id: uuid.UUID) -> StaffOrm:
        staff = await self.repository.get_staff(staff_id)
        if not staff:
            raise NotFoundException('Staff not found')

        return staff

    async def get_staff_list(self) -> List[StaffOrm]:
        staff_list = await self.repository.get_staff_list()
        return staff_list

    async def edit(self, staff_id: uuid.UUID, edit_schema: StaffEditSchema) -> StaffOrm:
        staff = await self.get_staff(staff_id)
        update_data = {
            field: value for field, value in edit_schema.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        if 'notification_preferences' in update_data:
            # Preferences missing in the request keep their stored values
            update_data['notification_preferences'] = {
                **NotificationPreferencesSchema().model_dump(),
                **(staff.notification_preferences or {}),
                **update_data['notification_preferences']
            }

        staff = await update_user(self.repository.session, staff, StaffEditSchema(**update_data))
        return staff

    async def delete(self, staff_id: uuid.UUID) -> None:
        if str(staff_id) == self.repository.actor.id:
            raise BadRequestException('You can not delete your own account')

        staff = await self.get_staff(staff_id)
        await self.repository.delete_object(StaffOrm, staff.id)
        self.logger.info(f"Staff {staff_id} has been deleted")
