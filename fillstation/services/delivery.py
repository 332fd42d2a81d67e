from typing import List

from fillstation.database.models import DeliveryOrm
from fillstation.repositories.delivery import DeliveryRepository
from fillstation.repositories.tank import TankRepository
from fillstation.schemas.delivery import DeliveryCreateSchema, DeliveryReadSchema, DeliveryListItemSchema, \
    DeliveryEditSchema
from fillstation.utils.enums import DeliveryStatus
from fillstation.utils.exceptions import NotFoundException, CapacityExceededException, BadRequestException

UNKNOWN_TANK = "Unknown Tank"
UNKNOWN_FUEL_TYPE = "Unknown"


class DeliveryService:

    def __init__(self, repository: DeliveryRepository) -> None:
        self.repository = repository
        self.tank_repository = TankRepository(repository.session, repository.actor)
        self.logger = repository.logger

    async def create(self, create_schema: DeliveryCreateSchema) -> DeliveryReadSchema:
        tank = await self.tank_repository.get_tank(create_schema.tank_id)
        if not tank:
            raise NotFoundException('Tank not found')

        if tank.current_quantity + create_schema.quantity > tank.limit:
            raise CapacityExceededException(create_schema.quantity, tank.current_quantity, tank.limit)

        delivery = DeliveryOrm(
            station_id=self.repository.station_id,
            tank_id=tank.id,
            price_per_ltr=create_schema.price_per_ltr,
            quantity=create_schema.quantity,
            supplier=create_schema.supplier,
            delivery_date=create_schema.delivery_date,
            status=create_schema.status.value
        )
        await self.repository.add_object(delivery)

        # A delivery registered as completed fills the tank right away
        if create_schema.status == DeliveryStatus.COMPLETED:
            await self.tank_repository.increment_quantity(tank.id, create_schema.quantity)

        await self.repository.commit()
        self.logger.info(
            f"Delivery {delivery.id} of {delivery.quantity:g} ltr(s) to tank {tank.id} "
            f"has been registered as {delivery.status}"
        )
        return DeliveryReadSchema.model_validate(delivery)

    async def get_delivery(self, delivery_id: str) -> DeliveryOrm:
        delivery = await self.repository.get_delivery(delivery_id)
        if not delivery:
            raise NotFoundException('Delivery not found')

        return delivery

    async def get_deliveries(self) -> List[DeliveryListItemSchema]:
        deliveries = await self.repository.get_deliveries()
        items = []
        for delivery in deliveries:
            data = DeliveryReadSchema.model_validate(delivery).model_dump()
            data['tank_title'] = delivery.tank.title if delivery.tank else UNKNOWN_TANK
            data['fuel_type'] = delivery.tank.fuel_type if delivery.tank else UNKNOWN_FUEL_TYPE
            items.append(DeliveryListItemSchema(**data))

        return items

    async def edit(self, delivery_id: str, edit_schema: DeliveryEditSchema) -> DeliveryReadSchema:
        delivery = await self.get_delivery(delivery_id)
        current_status = DeliveryStatus(delivery.status)

        update_data = {
            field: value for field, value in edit_schema.model_dump(exclude_unset=True).items()
            if value is not None
        }
        new_status = update_data.pop('status', current_status)
        status_changed = new_status != current_status
        if status_changed and current_status.is_terminal:
            raise BadRequestException(
                f"The delivery is already {current_status.value.lower()}, its status can not be changed"
            )

        delivery.update_without_saving(update_data)
        tank_id, quantity = delivery.tank_id, delivery.quantity

        if status_changed:
            if new_status == DeliveryStatus.COMPLETED and not tank_id:
                raise BadRequestException('The tank of this delivery no longer exists')

            # Pending -> Completed is applied once even when requested concurrently
            if not await self.repository.change_status(delivery.id, current_status, new_status):
                await self.repository.session.rollback()
                raise BadRequestException('The delivery status has been changed by another request')

            if new_status == DeliveryStatus.COMPLETED:
                await self.tank_repository.increment_quantity(tank_id, quantity)

        await self.repository.commit()
        if status_changed:
            self.logger.info(f"Delivery {delivery_id}: {current_status.value} -> {new_status.value}")

        delivery = await self.get_delivery(delivery_id)
        return DeliveryReadSchema.model_validate(delivery)

    async def delete(self, delivery_id: str) -> None:
        delivery = await self.get_delivery(delivery_id)
        if delivery.status == DeliveryStatus.COMPLETED.value:
            raise BadRequestException('A completed delivery can not be deleted')

        await self.repository.delete_object(DeliveryOrm, delivery.id)
        self.logger.info(f"Delivery {delivery_id} has been deleted")
