import uuid
from typing import List

from fastapi import APIRouter, Depends

from fillstation.depends import get_service_delivery
from fillstation.schemas.common import SuccessSchema
from fillstation.schemas.delivery import DeliveryCreateSchema, DeliveryReadSchema, DeliveryListItemSchema, \
    DeliveryEditSchema
from fillstation.services.delivery import DeliveryService
from fillstation.utils.descriptions.delivery import delivery_tag_description, create_delivery_description, \
    get_deliveries_description, edit_delivery_description, delete_delivery_description
from fillstation.utils.exceptions import ForbiddenException
from fillstation.utils.schemas import MessageSchema

router = APIRouter()
delivery_tag_metadata = {
    "name": "delivery",
    "description": delivery_tag_description,
}


@router.post(
    path="/delivery/create",
    tags=["delivery"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request or tank limit exceeded"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Tank not found"}
    },
    response_model = DeliveryReadSchema,
    status_code = 201,
    name = 'Registering a delivery',
    description = create_delivery_description
)
async def create(
    data: DeliveryCreateSchema,
    service: DeliveryService = Depends(get_service_delivery)
) -> DeliveryReadSchema:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    delivery = await service.create(data)
    return delivery


@router.get(
    path="/delivery/all",
    tags=["delivery"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = List[DeliveryListItemSchema],
    name = 'Getting the deliveries',
    description = get_deliveries_description
)
async def get_deliveries(
    service: DeliveryService = Depends(get_service_delivery)
) -> List[DeliveryListItemSchema]:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    deliveries = await service.get_deliveries()
    return deliveries


@router.put(
    path="/delivery/{id}/edit",
    tags=["delivery"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request or tank limit exceeded"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = DeliveryReadSchema,
    name = 'Editing a delivery',
    description = edit_delivery_description
)
async def edit(
    id: uuid.UUID,
    data: DeliveryEditSchema,
    service: DeliveryService = Depends(get_service_delivery)
) -> DeliveryReadSchema:
    _id_ = str(id)
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    delivery = await service.edit(_id_, data)
    return delivery


@router.delete(
    path="/delivery/{id}/delete",
    tags=["delivery"],
    responses = {
        400: {'model': MessageSchema, "description": "Completed delivery"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = SuccessSchema,
    name = 'Deleting a delivery',
    description = delete_delivery_description
)
async def delete(
    id: uuid.UUID,
    service: DeliveryService = Depends(get_service_delivery)
):
    _id_ = str(id)
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    await service.delete(_id_)
    return {'success': True}
