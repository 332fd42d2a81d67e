import uuid

from fastapi import APIRouter, Depends

from fillstation.depends import get_service_tank
from fillstation.schemas.tank import TankCreateSchema, TankCollectionReadSchema, TankReadSchema, TankEditSchema
from fillstation.services.tank import TankService
from fillstation.utils.descriptions.tank import tank_tag_description, create_tank_description, \
    get_tanks_description, edit_tank_description, delete_tank_description
from fillstation.utils.exceptions import ForbiddenException
from fillstation.utils.schemas import MessageSchema

router = APIRouter()
tank_tag_metadata = {
    "name": "tank",
    "description": tank_tag_description,
}


@router.post(
    path="/tank/create",
    tags=["tank"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        409: {'model': MessageSchema, "description": "Duplicate title"}
    },
    response_model = TankCollectionReadSchema,
    status_code = 201,
    name = 'Adding a tank',
    description = create_tank_description
)
async def create(
    data: TankCreateSchema,
    service: TankService = Depends(get_service_tank)
) -> TankCollectionReadSchema:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    collection = await service.create(data)
    return collection


@router.get(
    path="/tank/all",
    tags=["tank"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = TankCollectionReadSchema,
    name = 'Getting the tanks',
    description = get_tanks_description
)
async def get_tanks(
    service: TankService = Depends(get_service_tank)
) -> TankCollectionReadSchema:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    collection = await service.get_collection()
    return collection


@router.put(
    path="/tank/{id}/edit",
    tags=["tank"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"},
        409: {'model': MessageSchema, "description": "Duplicate title"}
    },
    response_model = TankReadSchema,
    name = 'Editing a tank',
    description = edit_tank_description
)
async def edit(
    id: uuid.UUID,
    data: TankEditSchema,
    service: TankService = Depends(get_service_tank)
) -> TankReadSchema:
    _id_ = str(id)
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    tank = await service.edit(_id_, data)
    return tank


@router.delete(
    path="/tank/{id}/delete",
    tags=["tank"],
    responses = {
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = MessageSchema,
    name = 'Deleting a tank',
    description = delete_tank_description
)
async def delete(
    id: uuid.UUID,
    service: TankService = Depends(get_service_tank)
):
    _id_ = str(id)
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    await service.delete(_id_)
    return {'message': 'Tank deleted successfully'}
