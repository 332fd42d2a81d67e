from fastapi import APIRouter, Depends

from fillstation.depends import get_service_station, get_service_registration
from fillstation.schemas.common import SuccessSchema
from fillstation.schemas.station import StationRegisterSchema, StationRegisteredSchema, StationReadSchema, \
    StationEditSchema
from fillstation.services.station import StationService
from fillstation.utils.descriptions.station import station_tag_description, register_station_description, \
    get_station_description, edit_station_description, delete_station_description
from fillstation.utils.exceptions import ForbiddenException
from fillstation.utils.schemas import MessageSchema

router = APIRouter()
station_tag_metadata = {
    "name": "station",
    "description": station_tag_description,
}


@router.post(
    path="/station/create",
    tags=["station"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        409: {'model': MessageSchema, "description": "Duplicate"}
    },
    response_model = StationRegisteredSchema,
    status_code = 201,
    name = 'Station registration',
    description = register_station_description
)
async def register(
    data: StationRegisterSchema,
    service: StationService = Depends(get_service_registration)
) -> StationRegisteredSchema:
    # Registration is open to everyone
    registered = await service.register(data)
    return registered


@router.get(
    path="/station/me",
    tags=["station"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = StationReadSchema,
    name = 'Getting own station',
    description = get_station_description
)
async def get_station(
    service: StationService = Depends(get_service_station)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    station = await service.get_station()
    return station


@router.put(
    path="/station/me/edit",
    tags=["station"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"}
    },
    response_model = StationReadSchema,
    name = 'Editing own station',
    description = edit_station_description
)
async def edit(
    data: StationEditSchema,
    service: StationService = Depends(get_service_station)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    station = await service.edit(data)
    return station


@router.delete(
    path="/station/me/delete",
    tags=["station"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = SuccessSchema,
    name = 'Deleting own station',
    description = delete_station_description
)
async def delete(
    service: StationService = Depends(get_service_station)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    await service.delete()
    return {'success': True}
