import uuid
from typing import List

from fastapi import APIRouter, Depends

from fillstation.auth.auth import current_active_user
from fillstation.database.models import StaffOrm
from fillstation.depends import get_service_staff
from fillstation.schemas.common import SuccessSchema
from fillstation.schemas.staff import StaffReadSchema, StaffCreateSchema, StaffEditSchema
from fillstation.services.staff import StaffService
from fillstation.utils.descriptions.staff import staff_tag_description, get_me_description, \
    create_staff_description, get_staff_list_description, edit_staff_description, delete_staff_description
from fillstation.utils.exceptions import ForbiddenException
from fillstation.utils.schemas import MessageSchema

router = APIRouter()
staff_tag_metadata = {
    "name": "staff",
    "description": staff_tag_description,
}


@router.get(
    path="/staff/me",
    tags=["staff"],
    response_model = StaffReadSchema,
    name = 'Own profile',
    description = get_me_description
)
async def get_me(
    user: StaffOrm = Depends(current_active_user)
):
    # Available to every staff member
    return user


@router.post(
    path="/staff/create",
    tags=["staff"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        409: {'model': MessageSchema, "description": "Duplicate"}
    },
    response_model = StaffReadSchema,
    status_code = 201,
    name = 'Creating a staff account',
    description = create_staff_description
)
async def create(
    data: StaffCreateSchema,
    service: StaffService = Depends(get_service_staff)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    staff = await service.create(data)
    return staff


@router.get(
    path="/staff/all",
    tags=["staff"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = List[StaffReadSchema],
    name = 'Getting the staff list',
    description = get_staff_list_description
)
async def get_staff_list(
    service: StaffService = Depends(get_service_staff)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    staff_list = await service.get_staff_list()
    return staff_list


@router.put(
    path="/staff/{id}/edit",
    tags=["staff"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = StaffReadSchema,
    name = 'Editing a staff account',
    description = edit_staff_description
)
async def edit(
    id: uuid.UUID,
    data: StaffEditSchema,
    service: StaffService = Depends(get_service_staff)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    staff = await service.edit(id, data)
    return staff


@router.delete(
    path="/staff/{id}/delete",
    tags=["staff"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = SuccessSchema,
    name = 'Deleting a staff account',
    description = delete_staff_description
)
async def delete(
    id: uuid.UUID,
    service: StaffService = Depends(get_service_staff)
):
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    await service.delete(id)
    return {'success': True}
