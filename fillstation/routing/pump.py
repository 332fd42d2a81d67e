import uuid
from typing import List

from fastapi import APIRouter, Depends

from fillstation.depends import get_service_pump
from fillstation.schemas.pump import PumpCreateSchema, PumpReadSchema, PumpListSchema, PumpEditSchema, \
    PumpDeletedSchema, FuelPricesSchema, FuelPriceResultSchema, SalesSummarySchema
from fillstation.services.pump import PumpService
from fillstation.utils.descriptions.pump import pump_tag_description, create_pump_description, \
    get_pumps_description, edit_pump_description, delete_pump_description, set_prices_description, \
    sales_summary_description
from fillstation.utils.exceptions import ForbiddenException
from fillstation.utils.schemas import MessageSchema

router = APIRouter()
pump_tag_metadata = {
    "name": "pump",
    "description": pump_tag_description,
}


# Declared before /pump/{id}/edit so that "prices" is not taken for a pump id
@router.put(
    path="/pump/prices/edit",
    tags=["pump"],
    responses = {
        400: {'model': MessageSchema, "description": "Unknown fuel type or invalid price"},
        403: {'model': MessageSchema, "description": "Forbidden"}
    },
    response_model = List[FuelPriceResultSchema],
    name = 'Setting fuel prices',
    description = set_prices_description
)
async def set_prices(
    data: FuelPricesSchema,
    service: PumpService = Depends(get_service_pump)
) -> List[FuelPriceResultSchema]:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    results = await service.set_prices(data)
    return results


@router.get(
    path="/pump/sales/summary",
    tags=["pump"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = SalesSummarySchema,
    name = 'Sales summary',
    description = sales_summary_description
)
async def get_sales_summary(
    service: PumpService = Depends(get_service_pump)
) -> SalesSummarySchema:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    summary = await service.get_sales_summary()
    return summary


@router.post(
    path="/pump/create",
    tags=["pump"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Tank not found"}
    },
    response_model = PumpReadSchema,
    status_code = 201,
    name = 'Adding a pump',
    description = create_pump_description
)
async def create(
    data: PumpCreateSchema,
    service: PumpService = Depends(get_service_pump)
) -> PumpReadSchema:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    pump = await service.create(data)
    return pump


@router.get(
    path="/pump/all",
    tags=["pump"],
    responses = {403: {'model': MessageSchema, "description": "Forbidden"}},
    response_model = PumpListSchema,
    name = 'Getting the pumps',
    description = get_pumps_description
)
async def get_pumps(
    service: PumpService = Depends(get_service_pump)
) -> PumpListSchema:
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    pumps = await service.get_pumps()
    return pumps


@router.put(
    path="/pump/{id}/edit",
    tags=["pump"],
    responses = {
        400: {'model': MessageSchema, "description": "Bad request"},
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = PumpReadSchema,
    name = 'Editing a pump',
    description = edit_pump_description
)
async def edit(
    id: uuid.UUID,
    data: PumpEditSchema,
    service: PumpService = Depends(get_service_pump)
) -> PumpReadSchema:
    _id_ = str(id)
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    pump = await service.edit(_id_, data)
    return pump


@router.delete(
    path="/pump/{id}/delete",
    tags=["pump"],
    responses = {
        403: {'model': MessageSchema, "description": "Forbidden"},
        404: {'model': MessageSchema, "description": "Not found"}
    },
    response_model = PumpDeletedSchema,
    name = 'Deleting a pump',
    description = delete_pump_description
)
async def delete(
    id: uuid.UUID,
    service: PumpService = Depends(get_service_pump)
) -> PumpDeletedSchema:
    _id_ = str(id)
    if not service.repository.actor.is_manager:
        raise ForbiddenException()

    deleted = await service.delete(_id_)
    return deleted
