from fastapi import Depends

from sqlalchemy.ext.asyncio import AsyncSession

from fillstation.auth.actor import Actor
from fillstation.auth.auth import get_actor
from fillstation.database.db import get_session
from fillstation.repositories.delivery import DeliveryRepository
from fillstation.repositories.pump import PumpRepository
from fillstation.repositories.staff import StaffRepository
from fillstation.repositories.station import StationRepository
from fillstation.repositories.tank import TankRepository
from fillstation.services.delivery import DeliveryService
from fillstation.services.pump import PumpService
from fillstation.services.staff import StaffService
from fillstation.services.station import StationService
from fillstation.services.tank import TankService

"""
Dependency injection
"""


def get_service_registration(
    session: AsyncSession = Depends(get_session)
) -> StationService:
    repository = StationRepository(session, None)
    service = StationService(repository)
    return service


def get_service_station(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(get_actor)
) -> StationService:
    repository = StationRepository(session, actor)
    service = StationService(repository)
    return service


def get_service_staff(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(get_actor)
) -> StaffService:
    repository = StaffRepository(session, actor)
    service = StaffService(repository)
    return service


def get_service_tank(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(get_actor)
) -> TankService:
    repository = TankRepository(session, actor)
    service = TankService(repository)
    return service


def get_service_pump(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(get_actor)
) -> PumpService:
    repository = PumpRepository(session, actor)
    service = PumpService(repository)
    return service


def get_service_delivery(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(get_actor)
) -> DeliveryService:
    repository = DeliveryRepository(session, actor)
    service = DeliveryService(repository)
    return service
