import pytest

from fillstation.auth.actor import Actor
from fillstation.utils import enums
from fillstation.utils.exceptions import CapacityExceededException, ForbiddenException
from fillstation.utils.password_policy import check_password_strength


class TestUtils:

    def test_fuel_type_ignores_case(self):
        assert enums.FuelType("petrol") is enums.FuelType.PETROL
        assert enums.FuelType(" ago ") is enums.FuelType.AGO

        with pytest.raises(ValueError):
            enums.FuelType("Hydrogen")

    def test_delivery_terminal_statuses(self):
        assert not enums.DeliveryStatus.PENDING.is_terminal
        assert enums.DeliveryStatus.COMPLETED.is_terminal
        assert enums.DeliveryStatus.CANCELLED.is_terminal

    def test_capacity_exceeded_message(self):
        exc = CapacityExceededException(quantity=1500, current_quantity=9500, limit=10000)

        assert exc.overflow == 1000
        assert exc.message == (
            "Cannot add 1500 ltr(s). This will exceed the tank limit of 10000 ltr(s) by 1000 ltr(s)."
        )

    def test_password_policy(self):
        assert check_password_strength(enums.Role.MANAGER.name, "One2345!") is None
        assert check_password_strength(enums.Role.MANAGER.name, "one2345!")
        assert check_password_strength(enums.Role.ATTENDANT.name, "pump12") is None
        assert check_password_strength(enums.Role.ATTENDANT.name, "pumps")

    def test_actor_without_station(self):
        actor = Actor(id="1", role=enums.Role.MANAGER.name, station_id=None)

        assert actor.is_manager
        with pytest.raises(ForbiddenException):
            actor.require_station()
