import uuid
from typing import Any, Dict

import pytest
from httpx import AsyncClient

from fillstation.auth.actor import Actor
from fillstation.database.db import sessionmanager
from fillstation.repositories.delivery import DeliveryRepository
from fillstation.schemas.delivery import DeliveryCreateSchema, DeliveryEditSchema
from fillstation.services.delivery import DeliveryService
from fillstation.utils.exceptions import BadRequestException, CapacityExceededException
from tests.conftest import headers, create_tank, get_tank, rival_station_token


def delivery_data(tank_id: str, **fields) -> Dict[str, Any]:
    data = {
        "tank_id": tank_id,
        "price_per_ltr": 600,
        "quantity": 500,
        "supplier": "NNPC Depot Suleja",
        "delivery_date": "2024-06-01",
    }
    data.update(fields)
    return data


async def fill_tank(aclient: AsyncClient, token: str, quantity: float) -> Dict[str, Any]:
    tank = await create_tank(aclient, token)
    response = await aclient.put(
        url=f"/tank/{tank['id']}/edit",
        json={"current_quantity": quantity},
        headers=headers(token)
    )
    assert response.status_code == 200, response.text
    return response.json()


async def manager_actor(aclient: AsyncClient, token: str) -> Actor:
    response = await aclient.get(url="/staff/me", headers=headers(token))
    me = response.json()
    return Actor(id=me["id"], role=me["role"], station_id=me["station_id"])


class TestDelivery:

    async def test_create_pending_delivery(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 9000)

        response = await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))
        body = response.json()
        assert response.status_code == 201, response.text
        assert body['status'] == "Pending"
        assert body['tank_id'] == tank['id']

        # A pending delivery does not touch the tank
        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 9000

    async def test_completed_delivery_fills_tank(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 9000)

        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(tank['id'], quantity=500, status="Completed"),
            headers=headers(token)
        )
        assert response.status_code == 201, response.text
        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 9500

        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(tank['id'], quantity=1500, status="Completed"),
            headers=headers(token)
        )
        assert response.status_code == 400
        assert "exceed the tank limit" in response.json()['message']

        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 9500

        # The rejected delivery has not been recorded
        response = await aclient.get(url="/delivery/all", headers=headers(token))
        assert len(response.json()) == 1

    async def test_pending_delivery_over_limit(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 9000)

        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(tank['id'], quantity=1001),
            headers=headers(token)
        )
        assert response.status_code == 400

        response = await aclient.get(url="/delivery/all", headers=headers(token))
        assert response.json() == []

    async def test_complete_once(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 1000)
        response = await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))
        delivery_id = response.json()['id']

        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"status": "Completed"},
            headers=headers(token)
        )
        assert response.status_code == 200, response.text
        assert response.json()['status'] == "Completed"

        # Completing again is a no-op
        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"status": "Completed"},
            headers=headers(token)
        )
        assert response.status_code == 200

        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 1500

    async def test_complete_over_limit(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 8000)
        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(tank['id'], quantity=1500),
            headers=headers(token)
        )
        delivery_id = response.json()['id']

        # The tank is filled by other means meanwhile
        await aclient.put(url=f"/tank/{tank['id']}/edit", json={"current_quantity": 1000}, headers=headers(token))

        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"status": "Completed"},
            headers=headers(token)
        )
        assert response.status_code == 400

        # Neither the tank nor the delivery has changed
        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 9000
        response = await aclient.get(url="/delivery/all", headers=headers(token))
        assert response.json()[0]['status'] == "Pending"

    async def test_edit_quantity_before_completion(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 0)
        response = await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))
        delivery_id = response.json()['id']

        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"quantity": 750, "supplier": "Total Depot", "status": "Completed"},
            headers=headers(token)
        )
        body = response.json()
        assert response.status_code == 200, response.text
        assert body['quantity'] == 750
        assert body['supplier'] == "Total Depot"

        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 750

    async def test_terminal_status(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 0)
        response = await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))
        delivery_id = response.json()['id']

        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"status": "Cancelled"},
            headers=headers(token)
        )
        assert response.status_code == 200
        assert response.json()['status'] == "Cancelled"

        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"status": "Completed"},
            headers=headers(token)
        )
        assert response.status_code == 400

        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 0

    async def test_delete_delivery(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 0)
        response = await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))
        pending_id = response.json()['id']
        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(tank['id'], status="Completed"),
            headers=headers(token)
        )
        completed_id = response.json()['id']

        response = await aclient.delete(url=f"/delivery/{completed_id}/delete", headers=headers(token))
        assert response.status_code == 400

        response = await aclient.delete(url=f"/delivery/{pending_id}/delete", headers=headers(token))
        assert response.status_code == 200
        assert response.json() == {"success": True}

        response = await aclient.delete(url=f"/delivery/{pending_id}/delete", headers=headers(token))
        assert response.status_code == 404

    async def test_list_deliveries(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 0)
        await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))

        response = await aclient.get(url="/delivery/all", headers=headers(token))
        deliveries = response.json()
        assert response.status_code == 200
        assert deliveries[0]['tank_title'] == "Tank A"
        assert deliveries[0]['fuel_type'] == "Petrol"

    async def test_unknown_tank(self, aclient: AsyncClient, token: str):
        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(str(uuid.uuid4())),
            headers=headers(token)
        )
        assert response.status_code == 404

    async def test_invalid_delivery(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 0)
        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(tank['id'], quantity=0, supplier=" "),
            headers=headers(token)
        )
        assert response.status_code == 400
        assert response.json()['message'] == "Validation failed"

    async def test_tank_of_other_station(self, aclient: AsyncClient, token: str):
        rival_token = await rival_station_token(aclient)
        rival_tank = await create_tank(aclient, rival_token)

        response = await aclient.post(
            url="/delivery/create",
            json=delivery_data(rival_tank['id'], status="Completed"),
            headers=headers(token)
        )
        assert response.status_code == 404

        response = await aclient.put(
            url=f"/tank/{rival_tank['id']}/edit",
            json={"current_quantity": 100},
            headers=headers(token)
        )
        assert response.status_code == 404

        rival_tank = await get_tank(aclient, rival_token, rival_tank['id'])
        assert rival_tank['current_quantity'] == 0

        response = await aclient.post(url="/delivery/create", json=delivery_data(rival_tank['id']),
                                      headers=headers(rival_token))
        delivery_id = response.json()['id']

        response = await aclient.put(
            url=f"/delivery/{delivery_id}/edit",
            json={"status": "Completed"},
            headers=headers(token)
        )
        assert response.status_code == 404

        response = await aclient.get(url="/delivery/all", headers=headers(token))
        assert response.json() == []


class TestDeliveryConcurrency:

    async def test_completed_by_another_request(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 1000)
        response = await aclient.post(url="/delivery/create", json=delivery_data(tank['id']), headers=headers(token))
        delivery_id = response.json()['id']
        actor = await manager_actor(aclient, token)

        async with sessionmanager.session() as first_session, sessionmanager.session() as second_session:
            first = DeliveryService(DeliveryRepository(first_session, actor))
            second = DeliveryService(DeliveryRepository(second_session, actor))
            change_status = second.repository.change_status

            # The first request completes the delivery after the second one has read it as pending
            async def completed_meanwhile(*args):
                await first.edit(delivery_id, DeliveryEditSchema(status="Completed"))
                return await change_status(*args)

            second.repository.change_status = completed_meanwhile
            with pytest.raises(BadRequestException, match="changed by another request"):
                await second.edit(delivery_id, DeliveryEditSchema(status="Completed"))

        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 1500

        response = await aclient.get(url="/delivery/all", headers=headers(token))
        assert response.json()[0]['status'] == "Completed"

    async def test_tank_filled_by_another_request(self, aclient: AsyncClient, token: str):
        tank = await fill_tank(aclient, token, 9000)
        actor = await manager_actor(aclient, token)

        def completed_delivery() -> DeliveryCreateSchema:
            return DeliveryCreateSchema(**delivery_data(tank['id'], quantity=600, status="Completed"))

        async with sessionmanager.session() as first_session, sessionmanager.session() as second_session:
            first = DeliveryService(DeliveryRepository(first_session, actor))
            second = DeliveryService(DeliveryRepository(second_session, actor))
            get_tank_record = second.tank_repository.get_tank

            # The capacity check of the second request runs on a tank read before the first delivery
            async def filled_meanwhile(tank_id):
                tank_record = await get_tank_record(tank_id)
                await first.create(completed_delivery())
                return tank_record

            second.tank_repository.get_tank = filled_meanwhile
            with pytest.raises(CapacityExceededException):
                await second.create(completed_delivery())

        tank = await get_tank(aclient, token, tank['id'])
        assert tank['current_quantity'] == 9600

        response = await aclient.get(url="/delivery/all", headers=headers(token))
        assert len(response.json()) == 1
