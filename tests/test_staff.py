import uuid
from typing import Any, Dict

from httpx import AsyncClient

from tests.conftest import headers, login, MANAGER_EMAIL, register_station, station_data, manager_data


def staff_data(**fields) -> Dict[str, Any]:
    data = {
        "email": "cashier@flourish-station.com",
        "password": "Cash1234!",
        "first_name": "Bola",
        "last_name": "Ade",
        "phone": "+2348020000001",
        "role": "cashier",
        "shift_type": "Morning",
        "responsibility": ["Cash desk"],
        "notification_preferences": {"email": True, "low_stock": True},
    }
    data.update(fields)
    return data


class TestStaff:

    async def test_me(self, aclient: AsyncClient, token: str):
        response = await aclient.get(url="/staff/me", headers=headers(token))
        body = response.json()

        assert response.status_code == 200
        assert body['email'] == MANAGER_EMAIL
        assert body['role'] == "MANAGER"

    async def test_create_staff(self, aclient: AsyncClient, token: str):
        response = await aclient.get(url="/station/me", headers=headers(token))
        station_id = response.json()['id']

        response = await aclient.post(url="/staff/create", json=staff_data(), headers=headers(token))
        body = response.json()

        assert response.status_code == 201, response.text
        assert body['role'] == "CASHIER"
        assert body['station_id'] == station_id
        assert body['responsibility'] == ["Cash desk"]
        assert body['notification_preferences']['low_stock'] is True
        assert body['notification_preferences']['sms'] is False

        response = await aclient.get(url="/staff/all", headers=headers(token))
        assert response.status_code == 200
        assert len(response.json()) == 2

    async def test_notification_preferences(self, aclient: AsyncClient, token: str):
        data = staff_data()
        del data['notification_preferences']
        response = await aclient.post(url="/staff/create", json=data, headers=headers(token))
        body = response.json()

        assert response.status_code == 201, response.text
        assert body['notification_preferences'] == {
            "email": False, "sms": False, "push": False, "low_stock": False,
            "mail": False, "sales": False, "staffs": False
        }

        response = await aclient.put(
            url=f"/staff/{body['id']}/edit",
            json={"notification_preferences": {"sms": True}},
            headers=headers(token)
        )
        assert response.status_code == 200, response.text
        response = await aclient.put(
            url=f"/staff/{body['id']}/edit",
            json={"notification_preferences": {"sales": True}},
            headers=headers(token)
        )
        preferences = response.json()['notification_preferences']
        assert response.status_code == 200, response.text
        assert preferences['sms'] is True
        assert preferences['sales'] is True
        assert preferences['push'] is False
        assert len(preferences) == 7

        # The manager account created with the station carries all preferences too
        response = await aclient.get(url="/staff/me", headers=headers(token))
        assert len(response.json()['notification_preferences']) == 7

    async def test_staff_joins_manager_station(self, aclient: AsyncClient, token: str):
        response = await aclient.post(
            url="/staff/create",
            json=staff_data(station_id=str(uuid.uuid4())),
            headers=headers(token)
        )
        assert response.status_code == 201, response.text

        response = await aclient.get(url="/station/me", headers=headers(token))
        station_id = response.json()["id"]

        response = await aclient.get(url="/staff/all", headers=headers(token))
        assert {staff["station_id"] for staff in response.json()} == {station_id}

    async def test_create_duplicate_email(self, aclient: AsyncClient, token: str):
        response = await aclient.post(
            url="/staff/create",
            json=staff_data(email=MANAGER_EMAIL),
            headers=headers(token)
        )
        assert response.status_code == 409

    async def test_create_unknown_role(self, aclient: AsyncClient, token: str):
        response = await aclient.post(url="/staff/create", json=staff_data(role="owner"), headers=headers(token))
        assert response.status_code == 400
        assert response.json()['message'] == "Validation failed"

    async def test_attendant_password_policy(self, aclient: AsyncClient, token: str):
        # Attendants may use shorter passwords without special characters
        response = await aclient.post(
            url="/staff/create",
            json=staff_data(email="attendant@flourish-station.com", role="attendant", password="pump12"),
            headers=headers(token)
        )
        assert response.status_code == 201, response.text

        response = await aclient.post(
            url="/staff/create",
            json=staff_data(email="cashier2@flourish-station.com", password="cash12"),
            headers=headers(token)
        )
        assert response.status_code == 400

    async def test_edit_staff(self, aclient: AsyncClient, token: str):
        response = await aclient.post(url="/staff/create", json=staff_data(), headers=headers(token))
        staff_id = response.json()['id']

        response = await aclient.put(
            url=f"/staff/{staff_id}/edit",
            json={"role": "supervisor", "on_duty": True, "first_name": None},
            headers=headers(token)
        )
        body = response.json()
        assert response.status_code == 200, response.text
        assert body['role'] == "SUPERVISOR"
        assert body['on_duty'] is True
        assert body['first_name'] == "Bola"

        response = await aclient.put(
            url=f"/staff/{uuid.uuid4()}/edit",
            json={"on_duty": True},
            headers=headers(token)
        )
        assert response.status_code == 404

    async def test_edit_staff_password(self, aclient: AsyncClient, token: str):
        response = await aclient.post(url="/staff/create", json=staff_data(), headers=headers(token))
        staff_id = response.json()['id']

        response = await aclient.put(
            url=f"/staff/{staff_id}/edit",
            json={"password": "New12345!"},
            headers=headers(token)
        )
        assert response.status_code == 200, response.text
        assert await login(aclient, "cashier@flourish-station.com", "New12345!")

    async def test_delete_staff(self, aclient: AsyncClient, token: str):
        response = await aclient.post(url="/staff/create", json=staff_data(), headers=headers(token))
        staff_id = response.json()['id']

        response = await aclient.delete(url=f"/staff/{staff_id}/delete", headers=headers(token))
        assert response.status_code == 200
        assert response.json() == {"success": True}

        response = await aclient.delete(url=f"/staff/{staff_id}/delete", headers=headers(token))
        assert response.status_code == 404

    async def test_manager_can_not_delete_self(self, aclient: AsyncClient, token: str):
        response = await aclient.get(url="/staff/me", headers=headers(token))
        manager_id = response.json()['id']

        response = await aclient.delete(url=f"/staff/{manager_id}/delete", headers=headers(token))
        assert response.status_code == 400

    async def test_staff_of_other_station_is_hidden(self, aclient: AsyncClient, token: str):
        response = await aclient.post(url="/staff/create", json=staff_data(), headers=headers(token))
        staff_id = response.json()['id']

        await register_station(
            aclient,
            station=station_data(license_number="DPR-0099-2021"),
            manager=manager_data(email="rival@flourish-station.com")
        )
        rival_token = await login(aclient, "rival@flourish-station.com", "One2345!")

        response = await aclient.put(
            url=f"/staff/{staff_id}/edit",
            json={"on_duty": True},
            headers=headers(rival_token)
        )
        assert response.status_code == 404

    async def test_only_manager_administers_staff(self, aclient: AsyncClient, token: str):
        await aclient.post(url="/staff/create", json=staff_data(), headers=headers(token))
        cashier_token = await login(aclient, "cashier@flourish-station.com", "Cash1234!")

        response = await aclient.get(url="/staff/all", headers=headers(cashier_token))
        assert response.status_code == 403

        response = await aclient.post(
            url="/staff/create",
            json=staff_data(email="x@flourish-station.com"),
            headers=headers(cashier_token)
        )
        assert response.status_code == 403

        # The own profile is available to everyone
        response = await aclient.get(url="/staff/me", headers=headers(cashier_token))
        assert response.status_code == 200
