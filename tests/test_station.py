from httpx import AsyncClient

from tests.conftest import headers, register_station, station_data, manager_data, login, MANAGER_EMAIL, \
    MANAGER_PASSWORD, create_tank, create_pump


class TestStation:

    async def test_register_station(self, aclient: AsyncClient):
        response = await register_station(aclient)
        body = response.json()

        assert response.status_code == 201, response.text
        assert body['station']['license_number'] == "DPR-0042-2019"
        assert body['station']['fuel_types_offered'] == ["Petrol", "Diesel"]
        assert body['manager']['email'] == MANAGER_EMAIL
        assert body['manager']['role'] == "MANAGER"
        assert body['manager']['station_id'] == body['station']['id']
        assert "password" not in body['manager'] and "hashed_password" not in body['manager']

        # The manager can log in right away
        token = await login(aclient, MANAGER_EMAIL, MANAGER_PASSWORD)
        assert token

    async def test_register_duplicate_license(self, aclient: AsyncClient):
        await register_station(aclient)
        response = await register_station(aclient, manager=manager_data(email="other@flourish-station.com"))

        assert response.status_code == 409
        assert "license" in response.json()['message']

    async def test_register_duplicate_email_leaves_no_station(self, aclient: AsyncClient):
        await register_station(aclient)
        response = await register_station(aclient, station=station_data(license_number="DPR-0043-2020"))
        assert response.status_code == 409

        # The station of the failed registration has not been stored
        response = await register_station(
            aclient,
            station=station_data(license_number="DPR-0043-2020"),
            manager=manager_data(email="second@flourish-station.com")
        )
        assert response.status_code == 201, response.text

    async def test_register_weak_password(self, aclient: AsyncClient):
        response = await register_station(aclient, manager=manager_data(password="password"))

        assert response.status_code == 400
        assert "Password" in response.json()['message']

    async def test_register_missing_fields(self, aclient: AsyncClient):
        station = station_data()
        station.pop('license_number')
        response = await register_station(aclient, station=station)
        body = response.json()

        assert response.status_code == 400
        assert body['message'] == "Validation failed"
        assert body['errors']

    async def test_get_and_edit_station(self, aclient: AsyncClient, token: str):
        response = await aclient.get(url="/station/me", headers=headers(token))
        assert response.status_code == 200
        assert response.json()['name'] == "Flourish Filling Station"

        response = await aclient.put(
            url="/station/me/edit",
            json={"name": "Flourish Energy", "additional_services": ["Car wash", "Shop"]},
            headers=headers(token)
        )
        body = response.json()
        assert response.status_code == 200, response.text
        assert body['name'] == "Flourish Energy"
        assert body['additional_services'] == ["Car wash", "Shop"]
        assert body['city'] == "Abuja"

    async def test_station_requires_auth(self, aclient: AsyncClient):
        response = await aclient.get(url="/station/me")
        assert response.status_code == 401

    async def test_delete_station(self, aclient: AsyncClient, token: str):
        tank = await create_tank(aclient, token)
        await create_pump(aclient, token, tank['id'])

        response = await aclient.delete(url="/station/me/delete", headers=headers(token))
        assert response.status_code == 200, response.text
        assert response.json() == {"success": True}

        # The manager account is gone with the station
        response = await aclient.post(
            url="/auth/jwt/login",
            data={"username": MANAGER_EMAIL, "password": MANAGER_PASSWORD},
        )
        assert response.status_code == 400
