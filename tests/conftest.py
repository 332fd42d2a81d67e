import os
from datetime import date
from typing import AsyncGenerator, Any, Dict, List

import pytest
from dotenv import load_dotenv
from httpx import AsyncClient, ASGITransport

from fillstation.database.db import sessionmanager
from fillstation.main import init_app

load_dotenv()

# In-memory SQLite unless a test database is given
TEST_URI = os.environ.get('TEST_DB_URI') or "sqlite+aiosqlite://"

MANAGER_EMAIL = "manager@flourish-station.com"
MANAGER_PASSWORD = "One2345!"


@pytest.fixture
async def app():
    app = init_app(TEST_URI, tests = True)
    await sessionmanager.drop_all()
    await sessionmanager.create_all()
    yield app
    await sessionmanager.close()


@pytest.fixture
async def aclient(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as aclient:
        yield aclient


@pytest.fixture(autouse=True)
def sent_mails(monkeypatch) -> List[Dict[str, Any]]:
    mails = []

    def fake_send_mail(recipients, subject, text):
        mails.append({"recipients": recipients, "subject": subject, "text": text})

    monkeypatch.setattr("fillstation.auth.manager.send_mail", fake_send_mail)
    monkeypatch.setattr("fillstation.services.contact.send_mail", fake_send_mail)
    return mails


def headers(token: str):
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}"
    }


def station_data(**fields) -> Dict[str, Any]:
    data = {
        "name": "Flourish Filling Station",
        "address": "12 Airport Road",
        "email": "info@flourish-station.com",
        "phone": "+2348031234567",
        "city": "Abuja",
        "country": "Nigeria",
        "zip_code": "900001",
        "license_number": "DPR-0042-2019",
        "tax_id": "TIN-1029384756",
        "establishment_date": date(2019, 3, 1).isoformat(),
        "business_type": "Limited company",
        "number_of_pumps": 6,
        "operation_hours": "06:00-22:00",
        "tank_capacity": "90000",
        "average_monthly_revenue": "25000000",
        "fuel_types_offered": ["Petrol", "Diesel"],
        "additional_services": ["Car wash"],
    }
    data.update(fields)
    return data


def manager_data(**fields) -> Dict[str, Any]:
    data = {
        "email": MANAGER_EMAIL,
        "password": MANAGER_PASSWORD,
        "first_name": "Ada",
        "last_name": "Obi",
        "phone": "+2348031234567",
    }
    data.update(fields)
    return data


async def register_station(aclient: AsyncClient, station: Dict[str, Any] = None, manager: Dict[str, Any] = None):
    return await aclient.post(
        url="/station/create",
        json={
            "station": station or station_data(),
            "manager": manager or manager_data(),
        }
    )


async def login(aclient: AsyncClient, email: str, password: str) -> str:
    response = await aclient.post(
        url="/auth/jwt/login",
        data={
            "username": email,
            "password": password
        },
    )
    assert response.status_code == 200, response.text
    return response.json()['access_token']


@pytest.fixture
async def token(aclient: AsyncClient) -> str:
    response = await register_station(aclient)
    assert response.status_code == 201, response.text
    return await login(aclient, MANAGER_EMAIL, MANAGER_PASSWORD)


async def rival_station_token(aclient: AsyncClient) -> str:
    """
    Registers a second station and returns the token of its manager
    """
    response = await register_station(
        aclient,
        station=station_data(name="Rival Filling Station", license_number="DPR-0099-2021"),
        manager=manager_data(email="rival@flourish-station.com")
    )
    assert response.status_code == 201, response.text
    return await login(aclient, "rival@flourish-station.com", MANAGER_PASSWORD)


async def create_tank(aclient: AsyncClient, token: str, **fields) -> Dict[str, Any]:
    data = {"title": "Tank A", "fuel_type": "Petrol", "limit": 10000, "threshold": 1500}
    data.update(fields)
    response = await aclient.post(url="/tank/create", json=data, headers=headers(token))
    assert response.status_code == 201, response.text
    tanks = response.json()['tanks']
    return next(tank for tank in tanks if tank['title'] == data['title'].strip())


async def get_tank(aclient: AsyncClient, token: str, tank_id: str) -> Dict[str, Any]:
    response = await aclient.get(url="/tank/all", headers=headers(token))
    assert response.status_code == 200, response.text
    return next(tank for tank in response.json()['tanks'] if tank['id'] == tank_id)


async def create_pump(aclient: AsyncClient, token: str, tank_id: str, **fields) -> Dict[str, Any]:
    data = {"tank_id": tank_id, "price_per_ltr": 617, "start_date": "2024-01-15"}
    data.update(fields)
    response = await aclient.post(url="/pump/create", json=data, headers=headers(token))
    assert response.status_code == 201, response.text
    return response.json()
