import datetime as dt
from typing import List, Annotated, Dict

from pydantic import BaseModel, Field

from fillstation.schemas.base import BaseSchema
from fillstation.schemas.validators import EmptyStrToNone
from fillstation.utils.enums import PumpStatus

id_ = Annotated[str, Field(description="Pump UUID", examples=["0e9f8b2a-6a1c-4a0f-b5c8-3c2d1e0f9a87"])]

tank_id_ = Annotated[str, Field(description="Tank UUID", examples=["8a7f4f0e-2a4f-4b0a-9a53-2f7c2c6a4d11"])]

title_ = Annotated[
    EmptyStrToNone,
    Field(description="Title, 'Pump N' is assigned when omitted", examples=["Pump 1"])
]

fuel_type_ = Annotated[str | None, Field(description="Fuel type of the tank", examples=["Petrol"])]

price_per_ltr_ = Annotated[float, Field(description="Price per liter", examples=[850.0], ge=0)]

start_date_ = Annotated[dt.date, Field(description="Start of operation", examples=["2024-01-15"])]

status_ = Annotated[
    PumpStatus,
    Field(description="Status: Active, Idle, Maintenance or Inactive", examples=["Active"])
]

last_maintenance_ = Annotated[dt.date | None, Field(description="Last maintenance date", examples=["2024-05-20"])]


class PumpSaleSchema(BaseSchema):
    date: Annotated[dt.date, Field(description="Sale date", examples=["2024-06-01"])]
    ltr_sale: Annotated[float, Field(description="Liters sold", examples=[1250.0], ge=0)]
    price_per_ltr: Annotated[float, Field(description="Price per liter at the time of sale", examples=[850.0], ge=0)]


class PumpReadSchema(BaseSchema):
    id: id_
    tank_id: tank_id_
    fuel_type: fuel_type_ = None
    title: str
    status: status_
    price_per_ltr: price_per_ltr_
    start_date: start_date_
    last_maintenance: last_maintenance_ = None
    daily_ltr_sales: Annotated[List[PumpSaleSchema], Field(description="Daily sales")] = []


class PumpListSchema(BaseSchema):
    total_pumps: Annotated[int, Field(description="Number of pumps of the station", examples=[4])]
    pumps: Annotated[List[PumpReadSchema], Field(description="Pumps of all tanks of the station")]


class PumpDeletedSchema(BaseSchema):
    deleted_pump_id: id_
    tank_id: tank_id_
    fuel_type: fuel_type_ = None


class PumpCreateSchema(BaseSchema):
    tank_id: tank_id_
    title: title_ = None
    price_per_ltr: price_per_ltr_
    start_date: start_date_
    status: status_ = PumpStatus.IDLE
    last_maintenance: last_maintenance_ = None


class PumpEditSchema(BaseSchema):
    status: status_ | None = None
    price_per_ltr: price_per_ltr_ | None = None
    start_date: start_date_ | None = None
    last_maintenance: last_maintenance_ = None
    daily_ltr_sales: Annotated[
        List[PumpSaleSchema] | None,
        Field(description="Daily sales, replaces the stored entries")
    ] = None


class FuelPricesSchema(BaseModel):
    prices: Annotated[
        Dict[str, Annotated[float, Field(ge=0)]],
        Field(description="New price per liter by fuel type", examples=[{"Petrol": 850.0, "Diesel": 1100.0}])
    ]


class FuelPriceResultSchema(BaseSchema):
    fuel_type: Annotated[str, Field(description="Fuel type", examples=["Petrol"])]
    price_per_ltr: price_per_ltr_
    matched: Annotated[int, Field(description="Tanks of this fuel type carrying pumps", examples=[2])]
    modified: Annotated[int, Field(description="Pumps updated", examples=[5])]


class FuelSalesSchema(BaseSchema):
    fuel_type: Annotated[str, Field(description="Fuel type", examples=["Petrol"])]
    liters: Annotated[float, Field(description="Liters sold", examples=[12500.0])]
    revenue: Annotated[float, Field(description="Revenue", examples=[10625000.0])]


class SalesSummarySchema(BaseSchema):
    fuel_types: Annotated[List[FuelSalesSchema], Field(description="Sales by fuel type")]
    total_liters: Annotated[float, Field(description="Liters sold over all fuel types", examples=[12500.0])]
    total_revenue: Annotated[float, Field(description="Revenue over all fuel types", examples=[10625000.0])]
