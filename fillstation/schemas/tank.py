from typing import List, Annotated

from pydantic import Field

from fillstation.schemas.base import BaseSchema
from fillstation.schemas.validators import FuelTypeByName, NonEmptyStr

id_ = Annotated[str, Field(description="Tank UUID", examples=["8a7f4f0e-2a4f-4b0a-9a53-2f7c2c6a4d11"])]

station_id_ = Annotated[str, Field(description="Station UUID", examples=["20f06bf0-ae28-4f32-b2ca-f57796103a71"])]

title_ = Annotated[
    NonEmptyStr,
    Field(description="Title, unique within the station regardless of case", examples=["Tank A"], max_length=100)
]

fuel_type_ = Annotated[
    FuelTypeByName,
    Field(description="Fuel type: Petrol, Diesel, Kerosene, Gas, PMS or AGO", examples=["Petrol"])
]

limit_ = Annotated[float, Field(description="Capacity limit, ltr", examples=[10000.0], ge=0)]

threshold_ = Annotated[float, Field(description="Low stock threshold, ltr", examples=[1500.0], ge=0)]

current_quantity_ = Annotated[float, Field(description="Current quantity, ltr", examples=[9000.0])]

quantity_delta_ = Annotated[
    float,
    Field(description="Quantity to add to the tank (negative to withdraw), ltr", examples=[500.0])
]

is_low_stock_ = Annotated[bool, Field(description="Current quantity is at or below the threshold", examples=[False])]


class TankReadSchema(BaseSchema):
    id: id_
    station_id: station_id_
    title: str
    fuel_type: str
    limit: limit_
    threshold: threshold_
    current_quantity: current_quantity_
    is_low_stock: is_low_stock_


class TankCollectionReadSchema(BaseSchema):
    station_id: station_id_
    total: Annotated[float, Field(description="Total quantity over all tanks, ltr", examples=[23500.0])]
    tanks: Annotated[List[TankReadSchema], Field(description="Tanks of the station")]


class TankCreateSchema(BaseSchema):
    title: title_
    fuel_type: fuel_type_
    limit: limit_
    threshold: threshold_


class TankEditSchema(BaseSchema):
    title: title_ | None = None
    fuel_type: fuel_type_ | None = None
    limit: limit_ | None = None
    threshold: threshold_ | None = None
    current_quantity: quantity_delta_ | None = None
