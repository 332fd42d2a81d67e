from datetime import date
from typing import Annotated

from pydantic import Field

from fillstation.schemas.base import BaseSchema
from fillstation.schemas.validators import NonEmptyStr
from fillstation.utils.enums import DeliveryStatus

id_ = Annotated[str, Field(description="Delivery UUID", examples=["5b1d4b9e-38a4-4c5e-8d3e-0c7b1f0a9e21"])]

tank_id_ = Annotated[str, Field(description="Tank UUID", examples=["8a7f4f0e-2a4f-4b0a-9a53-2f7c2c6a4d11"])]

price_per_ltr_ = Annotated[float, Field(description="Price per liter", examples=[617.0], ge=0)]

quantity_ = Annotated[float, Field(description="Quantity, ltr", examples=[500.0], gt=0)]

supplier_ = Annotated[NonEmptyStr, Field(description="Supplier", examples=["NNPC Depot Suleja"], max_length=255)]

delivery_date_ = Annotated[date, Field(description="Delivery date", examples=["2024-06-01"])]

status_ = Annotated[
    DeliveryStatus,
    Field(description="Status: Pending, Completed or Cancelled", examples=["Pending"])
]


class DeliveryReadSchema(BaseSchema):
    id: id_
    station_id: Annotated[str, Field(description="Station UUID")]
    tank_id: tank_id_ | None = None
    price_per_ltr: price_per_ltr_
    quantity: quantity_
    supplier: str
    delivery_date: delivery_date_
    status: status_


class DeliveryListItemSchema(DeliveryReadSchema):
    tank_title: Annotated[str, Field(description="Tank title", examples=["Tank A"])]
    fuel_type: Annotated[str, Field(description="Fuel type of the tank", examples=["Petrol"])]


class DeliveryCreateSchema(BaseSchema):
    tank_id: tank_id_
    price_per_ltr: price_per_ltr_
    quantity: quantity_
    supplier: supplier_
    delivery_date: delivery_date_
    status: status_ = DeliveryStatus.PENDING


class DeliveryEditSchema(BaseSchema):
    price_per_ltr: price_per_ltr_ | None = None
    quantity: quantity_ | None = None
    supplier: supplier_ | None = None
    delivery_date: delivery_date_ | None = None
    status: status_ | None = None
