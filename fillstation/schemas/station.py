from datetime import date
from typing import List, Annotated

from pydantic import BaseModel, EmailStr, Field

from fillstation.schemas.base import BaseSchema
from fillstation.schemas.staff import ManagerCreateSchema, StaffReadSchema
from fillstation.schemas.validators import NonEmptyStr

id_ = Annotated[str, Field(description="Station UUID", examples=["20f06bf0-ae28-4f32-b2ca-f57796103a71"])]

name_ = Annotated[NonEmptyStr, Field(description="Station name", examples=["Flourish Filling Station"])]

address_ = Annotated[NonEmptyStr, Field(description="Address", examples=["12 Airport Road"])]

email_ = Annotated[EmailStr, Field(description="Station email", examples=["info@flourish-station.com"])]

phone_ = Annotated[NonEmptyStr, Field(description="Station phone", examples=["+2348031234567"], max_length=20)]

city_ = Annotated[NonEmptyStr, Field(description="City", examples=["Abuja"])]

country_ = Annotated[NonEmptyStr, Field(description="Country", examples=["Nigeria"])]

zip_code_ = Annotated[NonEmptyStr, Field(description="Zip code", examples=["900001"], max_length=20)]

license_number_ = Annotated[NonEmptyStr, Field(description="License number", examples=["DPR-0042-2019"])]

tax_id_ = Annotated[NonEmptyStr, Field(description="Tax ID", examples=["TIN-1029384756"])]

establishment_date_ = Annotated[date, Field(description="Establishment date", examples=["2019-03-01"])]

image_ = Annotated[str | None, Field(description="Station image URL", examples=[None])]

business_type_ = Annotated[NonEmptyStr, Field(description="Business type", examples=["Limited company"])]

number_of_pumps_ = Annotated[int, Field(description="Declared number of pumps", examples=[6], ge=0)]

operation_hours_ = Annotated[NonEmptyStr, Field(description="Operation hours", examples=["06:00-22:00"])]

tank_capacity_ = Annotated[NonEmptyStr, Field(description="Declared tank capacity", examples=["90000"])]

average_monthly_revenue_ = Annotated[
    NonEmptyStr,
    Field(description="Average monthly revenue", examples=["25000000"])
]

fuel_types_offered_ = Annotated[List[str], Field(description="Fuel types offered", examples=[["Petrol", "Diesel"]])]

additional_services_ = Annotated[List[str], Field(description="Additional services", examples=[["Car wash"]])]


class StationReadSchema(BaseSchema):
    id: id_
    name: name_
    address: address_
    email: email_
    phone: phone_
    city: city_
    country: country_
    zip_code: zip_code_
    license_number: license_number_
    tax_id: tax_id_
    establishment_date: establishment_date_
    image: image_ = None
    business_type: business_type_
    number_of_pumps: number_of_pumps_
    operation_hours: operation_hours_
    tank_capacity: tank_capacity_
    average_monthly_revenue: average_monthly_revenue_
    fuel_types_offered: fuel_types_offered_ = []
    additional_services: additional_services_ = []


class StationCreateSchema(BaseSchema):
    name: name_
    address: address_
    email: email_
    phone: phone_
    city: city_
    country: country_
    zip_code: zip_code_
    license_number: license_number_
    tax_id: tax_id_
    establishment_date: establishment_date_
    image: image_ = None
    business_type: business_type_
    number_of_pumps: number_of_pumps_
    operation_hours: operation_hours_
    tank_capacity: tank_capacity_
    average_monthly_revenue: average_monthly_revenue_
    fuel_types_offered: fuel_types_offered_ = []
    additional_services: additional_services_ = []


class StationEditSchema(BaseSchema):
    name: name_ | None = None
    address: address_ | None = None
    email: email_ | None = None
    phone: phone_ | None = None
    city: city_ | None = None
    country: country_ | None = None
    zip_code: zip_code_ | None = None
    license_number: license_number_ | None = None
    tax_id: tax_id_ | None = None
    establishment_date: establishment_date_ | None = None
    image: image_ = None
    business_type: business_type_ | None = None
    number_of_pumps: number_of_pumps_ | None = None
    operation_hours: operation_hours_ | None = None
    tank_capacity: tank_capacity_ | None = None
    average_monthly_revenue: average_monthly_revenue_ | None = None
    fuel_types_offered: fuel_types_offered_ | None = None
    additional_services: additional_services_ | None = None


class StationRegisterSchema(BaseModel):
    station: Annotated[StationCreateSchema, Field(description="Station")]
    manager: Annotated[ManagerCreateSchema, Field(description="Manager account")]


class StationRegisteredSchema(BaseSchema):
    station: Annotated[StationReadSchema, Field(description="Station")]
    manager: Annotated[StaffReadSchema, Field(description="Manager account")]
