import uuid
from typing import List, Annotated, Dict

from fastapi_users import schemas as fastapi_schemas
from pydantic import BaseModel, EmailStr, Field

from fillstation.schemas.base import BaseSchema
from fillstation.schemas.validators import RoleByName, NonEmptyStr

id_ = Annotated[uuid.UUID, Field(description="Staff UUID", examples=["c39e5c5c-b980-45eb-a192-585e6823faa7"])]

email_ = Annotated[EmailStr, Field(description="Email (login)", examples=["ada@flourish-station.com"])]

password_ = Annotated[str, Field(description="Password", examples=["One2345!"])]

first_name_ = Annotated[NonEmptyStr, Field(description="First name", examples=["Ada"], max_length=50)]

last_name_ = Annotated[NonEmptyStr, Field(description="Last name", examples=["Obi"], max_length=50)]

phone_ = Annotated[NonEmptyStr, Field(description="Phone", examples=["+2348031234567"], max_length=20)]

image_ = Annotated[str, Field(description="Photo URL", examples=["https://cdn.flourish-station.com/ada.png"])]

role_ = Annotated[
    RoleByName,
    Field(description="Role: manager, supervisor, accountant, cashier or attendant", examples=["cashier"])
]

station_id_ = Annotated[
    str | None,
    Field(description="Station UUID", examples=["20f06bf0-ae28-4f32-b2ca-f57796103a71"])
]

shift_type_ = Annotated[str | None, Field(description="Shift type", examples=["Morning"])]

responsibility_ = Annotated[List[str], Field(description="Responsibilities", examples=[["Cash desk"]])]

on_duty_ = Annotated[bool, Field(description="Currently on duty", examples=[False])]

add_sale_target_ = Annotated[bool, Field(description="Sale target assigned", examples=[False])]

pay_type_ = Annotated[str | None, Field(description="Pay type", examples=["Monthly"])]

amount_ = Annotated[float, Field(description="Pay amount", examples=[150000.0], ge=0)]

two_factor_auth_enabled_ = Annotated[bool, Field(description="Two-factor authentication enabled", examples=[False])]

is_active_ = Annotated[bool, Field(description="Account is active", examples=[True])]


class NotificationPreferencesSchema(BaseModel):
    email: bool = False
    sms: bool = False
    push: bool = False
    low_stock: bool = False
    mail: bool = False
    sales: bool = False
    staffs: bool = False


notification_preferences_ = Annotated[NotificationPreferencesSchema, Field(description="Notification preferences")]


class StaffReadSchema(BaseSchema):
    id: id_
    email: email_
    first_name: str
    last_name: str
    phone: str
    image: image_ = ""
    role: Annotated[str, Field(description="Role name", examples=["CASHIER"])]
    station_id: station_id_ = None
    shift_type: shift_type_ = None
    responsibility: responsibility_ = []
    on_duty: on_duty_ = False
    add_sale_target: add_sale_target_ = False
    pay_type: pay_type_ = None
    amount: amount_ = 0.0
    two_factor_auth_enabled: two_factor_auth_enabled_ = False
    notification_preferences: Annotated[Dict[str, bool], Field(description="Notification preferences")] = {}
    is_active: is_active_ = True


class ManagerCreateSchema(BaseModel):
    """
    Account of the station manager, created together with the station
    """
    email: email_
    password: password_
    first_name: first_name_
    last_name: last_name_
    phone: phone_
    image: image_ = ""


class StaffCreateSchema(fastapi_schemas.BaseUserCreate):
    email: email_
    password: password_
    first_name: first_name_
    last_name: last_name_
    phone: phone_
    role: role_
    image: image_ = ""
    # Assigned from the station of the manager, never taken from the request
    station_id: station_id_ = None
    shift_type: shift_type_ = None
    responsibility: responsibility_ = []
    on_duty: on_duty_ = False
    add_sale_target: add_sale_target_ = False
    pay_type: pay_type_ = None
    amount: amount_ = 0.0
    two_factor_auth_enabled: two_factor_auth_enabled_ = False
    notification_preferences: notification_preferences_ = NotificationPreferencesSchema()
    is_active: is_active_ = True
    is_superuser: Annotated[bool, Field(deprecated=True)] = False
    is_verified: Annotated[bool, Field(deprecated=True)] = False


class StaffEditSchema(fastapi_schemas.BaseUserUpdate):
    email: email_ | None = None
    password: Annotated[str | None, Field(description="Password", examples=["One2345!"])] = None
    first_name: first_name_ | None = None
    last_name: last_name_ | None = None
    phone: phone_ | None = None
    image: image_ | None = None
    role: role_ | None = None
    shift_type: shift_type_ = None
    responsibility: responsibility_ | None = None
    on_duty: on_duty_ | None = None
    add_sale_target: add_sale_target_ | None = None
    pay_type: pay_type_ = None
    amount: amount_ | None = None
    two_factor_auth_enabled: two_factor_auth_enabled_ | None = None
    notification_preferences: notification_preferences_ | None = None
    is_active: is_active_ | None = None
