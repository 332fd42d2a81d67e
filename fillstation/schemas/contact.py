from typing import Annotated

from pydantic import EmailStr, Field

from fillstation.schemas.base import BaseSchema
from fillstation.schemas.validators import NonEmptyStr


class ContactSchema(BaseSchema):
    first_name: Annotated[NonEmptyStr, Field(description="First name", examples=["Ada"])]
    last_name: Annotated[NonEmptyStr, Field(description="Last name", examples=["Obi"])]
    phone_number: Annotated[NonEmptyStr, Field(description="Phone", examples=["+2348031234567"])]
    email: Annotated[EmailStr, Field(description="Email", examples=["ada.obi@gmail.com"])]
    message: Annotated[NonEmptyStr, Field(description="Message", examples=["Do you sell gas cylinders?"])]
