from fastapi import APIRouter

from fillstation.schemas.contact import ContactSchema
from fillstation.services.contact import send_contact_message
from fillstation.utils.descriptions.contact import contact_tag_description, contact_description, \
    health_description
from fillstation.utils.schemas import MessageSchema

router = APIRouter()
contact_tag_metadata = {
    "name": "contact",
    "description": contact_tag_description,
}


@router.post(
    path="/contact",
    tags=["contact"],
    responses = {400: {'model': MessageSchema, "description": "Bad request"}},
    response_model = MessageSchema,
    name = 'Contact us',
    description = contact_description
)
async def contact(
    data: ContactSchema
) -> MessageSchema:
    await send_contact_message(data)
    return MessageSchema(message='Your message has been sent')


@router.get(
    path="/health",
    tags=["contact"],
    name = 'Health check',
    description = health_description
)
async def health():
    return {"status": "OK"}
