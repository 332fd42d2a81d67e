from html import escape

from fastapi.concurrency import run_in_threadpool

from fillstation.config import CONTACT_MAIL_TO
from fillstation.schemas.contact import ContactSchema
from fillstation.utils.loggers import logger
from fillstation.utils.mail import send_mail


async def send_contact_message(contact_schema: ContactSchema) -> None:
    text = (
        f"<p><b>From:</b> {escape(contact_schema.first_name)} {escape(contact_schema.last_name)}</p>"
        f"<p><b>Email:</b> {escape(str(contact_schema.email))}</p>"
        f"<p><b>Phone:</b> {escape(contact_schema.phone_number)}</p>"
        f"<p>{escape(contact_schema.message)}</p>"
    )
    await run_in_threadpool(send_mail, CONTACT_MAIL_TO, "Contact request", text)
    logger.info(f"Contact request from {contact_schema.email} has been forwarded")
