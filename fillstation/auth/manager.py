import contextlib
import uuid
from html import escape
from typing import Optional, Union

from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi_users import BaseUserManager, UUIDIDMixin
from fastapi_users.exceptions import UserAlreadyExists, InvalidPasswordException
from sqlalchemy.ext.asyncio import AsyncSession

from fillstation.auth.db import get_user_db
from fillstation.config import JWT_SECRET, RESET_PASSWORD_TOKEN_LIFETIME_SECONDS, FRONTEND_URL
from fillstation.database.models import StaffOrm
from fillstation.schemas.staff import StaffCreateSchema, StaffEditSchema, NotificationPreferencesSchema
from fillstation.utils.exceptions import DBDuplicateException, BadRequestException
from fillstation.utils.loggers import logger
from fillstation.utils.mail import send_mail
from fillstation.utils.password_policy import check_password_strength

SECRET = JWT_SECRET


class UserManager(UUIDIDMixin, BaseUserManager[StaffOrm, uuid.UUID]):
    reset_password_token_secret = SECRET
    reset_password_token_lifetime_seconds = RESET_PASSWORD_TOKEN_LIFETIME_SECONDS
    verification_token_secret = SECRET

    async def validate_password(self, password: str, user: Union[StaffCreateSchema, StaffOrm]) -> None:
        reason = check_password_strength(getattr(user, 'role', None), password)
        if reason:
            raise InvalidPasswordException(reason=reason)

    async def on_after_register(self, user: StaffOrm, request: Optional[Request] = None):
        logger.info(f"Staff {user.id} ({user.role}) has been registered")

    async def on_after_forgot_password(
        self, user: StaffOrm, token: str, request: Optional[Request] = None
    ):
        logger.info(f"Staff {user.id} has requested a password reset")
        link = f"{FRONTEND_URL}/reset-password?token={token}"
        text = (
            f"<p>Hello {escape(user.first_name)},</p>"
            f"<p>A password reset was requested for your account. "
            f"Follow the <a href=\"{link}\">link</a> to choose a new password.</p>"
            f"<p>If you did not request it, ignore this message.</p>"
        )
        await run_in_threadpool(send_mail, [user.email], "Password reset", text)

    async def on_after_reset_password(self, user: StaffOrm, request: Optional[Request] = None):
        logger.info(f"Staff {user.id} has reset the password")


async def get_user_manager(user_db=Depends(get_user_db)):
    yield UserManager(user_db)

get_user_db_context = contextlib.asynccontextmanager(get_user_db)
get_user_manager_context = contextlib.asynccontextmanager(get_user_manager)


async def create_user(session: AsyncSession, user_schema: StaffCreateSchema) -> StaffOrm:
    """
    Creates the staff account inside the given session. Everything pending in the session
    (e.g. a new station) is committed together with the account.
    """
    # Every preference is stored, not only the ones given in the request
    user_schema.notification_preferences = NotificationPreferencesSchema(
        **user_schema.notification_preferences.model_dump()
    )
    try:
        async with get_user_db_context(session) as user_db:
            async with get_user_manager_context(user_db) as user_manager:
                user = await user_manager.create(user_schema, safe=True)
                return user

    except UserAlreadyExists:
        raise DBDuplicateException('A staff with this email already exists')

    except InvalidPasswordException as e:
        raise BadRequestException(e.reason)


async def update_user(session: AsyncSession, user: StaffOrm, user_schema: StaffEditSchema) -> StaffOrm:
    try:
        async with get_user_db_context(session) as user_db:
            async with get_user_manager_context(user_db) as user_manager:
                user = await user_manager.update(user_schema, user, safe=True)
                return user

    except UserAlreadyExists:
        raise DBDuplicateException('A staff with this email already exists')

    except InvalidPasswordException as e:
        raise BadRequestException(e.reason)
