import uuid

from fastapi import Depends
from fastapi_users import FastAPIUsers
from fastapi_users.authentication import BearerTransport, AuthenticationBackend
from fastapi_users.authentication import JWTStrategy

from fillstation.auth.actor import Actor
from fillstation.auth.manager import get_user_manager
from fillstation.config import JWT_SECRET, JWT_LIFETIME_SECONDS
from fillstation.database.models import StaffOrm

bearer_transport = BearerTransport(tokenUrl="auth/jwt/login")
SECRET = JWT_SECRET


def get_jwt_strategy() -> JWTStrategy:
    return JWTStrategy(
        secret=SECRET,
        lifetime_seconds=JWT_LIFETIME_SECONDS
    )


auth_backend = AuthenticationBackend(
    name="jwt",
    transport=bearer_transport,
    get_strategy=get_jwt_strategy,
)

fastapi_users = FastAPIUsers[StaffOrm, uuid.UUID](
    get_user_manager,
    [auth_backend],
)


current_active_user = fastapi_users.current_user(active=True)


async def get_actor(user: StaffOrm = Depends(current_active_user)) -> Actor:
    # Token claims are not trusted for role and station: both come from the staff record
    return Actor.from_staff(user)
