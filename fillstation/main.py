from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fillstation.auth.auth import auth_backend, fastapi_users
from fillstation.config import PROD_URI
from fillstation.database.db import sessionmanager
from fillstation.routing.contact import router as contact_routing, contact_tag_metadata
from fillstation.routing.delivery import router as delivery_routing, delivery_tag_metadata
from fillstation.routing.pump import router as pump_routing, pump_tag_metadata
from fillstation.routing.staff import router as staff_routing, staff_tag_metadata
from fillstation.routing.station import router as station_routing, station_tag_metadata
from fillstation.routing.tank import router as tank_routing, tank_tag_metadata
from fillstation.utils.exceptions import BadRequestException, ForbiddenException, DBException, \
    DBDuplicateException, ApiError, NotFoundException
from fillstation.utils.loggers import logger


def init_app(dsn: str, tests: bool = False):
    sessionmanager.init(dsn, tests)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info('APP START')
        yield
        logger.info('APP SHUTDOWN')
        await sessionmanager.close()

    tags_metadata = [
        {
            "name": "auth",
            "description": 'Authentication and password recovery.',
        },
        station_tag_metadata,
        staff_tag_metadata,
        tank_tag_metadata,
        pump_tag_metadata,
        delivery_tag_metadata,
        contact_tag_metadata,
    ]

    app = FastAPI(
        title="Filling Station API",
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        root_path="/api",
        docs_url="/doc",
        redoc_url=None,
        openapi_url="/openapi.json",
        swagger_ui_parameters={
            "defaultModelsExpandDepth": -1,
            "defaultModelExpandDepth": 4
        }
    )

    @app.get("/")
    async def read_root():
        return {"message": "Filling Station API"}

    app.include_router(station_routing)
    app.include_router(staff_routing)
    app.include_router(tank_routing)
    app.include_router(pump_routing)
    app.include_router(delivery_routing)
    app.include_router(contact_routing)
    app.include_router(
        fastapi_users.get_auth_router(auth_backend),
        prefix="/auth/jwt",
        tags=["auth"],
    )
    app.include_router(
        fastapi_users.get_reset_password_router(),
        prefix="/auth",
        tags=["auth"],
    )

    for route in app.routes:
        if route.__dict__['path'] == '/auth/jwt/login':
            route.__dict__['summary'] = 'Login'

        if route.__dict__['path'] == '/auth/jwt/logout':
            route.__dict__['summary'] = 'Logout'

        if route.__dict__['path'] == '/auth/forgot-password':
            route.__dict__['summary'] = 'Requesting a password reset mail'

        if route.__dict__['path'] == '/auth/reset-password':
            route.__dict__['summary'] = 'Setting a new password'

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Validation failed", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(BadRequestException)
    async def bad_request_exception_handler(request: Request, exc: BadRequestException):
        return JSONResponse(
            status_code=400,
            content={"message": exc.message},
        )

    @app.exception_handler(ForbiddenException)
    async def forbidden_exception_handler(request: Request, exc: ForbiddenException):
        return JSONResponse(
            status_code=403,
            content={"message": exc.message},
        )

    @app.exception_handler(NotFoundException)
    async def not_found_exception_handler(request: Request, exc: NotFoundException):
        return JSONResponse(
            status_code=404,
            content={"message": exc.message},
        )

    @app.exception_handler(DBDuplicateException)
    async def db_duplicate_exception_handler(request: Request, exc: DBDuplicateException):
        return JSONResponse(
            status_code=409,
            content={"message": exc.message},
        )

    @app.exception_handler(DBException)
    async def db_exception_handler(request: Request, exc: DBException):
        return JSONResponse(
            status_code=500,
            content={"message": exc.message},
        )

    @app.exception_handler(ApiError)
    async def api_exception_handler(request: Request, exc: ApiError):
        return JSONResponse(
            status_code=400,
            content={"message": exc.message},
        )

    return app


app = init_app(PROD_URI)
