import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    # Error messages never contain tokens or passwords
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code} {error.code}: {error.message}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": error.code, "message": error.message}},
    )


async def handle_server_error(request: Request, exc: ServerError):
    error = exc.base_error
    logger.error(f"{request.method} {request.url.path} failed with {error.code}: {error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": error.code, "message": "Internal server error"}},
    )


def create_app(ApplicationConfig) -> FastAPI:
    """
    Build the accounts API: health, signup/login/password reset under /user,
    and the profile endpoint.
    """
    app = FastAPI(title="Car Detail Accounts API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, health_check, user

    app.include_router(health_check.router)
    app.include_router(auth.router)
    app.include_router(user.router)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
