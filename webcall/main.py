"""
FastAPI relay server for Retell AI web calls.

This module builds the HTTP application the browser client talks to. The
relay is the only holder of the provider credential: it accepts a
create-web-call request, forwards it to Retell AI, and returns the provider's
answer (which carries the short-lived access token) unchanged.

Endpoints are served at the root and again under the configured API prefix,
so requests to ``/api/create-web-call`` work whether or not a proxy strips
the prefix first.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from webcall.config.constants import (
    CREATE_WEB_CALL_PATH,
    HEALTH_PATH,
    LOGGER_NAME,
    MESSAGE_INTERNAL_ERROR,
    MESSAGE_INVALID_BODY,
)
from webcall.config.settings import RelaySettings
from webcall.errors import CallValidationError, InternalError, ProviderError
from webcall.handlers.web_call_handlers import handle_create_web_call
from webcall.models.web_call import CreateWebCallRequest, ErrorResponse, HealthResponse
from webcall.services.retell_api import RetellClient

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter()


def get_retell_client(request: Request) -> RetellClient:
    """Return the provider client created for this application."""
    return request.app.state.retell_client


@router.post(CREATE_WEB_CALL_PATH, status_code=201)
def create_web_call(
    body: CreateWebCallRequest,
    retell_client: RetellClient = Depends(get_retell_client),
):
    """Create a web call with the provider and return its descriptor.

    Runs in the thread pool; the provider request is a blocking call.
    """
    return handle_create_web_call(body, retell_client)


@router.get(HEALTH_PATH, response_model=HealthResponse)
async def health_check():
    """Liveness check. Succeeds whenever the process is running."""
    return HealthResponse(status="ok")


async def validation_error_handler(request: Request, exc: CallValidationError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(exclude_none=True),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=MESSAGE_INVALID_BODY).model_dump(exclude_none=True),
    )


async def provider_error_handler(request: Request, exc: ProviderError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, details=exc.details).model_dump(),
    )


async def internal_error_handler(request: Request, exc: InternalError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(exclude_none=True),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=MESSAGE_INTERNAL_ERROR).model_dump(exclude_none=True),
    )


def create_app(
    settings: RelaySettings, retell_client: Optional[RetellClient] = None
) -> FastAPI:
    """
    Create and configure the relay application.

    Args:
        settings: Relay settings loaded once at startup
        retell_client: Provider client to use; built from settings when omitted

    Returns:
        FastAPI: The configured application
    """
    app = FastAPI(
        title="Web Call Relay",
        description="Creates Retell AI web calls and returns their access tokens",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.retell_client = retell_client or RetellClient(
        api_key=settings.retell_api_key, base_url=settings.retell_base_url
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CallValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(router)
    if settings.api_prefix:
        app.include_router(router, prefix=settings.api_prefix)

    return app
