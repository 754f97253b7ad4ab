"""Manual trigger router."""

import secrets

from curl_cffi.requests import AsyncSession
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from app.config import Settings, get_settings
from app.errors import AuthorizationError
from app.models.response import OutcomeReport
from app.services.pipeline import run_pipeline
from app.services.session import get_session


router = APIRouter()


ALLOWED_METHODS = ["GET", "POST"]

DISALLOWED_METHODS = ["HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def check_manual_trigger(settings: Settings, password: str | None) -> None:
    """
    Verify the manual trigger password.

    Skipped in development. Outside development an unset
    MANUAL_TRIGGER_PASSWORD rejects every manual trigger.

    Raises:
        AuthorizationError: Password missing or wrong
    """
    if settings.is_development:
        return

    expected = settings.manual_trigger_password
    if not expected or password is None:
        raise AuthorizationError()
    if not secrets.compare_digest(password.encode("utf-8"), expected.encode("utf-8")):
        raise AuthorizationError()


@router.api_route(
    "/",
    methods=ALLOWED_METHODS,
    responses={
        200: {"model": OutcomeReport, "description": "Meme delivered"},
        401: {"description": "Unauthorized"},
        405: {"description": "Method not allowed"},
        500: {"description": "Pipeline failed"},
    },
    summary="Trigger meme generation",
    description="Generate a meme and send it to Telegram. Only GET and POST are accepted.",
)
async def trigger(
    request: Request,
    password: str | None = Query(default=None, description="Manual trigger password"),
    settings: Settings = Depends(get_settings),
    session: AsyncSession = Depends(get_session),
):
    """Run the meme pipeline once for a manual HTTP activation."""
    try:
        check_manual_trigger(settings, password)
    except AuthorizationError as e:
        logger.warning(f"Manual trigger refused from {request.client.host if request.client else 'unknown'}")
        return JSONResponse(
            status_code=e.status_code,
            content=OutcomeReport.failure(str(e)).to_response(),
        )

    logger.info(f"Manual trigger received ({request.method})")
    report = await run_pipeline(settings, session)

    return JSONResponse(
        status_code=200 if report.success else 500,
        content=report.to_response(),
    )


@router.api_route("/", methods=DISALLOWED_METHODS, include_in_schema=False)
async def method_not_allowed():
    """Reject every method other than GET and POST."""
    return PlainTextResponse("Method not allowed", status_code=405)
