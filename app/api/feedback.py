"""
Feedback endpoint.

/api/feedback (also served at /):
- GET      → diagnostics (credentials configured?, allowed origins), no secrets
- OPTIONS  → CORS preflight, empty 204
- POST     → JSON or multipart submission, forwarded to the Telegram chat
- other    → 405

Responses are JSON: {"ok": true} or {"ok": false, "error": "..."}.
Every response carries the CORS headers.
"""
import asyncio
import logging
import time
import uuid
from typing import BinaryIO, Dict, Iterable, Optional

from aiogram import Bot
from aiogram.utils.token import TokenValidationError
from aiohttp import web

import config
from app.core.structured_logger import elapsed_ms, log_event
from app.services.feedback.exceptions import (
    FeedbackNotConfiguredError,
    InvalidFeedbackPayloadError,
)
from app.services.feedback.service import (
    FIELD_LIMITS,
    FeedbackPayload,
    format_message,
    make_attachment,
    payload_from_fields,
)
from app.utils.telegram_safe import deliver_feedback

logger = logging.getLogger(__name__)

FEEDBACK_PATH = "/api/feedback"
RUNTIME = "aiohttp"

# Uploads above this size are rejected by aiohttp before the handler reads them
MAX_REQUEST_BYTES = 20 * 1024 * 1024

SETTINGS_KEY = web.AppKey("feedback_settings", config.FeedbackSettings)
BOT_KEY = web.AppKey("feedback_bot", Bot)


# ====================================================================================
# CORS
# ====================================================================================

def resolve_allow_origin(request_origin: str, allowed_origins: Iterable[str]) -> str:
    """
    Pick the Access-Control-Allow-Origin value.

    "*" when nothing is configured or "*" is listed, the request origin when
    it is listed, otherwise the first configured origin.
    """
    allowed = list(allowed_origins)
    if not allowed or "*" in allowed:
        return "*"
    if request_origin in allowed:
        return request_origin
    return allowed[0]


def cors_headers(request_origin: str, allowed_origins: Iterable[str]) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": resolve_allow_origin(request_origin, allowed_origins),
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Access-Control-Max-Age": "86400",
        "Vary": "Origin",
    }


def _json(data: dict, headers: Dict[str, str], status: int = 200) -> web.Response:
    return web.json_response(data, status=status, headers=headers)


# ====================================================================================
# Payload intake
# ====================================================================================

def read_upload(fileobj: BinaryIO) -> bytes:
    """Read an uploaded temp file to the end and close it. Blocking."""
    with fileobj:
        return fileobj.read()


async def read_payload(request: web.Request) -> FeedbackPayload:
    """
    Read a submission from a multipart form or a JSON body.

    Raises:
        InvalidFeedbackPayloadError: body is not valid JSON
    """
    content_type = request.headers.get("Content-Type", "")

    if "multipart/form-data" in content_type:
        form = await request.post()
        fields = {}
        for name in FIELD_LIMITS:
            value = form.get(name)
            if isinstance(value, str):
                fields[name] = value

        attachment = None
        upload = form.get("attachment")
        if isinstance(upload, web.FileField):
            loop = asyncio.get_running_loop()
            content = await loop.run_in_executor(None, read_upload, upload.file)
            attachment = make_attachment(upload.filename, content, upload.content_type)
        return payload_from_fields(fields, attachment)

    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidFeedbackPayloadError(f"Invalid JSON body: {e}") from e
    return payload_from_fields(body)


# ====================================================================================
# Handler
# ====================================================================================

async def feedback_handler(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    cors = cors_headers(request.headers.get("Origin", ""), settings.allowed_origins)
    correlation_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]

    if request.method == "GET":
        return _json(
            {
                "ok": True,
                "service": config.SERVICE_NAME,
                "runtime": RUNTIME,
                "hasBotToken": settings.has_bot_token,
                "hasChatId": settings.has_chat_id,
                "allowedOrigins": list(settings.allowed_origins),
            },
            cors,
        )

    if request.method == "OPTIONS":
        return web.Response(status=204, headers=cors)

    if request.method != "POST":
        log_event(
            logger,
            component="feedback_api",
            operation="feedback_submit",
            correlation_id=correlation_id,
            outcome="rejected",
            reason=f"method={request.method}",
            level="warning",
        )
        return _json({"ok": False, "error": "Method not allowed"}, cors, 405)

    bot = request.app[BOT_KEY]
    if not settings.is_configured or bot is None:
        error = FeedbackNotConfiguredError()
        log_event(
            logger,
            component="feedback_api",
            operation="feedback_submit",
            correlation_id=correlation_id,
            outcome="failed",
            reason="not_configured",
            level="error",
        )
        return _json({"ok": False, "error": str(error)}, cors, 500)

    started = time.monotonic()
    try:
        payload = await read_payload(request)
        text = format_message(payload)
        await deliver_feedback(bot, settings.chat_id, text, payload.attachment)
    except Exception as e:
        log_event(
            logger,
            component="feedback_api",
            operation="feedback_submit",
            correlation_id=correlation_id,
            outcome="failed",
            duration_ms=elapsed_ms(started),
            reason=type(e).__name__,
            level="error",
        )
        return _json({"ok": False, "error": str(e)}, cors, 500)

    log_event(
        logger,
        component="feedback_api",
        operation="feedback_submit",
        correlation_id=correlation_id,
        outcome="success",
        duration_ms=elapsed_ms(started),
        reason="document" if payload.attachment else "message",
    )
    return _json({"ok": True}, cors)


# ====================================================================================
# Application
# ====================================================================================

async def _close_bot(app: web.Application) -> None:
    bot = app[BOT_KEY]
    if bot is not None:
        await bot.session.close()
        logger.info("Bot session closed")


def create_feedback_app(
    settings: Optional[config.FeedbackSettings] = None,
    bot: Optional[Bot] = None,
) -> web.Application:
    """
    Create the aiohttp application of the feedback relay.

    Args:
        settings: Relay settings (read from the environment if omitted)
        bot: Bot to deliver with; created from settings.bot_token if omitted
    """
    if settings is None:
        settings = config.load_feedback_settings()

    app = web.Application(client_max_size=MAX_REQUEST_BYTES)
    app[SETTINGS_KEY] = settings

    if bot is None and settings.has_bot_token:
        try:
            bot = Bot(token=settings.bot_token)
        except TokenValidationError:
            logger.error("BOT_TOKEN has invalid format - feedback submissions will be rejected")
            bot = None
        else:
            app.on_cleanup.append(_close_bot)
    app[BOT_KEY] = bot

    app.router.add_route("*", FEEDBACK_PATH, feedback_handler)
    app.router.add_route("*", "/", feedback_handler)
    return app
