import asyncio
import logging

import config

settings = config.load_feedback_settings()

# Configure logging FIRST (before any other imports that may log)
from app.core.logging_config import setup_logging
setup_logging(settings.log_level)

from aiohttp import web

from app.api.feedback import FEEDBACK_PATH, create_feedback_app
from app.core.structured_logger import log_event

logger = logging.getLogger(__name__)


async def main():
    app = create_feedback_app(settings)
    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, settings.host, settings.port)
    await site.start()

    log_event(
        logger,
        component="startup",
        operation="feedback_server_start",
        outcome="success",
        reason=f"env={config.APP_ENV} configured={settings.is_configured}",
    )
    logger.info(f"Feedback relay listening on http://{settings.host}:{settings.port}{FEEDBACK_PATH}")

    try:
        while True:
            await asyncio.sleep(3600)
    except asyncio.CancelledError:
        logger.info("Feedback server task cancelled")
    finally:
        await runner.cleanup()
        log_event(logger, component="shutdown", operation="shutdown_completed", outcome="success")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Feedback relay stopped")
