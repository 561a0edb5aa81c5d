import os
import sys
from dataclasses import dataclass
from typing import Tuple

# ====================================================================================
# ENVIRONMENT CONFIGURATION: PROD / STAGE / LOCAL isolation through prefixes
# ====================================================================================
# Variables are looked up with the environment prefix first:
#   - PROD: PROD_BOT_TOKEN, PROD_CHAT_ID, PROD_ALLOWED_ORIGINS
#   - STAGE: STAGE_BOT_TOKEN, STAGE_CHAT_ID, STAGE_ALLOWED_ORIGINS
#   - LOCAL: LOCAL_BOT_TOKEN, LOCAL_CHAT_ID, LOCAL_ALLOWED_ORIGINS
#
# Serverless platforms only know the bare names (BOT_TOKEN, CHAT_ID, ...),
# so the bare name is the fallback when the prefixed one is not set.
# ====================================================================================

APP_ENV = os.getenv("APP_ENV", "prod").lower()
if APP_ENV not in ("prod", "stage", "local"):
    print(f"ERROR: Invalid APP_ENV={APP_ENV}. Must be one of: prod, stage, local", file=sys.stderr)
    sys.exit(1)

IS_LOCAL = APP_ENV == "local"
IS_STAGE = APP_ENV == "stage"
IS_PROD = APP_ENV == "prod"

SERVICE_NAME = "ifet-feedback"
DEFAULT_PORT = 8080


def env(key: str, default: str = "") -> str:
    """
    Get an environment variable, preferring the environment-prefixed name.

    Args:
        key: Variable name without prefix (e.g. "BOT_TOKEN")
        default: Value used when neither name is set

    Example:
        env("BOT_TOKEN") -> value of STAGE_BOT_TOKEN (if APP_ENV=stage),
        else value of BOT_TOKEN, else default
    """
    prefixed = os.getenv(f"{APP_ENV.upper()}_{key}")
    if prefixed:
        return prefixed
    return os.getenv(key, default)


def parse_allowed_origins(raw: str) -> Tuple[str, ...]:
    """
    Split a comma-separated origin list.

    Empty input or a bare "*" allows any origin.
    """
    raw = (raw or "*").strip()
    if not raw or raw == "*":
        return ("*",)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class FeedbackSettings:
    """
    Runtime settings of the feedback relay.

    Credentials may be empty: the service still starts, reports them as
    missing on GET and refuses POST submissions with 500.
    """
    bot_token: str = ""
    chat_id: str = ""
    allowed_origins: Tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @property
    def has_bot_token(self) -> bool:
        return bool(self.bot_token)

    @property
    def has_chat_id(self) -> bool:
        return bool(self.chat_id)

    @property
    def is_configured(self) -> bool:
        return self.has_bot_token and self.has_chat_id


def load_feedback_settings() -> FeedbackSettings:
    """Read FeedbackSettings from the environment. Secrets are never printed."""
    port_raw = os.getenv("PORT") or env("WEBHOOK_PORT") or str(DEFAULT_PORT)
    try:
        port = int(port_raw)
    except ValueError:
        print(f"ERROR: PORT must be a number, got: {port_raw}", file=sys.stderr)
        sys.exit(1)

    settings = FeedbackSettings(
        bot_token=env("BOT_TOKEN").strip(),
        chat_id=env("CHAT_ID").strip(),
        allowed_origins=parse_allowed_origins(env("ALLOWED_ORIGINS") or env("ALLOWED_ORIGIN")),
        host=env("HOST", default="0.0.0.0"),
        port=port,
        log_level=env("LOG_LEVEL", default="INFO").upper(),
    )

    if not settings.is_configured:
        print(
            f"WARNING: {APP_ENV.upper()}_BOT_TOKEN/{APP_ENV.upper()}_CHAT_ID are not set - "
            "feedback submissions will be rejected",
            file=sys.stderr,
        )
    return settings
