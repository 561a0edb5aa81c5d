"""
Feedback Service Layer

Turns a raw submission (JSON object or multipart form fields) into a
FeedbackPayload and renders the Telegram message text.

All functions are pure business logic:
- No aiohttp imports
- No Telegram calls
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# ====================================================================================
# Limits
# ====================================================================================

DEFAULT_MAX_LENGTH = 4000

# Intake limits, applied to the raw submission fields
FIELD_LIMITS = {
    "type": 50,
    "lang": 10,
    "email": 250,
    "message": 6000,
    "timestamp": 80,
    "userAgent": 400,
}

# Limits applied again when the Telegram message is rendered
MESSAGE_TYPE_LIMIT = 40
MESSAGE_LANG_LIMIT = 20
MESSAGE_EMAIL_LIMIT = 200
MESSAGE_UA_LIMIT = 240
MESSAGE_BODY_LIMIT = 3500
MESSAGE_TIMESTAMP_LIMIT = 80

# Telegram caption limit is smaller than the message limit
CAPTION_LIMIT = 950

DEFAULT_ATTACHMENT_NAME = "attachment"
ELLIPSIS = "…"


# ====================================================================================
# Result Types
# ====================================================================================

@dataclass
class FeedbackAttachment:
    """File uploaded with a multipart submission"""
    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class FeedbackPayload:
    """Normalized feedback submission"""
    type: str = ""
    lang: str = ""
    email: str = ""
    message: str = ""
    timestamp: str = ""
    user_agent: str = ""
    attachment: Optional[FeedbackAttachment] = None


# ====================================================================================
# Normalization
# ====================================================================================

def safe_str(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Stringify, strip and truncate a field.

    None becomes "". Values longer than max_length are cut to max_length
    characters followed by an ellipsis.
    """
    text = ("" if value is None else str(value)).strip()
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def _field(fields: Mapping[str, Any], name: str) -> str:
    return safe_str(fields.get(name) or "", FIELD_LIMITS[name])


def payload_from_fields(fields: Any, attachment: Optional[FeedbackAttachment] = None) -> FeedbackPayload:
    """
    Build a payload from a JSON object or form fields.

    A non-mapping body (JSON array, string, null) is read as an empty
    submission. Falsy field values count as absent.
    """
    if not isinstance(fields, Mapping):
        fields = {}

    return FeedbackPayload(
        type=_field(fields, "type"),
        lang=_field(fields, "lang"),
        email=_field(fields, "email"),
        message=_field(fields, "message"),
        timestamp=_field(fields, "timestamp"),
        user_agent=_field(fields, "userAgent"),
        attachment=attachment,
    )


def make_attachment(
    filename: Optional[str],
    content: bytes,
    content_type: Optional[str] = None,
) -> Optional[FeedbackAttachment]:
    """Wrap uploaded bytes; an empty upload is no attachment at all."""
    if not content:
        return None
    return FeedbackAttachment(
        filename=filename or DEFAULT_ATTACHMENT_NAME,
        content=content,
        content_type=content_type,
    )


# ====================================================================================
# Message Rendering
# ====================================================================================

def format_message(payload: FeedbackPayload) -> str:
    """Render the Telegram message for a submission."""
    lines = [f"📝 IFET feedback: {safe_str(payload.type or 'unknown', MESSAGE_TYPE_LIMIT)}"]

    if payload.lang:
        lines.append(f"🌐 lang: {safe_str(payload.lang, MESSAGE_LANG_LIMIT)}")
    if payload.email:
        lines.append(f"✉️ email: {safe_str(payload.email, MESSAGE_EMAIL_LIMIT)}")
    if payload.user_agent:
        lines.append(f"🧭 ua: {safe_str(payload.user_agent, MESSAGE_UA_LIMIT)}")
    if payload.message:
        lines.append(f"\n{safe_str(payload.message, MESSAGE_BODY_LIMIT)}")
    if payload.timestamp:
        lines.append(f"\n⏱ {safe_str(payload.timestamp, MESSAGE_TIMESTAMP_LIMIT)}")

    return "\n".join(lines)


def format_caption(text: str) -> str:
    return safe_str(text, CAPTION_LIMIT)
