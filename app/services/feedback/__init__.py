"""
Feedback Service Layer

This package normalizes feedback submissions and renders them for Telegram.
"""

from app.services.feedback.service import (
    FeedbackAttachment,
    FeedbackPayload,
    FIELD_LIMITS,
    format_caption,
    format_message,
    make_attachment,
    payload_from_fields,
    safe_str,
)

from app.services.feedback.exceptions import (
    FeedbackServiceError,
    FeedbackNotConfiguredError,
    InvalidFeedbackPayloadError,
    FeedbackDeliveryError,
)

__all__ = [
    "FeedbackAttachment",
    "FeedbackPayload",
    "FIELD_LIMITS",
    "format_caption",
    "format_message",
    "make_attachment",
    "payload_from_fields",
    "safe_str",
    "FeedbackServiceError",
    "FeedbackNotConfiguredError",
    "InvalidFeedbackPayloadError",
    "FeedbackDeliveryError",
]
