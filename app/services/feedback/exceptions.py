"""
Feedback Service Domain Exceptions

All exceptions raised by the feedback relay layer.
"""


class FeedbackServiceError(Exception):
    """Base exception for feedback relay errors"""
    pass


class FeedbackNotConfiguredError(FeedbackServiceError):
    """Raised when BOT_TOKEN or CHAT_ID is missing"""

    def __init__(self, message: str = "Server not configured (missing BOT_TOKEN/CHAT_ID)"):
        super().__init__(message)


class InvalidFeedbackPayloadError(FeedbackServiceError):
    """Raised when the request body cannot be read as a submission"""
    pass


class FeedbackDeliveryError(FeedbackServiceError):
    """Raised when Telegram rejects or does not accept the message

    Carries the upstream error text; delivery is not retried.
    """
    pass
