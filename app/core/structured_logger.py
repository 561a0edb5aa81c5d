"""
Request lifecycle events of the feedback relay.

Each submission handled by app/api/feedback.py ends in exactly one event:
- component="feedback_api", operation="feedback_submit"
- outcome: "success" (delivered), "rejected" (wrong method) or "failed"
  (not configured, unreadable body, Telegram refused the call)
- reason: delivery kind ("message" / "document"), rejected method or the
  exception class name
- correlation_id: X-Request-ID header or a generated id
- duration_ms: time spent reading the body and talking to Telegram

Startup and shutdown of main.py use the same call. Submission fields (email,
message text, user agent) and the bot token are never passed in.
"""
import time
from logging import Logger
from typing import Optional


def elapsed_ms(started: float) -> int:
    """Milliseconds since a time.monotonic() reading."""
    return int((time.monotonic() - started) * 1000)


def log_event(
    logger: Logger,
    *,
    component: str,
    operation: str,
    correlation_id: Optional[str] = None,
    outcome: str,
    duration_ms: Optional[int] = None,
    reason: Optional[str] = None,
    level: str = "info",
    message: Optional[str] = None,
) -> None:
    """
    Emit structured log event.

    Args:
        logger: Logger instance
        component: Component name (e.g. "feedback_api", "telegram")
        operation: Operation name (e.g. "feedback_submit", "diagnostics")
        correlation_id: Request identifier (optional)
        outcome: Outcome ("success", "rejected", "failed")
        duration_ms: Duration in milliseconds (omitted if None)
        reason: Short non-PII explanation (optional)
        level: Log level ("info", "warning", "error", "debug")
        message: Optional override message (defaults to a summary line)
    """
    extra: dict = {
        "component": component,
        "operation": operation,
        "outcome": outcome,
    }
    if correlation_id is not None:
        extra["correlation_id"] = str(correlation_id)
    if duration_ms is not None:
        extra["duration_ms"] = duration_ms
    if reason is not None:
        extra["reason"] = reason

    msg = message or f"{component} {operation} outcome={outcome}"
    if duration_ms is not None and message is None:
        msg += f" duration_ms={duration_ms}"
    if reason is not None and message is None:
        msg += f" reason={reason}"
    log_method = getattr(logger, level.lower(), logger.info)
    log_method(msg, extra=extra)
