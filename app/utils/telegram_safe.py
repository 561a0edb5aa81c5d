"""
Telegram delivery of feedback submissions.

One attempt per submission: aiogram errors are re-raised as
FeedbackDeliveryError with the upstream text, nothing is retried.
"""
import logging
from typing import Optional, Union

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import BufferedInputFile, LinkPreviewOptions

from app.services.feedback.exceptions import FeedbackDeliveryError
from app.services.feedback.service import FeedbackAttachment, format_caption

logger = logging.getLogger(__name__)


async def send_feedback_message(bot: Bot, chat_id: Union[int, str], text: str):
    """Send a plain text message with link previews disabled."""
    try:
        return await bot.send_message(
            chat_id=chat_id,
            text=text,
            link_preview_options=LinkPreviewOptions(is_disabled=True),
        )
    except TelegramAPIError as e:
        logger.warning(f"TELEGRAM_SEND_MESSAGE_FAILED error={e}")
        raise FeedbackDeliveryError(f"Telegram sendMessage failed: {e}") from e


async def send_feedback_document(
    bot: Bot,
    chat_id: Union[int, str],
    attachment: FeedbackAttachment,
    caption: str,
):
    """Send the attachment as a document; caption is cut to the caption limit."""
    document = BufferedInputFile(attachment.content, filename=attachment.filename)
    try:
        return await bot.send_document(
            chat_id=chat_id,
            document=document,
            caption=format_caption(caption),
        )
    except TelegramAPIError as e:
        logger.warning(f"TELEGRAM_SEND_DOCUMENT_FAILED error={e} size={attachment.size}")
        raise FeedbackDeliveryError(f"Telegram sendDocument failed: {e}") from e


async def deliver_feedback(
    bot: Bot,
    chat_id: Union[int, str],
    text: str,
    attachment: Optional[FeedbackAttachment] = None,
):
    """
    Forward feedback to the chat.

    The document call is used only for a non-empty attachment.

    Raises:
        FeedbackDeliveryError: Telegram did not accept the call
    """
    if attachment is not None and attachment.size > 0:
        return await send_feedback_document(bot, chat_id, attachment, text)
    return await send_feedback_message(bot, chat_id, text)
