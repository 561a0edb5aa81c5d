"""
Tests for the feedback HTTP endpoint.

The aiohttp application runs in-process; Telegram is replaced by a mock Bot.
"""
import io

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest
from aiohttp import FormData
from aiohttp.test_utils import TestClient, TestServer

import config
from app.api.feedback import (
    BOT_KEY,
    FEEDBACK_PATH,
    create_feedback_app,
    read_upload,
    resolve_allow_origin,
)

ORIGIN = "https://www.ifet.example.com"


def client_for(settings, bot):
    return TestClient(TestServer(create_feedback_app(settings, bot=bot)))


class TestResolveAllowOrigin:
    """Tests for resolve_allow_origin function"""

    def test_empty_list(self):
        """No configured origins should allow any"""
        assert resolve_allow_origin(ORIGIN, []) == "*"

    def test_wildcard(self):
        """Wildcard in the list should allow any"""
        assert resolve_allow_origin(ORIGIN, ["https://a.example", "*"]) == "*"

    def test_listed_origin(self):
        """Listed origin should be echoed"""
        assert resolve_allow_origin(ORIGIN, ["https://a.example", ORIGIN]) == ORIGIN

    def test_unlisted_origin(self):
        """Unlisted origin should get the first configured origin"""
        assert resolve_allow_origin("https://evil.example", ["https://a.example", ORIGIN]) == "https://a.example"


class TestDiagnostics:
    """Tests for GET and OPTIONS"""

    @pytest.mark.asyncio
    async def test_get_configured(self, feedback_settings, mock_bot):
        """GET should report configuration without secrets"""
        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.get(FEEDBACK_PATH, headers={"Origin": ORIGIN})
            data = await resp.json()

        assert resp.status == 200
        assert data == {
            "ok": True,
            "service": "ifet-feedback",
            "runtime": "aiohttp",
            "hasBotToken": True,
            "hasChatId": True,
            "allowedOrigins": ["https://ifet.example.com", ORIGIN],
        }
        assert feedback_settings.bot_token not in await resp.text()
        assert resp.headers["Access-Control-Allow-Origin"] == ORIGIN
        assert resp.headers["Vary"] == "Origin"
        assert resp.headers["Content-Type"] == "application/json; charset=utf-8"

    @pytest.mark.asyncio
    async def test_get_unconfigured(self):
        """GET should report missing credentials"""
        async with client_for(config.FeedbackSettings(), None) as client:
            resp = await client.get("/")
            data = await resp.json()

        assert data["hasBotToken"] is False
        assert data["hasChatId"] is False
        assert data["allowedOrigins"] == ["*"]
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    @pytest.mark.asyncio
    async def test_options_preflight(self, feedback_settings, mock_bot):
        """OPTIONS should return an empty 204 with CORS headers"""
        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.options(FEEDBACK_PATH, headers={"Origin": "https://evil.example"})
            body = await resp.read()

        assert resp.status == 204
        assert body == b""
        assert resp.headers["Access-Control-Allow-Origin"] == "https://ifet.example.com"
        assert resp.headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
        assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"
        assert resp.headers["Access-Control-Max-Age"] == "86400"

    @pytest.mark.asyncio
    async def test_method_not_allowed(self, feedback_settings, mock_bot):
        """Other methods should get 405"""
        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.put(FEEDBACK_PATH, json={"message": "hi"})
            data = await resp.json()

        assert resp.status == 405
        assert data == {"ok": False, "error": "Method not allowed"}
        mock_bot.send_message.assert_not_awaited()


class TestSubmit:
    """Tests for POST submissions"""

    @pytest.mark.asyncio
    async def test_not_configured(self, mock_bot):
        """Missing credentials should be rejected with 500"""
        settings = config.FeedbackSettings(bot_token="123456:TEST-token")

        async with client_for(settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, json={"message": "hi"})
            data = await resp.json()

        assert resp.status == 500
        assert data == {"ok": False, "error": "Server not configured (missing BOT_TOKEN/CHAT_ID)"}
        mock_bot.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_json_submission(self, feedback_settings, mock_bot):
        """JSON body should be forwarded as a text message"""
        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, json={
                "type": "bug",
                "lang": "ru",
                "email": "user@example.com",
                "message": "  Button does nothing  ",
                "timestamp": "2026-10-17T10:00:00Z",
                "userAgent": "Mozilla/5.0",
            })
            data = await resp.json()

        assert resp.status == 200
        assert data == {"ok": True}
        kwargs = mock_bot.send_message.await_args.kwargs
        assert kwargs["chat_id"] == feedback_settings.chat_id
        assert kwargs["text"].startswith("📝 IFET feedback: bug\n🌐 lang: ru\n")
        assert "\nButton does nothing\n" in kwargs["text"]
        mock_bot.send_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_object_json(self, feedback_settings, mock_bot):
        """JSON array body should be sent as an empty submission"""
        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, json=["not", "an", "object"])

        assert resp.status == 200
        assert mock_bot.send_message.await_args.kwargs["text"] == "📝 IFET feedback: unknown"

    @pytest.mark.asyncio
    async def test_invalid_json(self, feedback_settings, mock_bot):
        """Unparsable body should be a 500 with the error text"""
        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, data="{broken", headers={"Content-Type": "application/json"})
            data = await resp.json()

        assert resp.status == 500
        assert data["ok"] is False
        assert data["error"].startswith("Invalid JSON body")
        mock_bot.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_multipart_with_file(self, feedback_settings, mock_bot):
        """Multipart with a file should be sent as a document"""
        form = FormData()
        form.add_field("type", "bug")
        form.add_field("message", "see log")
        form.add_field("attachment", b"traceback...", filename="log.txt", content_type="text/plain")

        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, data=form)
            data = await resp.json()

        assert resp.status == 200
        assert data == {"ok": True}
        kwargs = mock_bot.send_document.await_args.kwargs
        assert kwargs["document"].filename == "log.txt"
        assert kwargs["caption"].startswith("📝 IFET feedback: bug")
        mock_bot.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_multipart_empty_file(self, feedback_settings, mock_bot):
        """Multipart with an empty file should be sent as a text message"""
        form = FormData()
        form.add_field("message", "no file really")
        form.add_field("attachment", b"", filename="empty.txt", content_type="text/plain")

        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, data=form)

        assert resp.status == 200
        mock_bot.send_message.assert_awaited_once()
        mock_bot.send_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delivery_failure(self, feedback_settings, mock_bot):
        """Telegram failure should be a 500 with the upstream text"""
        mock_bot.send_message = AsyncMock(
            side_effect=TelegramBadRequest(method=MagicMock(), message="Bad Request: chat not found")
        )

        async with client_for(feedback_settings, mock_bot) as client:
            resp = await client.post(FEEDBACK_PATH, json={"message": "hi"}, headers={"Origin": ORIGIN})
            data = await resp.json()

        assert resp.status == 500
        assert data["ok"] is False
        assert "Telegram sendMessage failed" in data["error"]
        assert "chat not found" in data["error"]
        assert resp.headers["Access-Control-Allow-Origin"] == ORIGIN
        mock_bot.send_message.assert_awaited_once()


class TestReadUpload:
    """Tests for read_upload function"""

    def test_reads_and_closes(self):
        """Upload should be read fully and its file closed"""
        fileobj = io.BytesIO(b"traceback...")

        assert read_upload(fileobj) == b"traceback..."
        assert fileobj.closed is True

    @pytest.mark.asyncio
    async def test_multipart_reads_off_loop(self, feedback_settings, mock_bot):
        """Multipart upload should be read through the executor helper"""
        form = FormData()
        form.add_field("attachment", b"data", filename="log.txt", content_type="text/plain")

        with patch("app.api.feedback.read_upload", wraps=read_upload) as reader:
            async with client_for(feedback_settings, mock_bot) as client:
                resp = await client.post(FEEDBACK_PATH, data=form)

        assert resp.status == 200
        reader.assert_called_once()
        assert reader.call_args.args[0].closed is True
        assert mock_bot.send_document.await_args.kwargs["document"].filename == "log.txt"


class TestCreateFeedbackApp:
    """Tests for create_feedback_app function"""

    def test_creates_bot_from_token(self, feedback_settings):
        """Bot should be created from a well-formed token"""
        app = create_feedback_app(feedback_settings)

        assert isinstance(app[BOT_KEY], Bot)

    def test_invalid_token(self):
        """Malformed token should leave the relay without a bot"""
        app = create_feedback_app(config.FeedbackSettings(bot_token="not a token", chat_id="1"))

        assert app[BOT_KEY] is None

    def test_no_token(self):
        """No token should leave the relay without a bot"""
        assert create_feedback_app(config.FeedbackSettings())[BOT_KEY] is None
