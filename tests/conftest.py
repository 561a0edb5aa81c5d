"""
Pytest configuration and shared fixtures.

The page localization tests run against an in-memory page document that
implements the PageDocument / PageElement interfaces.
"""
import pytest
from typing import Dict, List, Optional, Union
from unittest.mock import AsyncMock, MagicMock

import config


class FakeElement:
    """In-memory element: tag, attributes, children (elements or text)"""

    def __init__(self, tag: str, attrs: Optional[Dict[str, str]] = None, children=None, value: str = ""):
        self.tag = tag.lower()
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.children: List[Union["FakeElement", str]] = list(children or [])
        self.value = value
        self.fail = False

    @property
    def tag_name(self) -> str:
        return self.tag.upper()

    @property
    def child_element_count(self) -> int:
        return sum(1 for child in self.children if isinstance(child, FakeElement))

    @property
    def text_content(self) -> str:
        return "".join(
            child.text_content if isinstance(child, FakeElement) else child
            for child in self.children
        )

    @property
    def inner_html(self) -> str:
        return "".join(
            child.outer_html if isinstance(child, FakeElement) else child
            for child in self.children
        )

    @property
    def outer_html(self) -> str:
        attrs = "".join(f' {name}="{value}"' for name, value in self.attrs.items())
        return f"<{self.tag}{attrs}>{self.inner_html}</{self.tag}>"

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attrs.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attrs

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def set_value(self, value: str) -> None:
        self.value = value

    def set_text_content(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("element detached")
        self.children = [text] if text else []

    def iter_elements(self):
        for child in self.children:
            if isinstance(child, FakeElement):
                yield child
                yield from child.iter_elements()


class FakeDocument:
    """In-memory page: <html lang=...><body>...</body></html>"""

    def __init__(self, *elements: FakeElement):
        self.lang: Optional[str] = None
        self.body = FakeElement("body", children=list(elements))

    def query_marked(self, attribute: str):
        return [el for el in self.body.iter_elements() if el.has_attribute(attribute)]

    def set_language(self, lang: str) -> None:
        self.lang = lang

    def replace_body(self, html: str) -> None:
        self.body.children = [html]

    def snapshot(self):
        """Everything substitution can change."""
        return (
            self.lang,
            self.body.outer_html,
            tuple(el.value for el in self.body.iter_elements()),
        )


@pytest.fixture
def element():
    """Factory for FakeElement"""
    return FakeElement


@pytest.fixture
def make_document():
    """Factory for FakeDocument"""
    return FakeDocument


@pytest.fixture
def store():
    """Two-locale translation store"""
    return {
        "en": {"greeting": "Hello", "footer.link": "Privacy", "form.email": "Your email"},
        "ru": {"greeting": "Privet", "footer.link": "Konfidentsialnost"},
    }


@pytest.fixture
def feedback_settings():
    """Fully configured relay settings"""
    return config.FeedbackSettings(
        bot_token="123456:TEST-token",
        chat_id="-1001234567890",
        allowed_origins=("https://ifet.example.com", "https://www.ifet.example.com"),
    )


@pytest.fixture
def mock_bot():
    """Mock aiogram Bot"""
    bot = MagicMock()
    bot.send_message = AsyncMock(return_value=MagicMock(message_id=1))
    bot.send_document = AsyncMock(return_value=MagicMock(message_id=2))
    bot.session = MagicMock()
    bot.session.close = AsyncMock()
    return bot
