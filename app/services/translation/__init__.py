"""
Page Translation Service Layer

This package localizes marked page elements for the locale requested in the
page URL.
"""

from app.services.translation.document import PageDocument, PageElement
from app.services.translation.service import (
    PageLocalizer,
    TranslationResult,
    has_locale_entry,
    should_show_coming_soon,
    translate_document,
    translate_element,
)

__all__ = [
    "PageDocument",
    "PageElement",
    "PageLocalizer",
    "TranslationResult",
    "has_locale_entry",
    "should_show_coming_soon",
    "translate_document",
    "translate_element",
]
