"""
Page Translation Service

Substitutes translated strings into the marked elements of a page.

Per-element policy:
- INPUT / TEXTAREA: placeholder if the element has one, value otherwise
- element with data-i18n-link: text content from the link key
- anything else: text content, only when the element has no element
  children (nested markup such as footer links is left as is)

Before any element is touched the unsupported-locale gate is consulted: a
locale without a store entry that is not a baseline locale gets the
"Coming Soon" panel instead of a half-translated page.

Nothing here raises past the public functions.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from app.core.i18n.types import (
    BASELINE_LOCALES,
    COMING_SOON_HTML,
    I18N_ATTRIBUTE,
    I18N_LINK_ATTRIBUTE,
    INPUT_TAGS,
    PLACEHOLDER_ATTRIBUTE,
    TranslationStore,
)
from app.i18n import get_text
from app.services.language_service import detect_language
from app.services.translation.document import PageDocument, PageElement

logger = logging.getLogger(__name__)


# ====================================================================================
# Result Types
# ====================================================================================

@dataclass
class TranslationResult:
    """Outcome of one translate_document pass"""
    lang: str
    coming_soon: bool = False
    translated: int = 0
    skipped: int = 0  # Elements with nested markup, left untouched
    failed: int = 0


# ====================================================================================
# Unsupported Locale Gate
# ====================================================================================

def has_locale_entry(store: Any, lang: str) -> bool:
    if not isinstance(store, Mapping):
        return False
    entry = store.get(lang)
    return isinstance(entry, Mapping) or bool(entry)


def should_show_coming_soon(store: TranslationStore, lang: str) -> bool:
    """
    True when the page cannot be rendered in lang.

    Baseline locales always render. The gate wins over the English fallback,
    so a non-baseline locale without its own entry is never partially shown.
    """
    return not has_locale_entry(store, lang) and lang not in BASELINE_LOCALES


# ====================================================================================
# Page Substitutor
# ====================================================================================

def translate_element(element: PageElement, store: TranslationStore, lang: str) -> bool:
    """
    Apply the translation of one marked element.

    Returns:
        True if the element was updated, False if it was left untouched
    """
    key = element.get_attribute(I18N_ATTRIBUTE) or ""
    text = get_text(store, lang, key)

    if element.tag_name.upper() in INPUT_TAGS:
        if element.has_attribute(PLACEHOLDER_ATTRIBUTE):
            element.set_attribute(PLACEHOLDER_ATTRIBUTE, text)
        else:
            element.set_value(text)
        return True

    if element.has_attribute(I18N_LINK_ATTRIBUTE):
        link_key = element.get_attribute(I18N_LINK_ATTRIBUTE) or ""
        element.set_text_content(get_text(store, lang, link_key))
        return True

    if element.child_element_count == 0:
        element.set_text_content(text)
        return True

    return False


def translate_document(document: PageDocument, store: TranslationStore, lang: str) -> TranslationResult:
    """
    Localize every marked element of document into lang.

    A failing element is logged and skipped; the rest of the page is still
    translated. The root language attribute is set after the traversal,
    except when the gate replaced the body.
    """
    result = TranslationResult(lang=lang)

    if should_show_coming_soon(store, lang):
        logger.info("I18N no translations for lang=%s, showing coming soon panel", lang)
        document.replace_body(COMING_SOON_HTML)
        result.coming_soon = True
        return result

    for element in document.query_marked(I18N_ATTRIBUTE):
        try:
            if translate_element(element, store, lang):
                result.translated += 1
            else:
                result.skipped += 1
        except Exception:
            result.failed += 1
            logger.exception("I18N failed to translate element lang=%s", lang)

    document.set_language(lang)
    return result


# ====================================================================================
# Page Localizer (host-facing context)
# ====================================================================================

class PageLocalizer:
    """
    Localization context of one page load.

    The locale is resolved once from the page URL and never changes; the
    translation store is replaced wholesale by init_translations.
    """

    def __init__(self, document: PageDocument, url: Optional[str]):
        self.document = document
        self._current_lang = detect_language(url)
        self._translations: TranslationStore = {}

    @property
    def current_lang(self) -> str:
        return self._current_lang

    @property
    def translations(self) -> TranslationStore:
        return self._translations

    @property
    def is_language_supported(self) -> bool:
        return self.current_lang in BASELINE_LOCALES

    def init_translations(self, page_translations: TranslationStore) -> None:
        """Load the page's store and localize the page right away."""
        self._translations = page_translations
        self.translate_page()

    def translate_page(self) -> Optional[TranslationResult]:
        """
        Re-run substitution against the current store.

        Returns:
            TranslationResult, or None if the document itself failed
        """
        try:
            result = translate_document(self.document, self._translations, self.current_lang)
        except Exception:
            logger.exception("I18N page translation failed lang=%s", self.current_lang)
            return None

        logger.debug(
            "I18N page translated lang=%s translated=%s skipped=%s failed=%s coming_soon=%s",
            result.lang, result.translated, result.skipped, result.failed, result.coming_soon,
        )
        return result
