# -*- coding: utf-8 -*-
"""
Page strings and the translation lookup.

Lookup order for a key:
- requested locale
- English (fallback locale)
- the key itself (missing translations stay visible, never blank)

A value only counts when it is a non-empty string; anything else in the
store falls through to the next level.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from app.core.i18n.types import FALLBACK_LOCALE, TranslationStore

from . import en, ru

logger = logging.getLogger(__name__)

# Bundled strings of the feedback page
PAGE_TRANSLATIONS = {
    "en": en.LANG,
    "ru": ru.LANG,
}


def _lookup(store: Any, language: str, key: str) -> Optional[str]:
    if not isinstance(store, Mapping):
        return None
    lang_dict = store.get(language)
    if not isinstance(lang_dict, Mapping):
        return None
    text = lang_dict.get(key)
    if isinstance(text, str) and text:
        return text
    return None


def get_text(store: TranslationStore, language: str, key: str) -> str:
    """
    Get localized text for key in given language. Never raises.

    Args:
        store: locale -> key -> string mapping
        language: Resolved locale code
        key: Opaque translation key

    Returns:
        Translation, English translation, or the key itself.
    """
    text = _lookup(store, language, key)
    if text is not None:
        return text

    text = _lookup(store, FALLBACK_LOCALE, key)
    if text is not None:
        if language != FALLBACK_LOCALE:
            logger.debug("I18N fallback to EN for key=%s, lang=%s", key, language)
        return text

    logger.warning("I18N missing key in all languages: %s", key)
    return key


__all__ = ["get_text", "PAGE_TRANSLATIONS"]
