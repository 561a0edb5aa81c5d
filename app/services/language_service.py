# -*- coding: utf-8 -*-
"""
Central language resolution for IFET pages.
The page locale must be obtained via detect_language, once per page load.
"""
import logging
import re
from typing import Optional
from urllib.parse import parse_qs, unquote, urlsplit

from app.core.i18n.types import DEFAULT_LOCALE, SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

# Used when the query component cannot be trusted (e.g. some file:// URLs)
_LANG_IN_URL = re.compile(r"[?&]lang=([^&#]+)", re.IGNORECASE)


def normalize_locale(raw: str) -> str:
    """'  ru-RU ' -> 'ru'."""
    return raw.strip().lower().split("-")[0]


def _from_query(url: str) -> Optional[str]:
    values = parse_qs(urlsplit(url).query, keep_blank_values=True).get("lang")
    if not values:
        return None
    normalized = normalize_locale(values[0])
    return normalized if normalized in SUPPORTED_LOCALES else None


def _from_href(url: str) -> Optional[str]:
    match = _LANG_IN_URL.search(url)
    if not match or not match.group(1):
        return None
    normalized = normalize_locale(unquote(match.group(1)))
    return normalized if normalized in SUPPORTED_LOCALES else None


def detect_language(url: Optional[str]) -> str:
    """
    Resolve the page locale from the ?lang= parameter of url.

    Never raises: anything unparsable or unsupported resolves to DEFAULT_LOCALE.
    """
    try:
        href = str(url or "")
        lang = _from_query(href) or _from_href(href)
        if lang:
            logger.debug(f"[I18N] language resolved: {lang}")
            return lang
    except Exception as e:
        logger.debug(f"[I18N] language detection failed: {e}")

    logger.debug(f"[I18N] language resolved: {DEFAULT_LOCALE} (default)")
    return DEFAULT_LOCALE
