"""
Page localization constants and types.
"""

from .types import (
    BASELINE_LOCALES,
    COMING_SOON_HTML,
    DEFAULT_LOCALE,
    FALLBACK_LOCALE,
    I18N_ATTRIBUTE,
    I18N_LINK_ATTRIBUTE,
    INPUT_TAGS,
    PLACEHOLDER_ATTRIBUTE,
    SUPPORTED_LOCALES,
    TranslationStore,
)

__all__ = [
    "BASELINE_LOCALES",
    "COMING_SOON_HTML",
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "I18N_ATTRIBUTE",
    "I18N_LINK_ATTRIBUTE",
    "INPUT_TAGS",
    "PLACEHOLDER_ATTRIBUTE",
    "SUPPORTED_LOCALES",
    "TranslationStore",
]
