"""
I18N type definitions and constants shared by the page localization core.
"""

from typing import Any, Mapping

# Locale codes a page can be requested in (?lang=xx)
SUPPORTED_LOCALES = ("ar", "bn", "de", "en", "es", "fr", "hi", "ja", "ko", "pt", "ru", "zh")
DEFAULT_LOCALE = "en"

# Always renderable, even without a store entry of their own
BASELINE_LOCALES = ("en", "ru")

# Lookup chain: requested locale -> FALLBACK_LOCALE -> key itself
FALLBACK_LOCALE = "en"

# Document markers
I18N_ATTRIBUTE = "data-i18n"
I18N_LINK_ATTRIBUTE = "data-i18n-link"
PLACEHOLDER_ATTRIBUTE = "placeholder"

# Tag names (upper case, as reported by the document) that take value/placeholder
INPUT_TAGS = ("INPUT", "TEXTAREA")

# Body markup for locales that have no translations yet. Not localized.
COMING_SOON_HTML = """
      <div class="container">
        <div class="panel">
          <h1 class="page-title">Coming Soon</h1>
          <p class="page-subtitle">This page is not yet available in your language.</p>
        </div>
      </div>
    """

# locale -> key -> string. Values of any other shape never resolve.
TranslationStore = Mapping[str, Mapping[str, Any]]
