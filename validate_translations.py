#!/usr/bin/env python3
"""
Translation validation script for IFET pages.

Validates that every page bundle has the key set of the English bundle.
English is the fallback language, so it is the canonical reference.
"""

import sys
from typing import Dict, List, Mapping, Tuple

from app.core.i18n.types import FALLBACK_LOCALE, SUPPORTED_LOCALES
from app.i18n import PAGE_TRANSLATIONS


def validate_bundles(bundles: Mapping[str, Mapping[str, str]]) -> Tuple[bool, List[str], List[str]]:
    """
    Validate translation coverage and consistency.

    Returns:
        Tuple of (is_valid, errors, warnings)
    """
    errors: List[str] = []
    warnings: List[str] = []

    if FALLBACK_LOCALE not in bundles:
        errors.append(f"English ({FALLBACK_LOCALE}) bundle not found - required as canonical reference")
        return False, errors, warnings

    canonical_keys = set(bundles[FALLBACK_LOCALE].keys())

    for lang, strings in bundles.items():
        if lang not in SUPPORTED_LOCALES:
            errors.append(f"Language '{lang}' is not a supported locale")

        empty = sorted(key for key, text in strings.items() if not isinstance(text, str) or not text.strip())
        if empty:
            warnings.append(f"Language '{lang}' has {len(empty)} empty strings: {empty[:10]}")

        if lang == FALLBACK_LOCALE:
            continue

        lang_keys = set(strings.keys())

        missing_keys = canonical_keys - lang_keys
        if missing_keys:
            errors.append(f"Language '{lang}' missing {len(missing_keys)} keys: {sorted(missing_keys)[:10]}")

        extra_keys = lang_keys - canonical_keys
        if extra_keys:
            warnings.append(
                f"Language '{lang}' has {len(extra_keys)} extra keys not in English: {sorted(extra_keys)[:10]}"
            )

    return not errors, errors, warnings


def main(bundles: Dict[str, Mapping[str, str]] = PAGE_TRANSLATIONS) -> int:
    is_valid, errors, warnings = validate_bundles(bundles)

    if not is_valid:
        print("❌ VALIDATION FAILED")
        print(f"\nFound {len(errors)} error(s):")
        for error in errors[:20]:
            print(f"  - {error}")
        if len(errors) > 20:
            print(f"  ... and {len(errors) - 20} more errors")
    else:
        print(f"✅ VALIDATION PASSED ({len(bundles)} languages, {len(bundles[FALLBACK_LOCALE])} keys)")

    if warnings:
        print(f"\n⚠️  Found {len(warnings)} warning(s):")
        for warning in warnings[:10]:
            print(f"  - {warning}")

    return 0 if is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
