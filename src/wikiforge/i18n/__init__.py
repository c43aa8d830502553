"""Locale string translation."""

from wikiforge.i18n.catalog import LANG_PLACEHOLDER, TranslationCatalog

__all__ = ["LANG_PLACEHOLDER", "TranslationCatalog"]
