"""Template lookup, caching and rendering."""

from wikiforge.templates.cache import TemplateCache
from wikiforge.templates.renderer import (
    JinjaMarkupEngine,
    MarkupEngine,
    PassthroughStylesheetCompiler,
    StylesheetCompiler,
    TemplateRenderer,
)

__all__ = [
    "JinjaMarkupEngine",
    "MarkupEngine",
    "PassthroughStylesheetCompiler",
    "StylesheetCompiler",
    "TemplateCache",
    "TemplateRenderer",
]
