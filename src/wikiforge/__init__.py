"""Support library for a content-rendering wiki."""

from wikiforge.config import WikiConfig
from wikiforge.context import AppContext, create_context
from wikiforge.errors import MultiError, TemplateNotFound, WikiforgeError, forbid

__version__ = "0.1.0"

__all__ = [
    "AppContext",
    "MultiError",
    "TemplateNotFound",
    "WikiConfig",
    "WikiforgeError",
    "create_context",
    "forbid",
]
