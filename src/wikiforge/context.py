"""Application context holding the process-wide registries and caches.

The context is built once at startup. Hook registration and type
definitions belong to that phase; afterwards the context is shared by
all requests and only read, apart from the template and locale caches,
which fill in idempotently.
"""

import logging
from dataclasses import dataclass
from typing import Any

from wikiforge.config import WikiConfig
from wikiforge.hooks.registry import HookRegistry
from wikiforge.hooks.types import TypeHierarchy
from wikiforge.i18n.catalog import TranslationCatalog
from wikiforge.templates.cache import TemplateCache
from wikiforge.templates.renderer import JinjaMarkupEngine, TemplateRenderer

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    config: WikiConfig
    types: TypeHierarchy
    hooks: HookRegistry
    templates: TemplateCache
    catalog: TranslationCatalog
    renderer: TemplateRenderer

    def t(self, key: str, /, **params: Any) -> str:
        """Translate ``key`` with the context's catalog."""
        return self.catalog.translate(key, params)


def create_context(config: WikiConfig) -> AppContext:
    """Build an application context and load its locale files.

    Templates rendered through the context can call ``t(key, params)``.
    """
    types = TypeHierarchy()
    templates = TemplateCache.from_paths(config.template_paths, production=config.production)
    catalog = TranslationCatalog(locale=config.locale)
    for pattern in config.locale_patterns:
        catalog.load_locale(pattern)

    engine = JinjaMarkupEngine()
    engine.environment.globals["t"] = catalog.translate

    logger.info(
        "Context ready: locale=%s, production=%s, %d translation strings",
        config.locale,
        config.production,
        len(catalog.entries),
    )
    return AppContext(
        config=config,
        types=types,
        hooks=HookRegistry(types),
        templates=templates,
        catalog=catalog,
        renderer=TemplateRenderer(templates, engine),
    )
