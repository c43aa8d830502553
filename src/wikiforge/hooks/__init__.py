"""wikiforge hook system.

Lets pluggable behaviours contribute content at named extension points
of renderable entities. Hooks are registered per owner type and looked
up by walking the owner type hierarchy from the most specific type:

    types = TypeHierarchy()
    types.define("page")
    registry = HookRegistry(types)

    @registry.hook("page", "footer")
    def last_modified(page):
        return f"<p>{page.modified}</p>"

    page.content_hook("footer")
"""

from wikiforge.hooks.content import ContentHookMixin, error_fragment, escape_html
from wikiforge.hooks.registry import HookRegistry
from wikiforge.hooks.types import ROOT_TYPE, HookCapable, HookFn, TypeHierarchy

__all__ = [
    "ContentHookMixin",
    "HookCapable",
    "HookFn",
    "HookRegistry",
    "ROOT_TYPE",
    "TypeHierarchy",
    "error_fragment",
    "escape_html",
]
