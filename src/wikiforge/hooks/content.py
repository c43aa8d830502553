"""Hook invocation for content-producing entities."""

import logging
from typing import TYPE_CHECKING, Any

from markupsafe import Markup, escape

if TYPE_CHECKING:
    from wikiforge.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)


def escape_html(value: Any) -> Markup:
    """HTML-escape ``value`` after converting it to text."""
    return escape(str(value))


def error_fragment(message: Any) -> Markup:
    """Inline marker shown in place of content that failed to render."""
    return Markup('<span class="error">{}</span>').format(str(message))


class ContentHookMixin:
    """Hook capability for renderable entities.

    Classes using the mixin set ``hook_registry`` and ``hook_type``,
    either as class attributes or per instance.

    Example:
        class Page(ContentHookMixin):
            hook_type = "page"

            def __init__(self, registry, path):
                self.hook_registry = registry
                self.path = path

        page.content_hook("footer")
    """

    hook_registry: "HookRegistry"
    hook_type: str

    def invoke_hook(self, event_type: str, *args: Any, **kwargs: Any) -> list[Any]:
        """Run the hooks for ``event_type``; callback errors propagate."""
        return self.hook_registry.invoke(self, event_type, *args, **kwargs)

    def content_hook(self, event_type: str, *args: Any, **kwargs: Any) -> Markup:
        """Run the hooks for ``event_type`` and join their results as text.

        A failing callback does not fail the render: the whole hook
        output is replaced by an inline error marker carrying the escaped
        message. Hook output is trusted markup and is not escaped.
        """
        try:
            results = self.invoke_hook(event_type, *args, **kwargs)
            return Markup("".join("" if r is None else str(r) for r in results))
        except Exception as e:
            logger.warning(
                "Hook '%s' on '%s' failed: %s",
                event_type,
                getattr(self, "hook_type", None),
                e,
                exc_info=True,
            )
            return error_fragment(e)
