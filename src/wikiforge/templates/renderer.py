"""Rendering through the markup engine and stylesheet compiler.

Both collaborators sit behind small protocols; the renderer only hands
them source text and gets text back.
"""

from typing import Any, Protocol

from jinja2 import Environment
from markupsafe import Markup

from wikiforge.hooks.content import escape_html
from wikiforge.templates.cache import TemplateCache

MARKUP_KIND = "html"
STYLESHEET_KIND = "css"
LAYOUT_NAME = "layout"

STYLESHEET_OPTIONS = {"style": "compat"}


class MarkupEngine(Protocol):
    def render(
        self,
        source: str,
        receiver: Any,
        locals: dict[str, Any],
        content: str | None = None,
    ) -> str: ...


class StylesheetCompiler(Protocol):
    def compile(self, source: str, options: dict[str, Any]) -> str: ...


class JinjaMarkupEngine:
    """Markup engine backed by Jinja2.

    Templates see the receiver as ``page``, every local by name, wrapped
    output as ``content`` and the ``escape_html`` helper.
    """

    def __init__(self, environment: Environment | None = None):
        self.environment = environment or Environment(autoescape=True)
        self.environment.globals.setdefault("escape_html", escape_html)

    def render(
        self,
        source: str,
        receiver: Any,
        locals: dict[str, Any],
        content: str | None = None,
    ) -> str:
        variables = dict(locals)
        variables["page"] = receiver
        if content is not None:
            # Already rendered, must not be escaped again
            variables["content"] = Markup(content)
        return self.environment.from_string(source).render(variables)


class PassthroughStylesheetCompiler:
    """Stylesheet compiler for plain CSS: returns the source unchanged."""

    def compile(self, source: str, options: dict[str, Any]) -> str:
        return source


class TemplateRenderer:
    """Renders named or inline templates for a receiver.

    Args:
        cache: Where named templates are looked up
        engine: Markup engine (Jinja2 by default)
        compiler: Stylesheet compiler (pass-through by default)
    """

    def __init__(
        self,
        cache: TemplateCache,
        engine: MarkupEngine | None = None,
        compiler: StylesheetCompiler | None = None,
    ):
        self.cache = cache
        self.engine = engine or JinjaMarkupEngine()
        self.compiler = compiler or PassthroughStylesheetCompiler()

    def render(
        self,
        name: str,
        receiver: Any = None,
        locals: dict[str, Any] | None = None,
        layout: bool = True,
    ) -> str:
        """Render template ``name`` and, unless disabled, wrap it in the layout.

        Raises:
            TemplateNotFound: If the template or the layout is missing
        """
        source = self.cache.resolve(MARKUP_KIND, name)
        return self._render(source, receiver, locals or {}, layout)

    def render_string(
        self,
        source: str,
        receiver: Any = None,
        locals: dict[str, Any] | None = None,
        layout: bool = False,
    ) -> str:
        """Render inline template text."""
        return self._render(source, receiver, locals or {}, layout)

    def stylesheet(self, name: str, options: dict[str, Any] | None = None) -> str:
        """Compile the stylesheet ``name``; ``options`` override the defaults."""
        source = self.cache.resolve(STYLESHEET_KIND, name)
        compiler_options = {
            **STYLESHEET_OPTIONS,
            **(options or {}),
            "filename": f"{name}.{STYLESHEET_KIND}",
        }
        return self.compiler.compile(source, compiler_options)

    def _render(self, source: str, receiver: Any, locals: dict[str, Any], layout: bool) -> str:
        output = self.engine.render(source, receiver, locals)
        if not layout:
            return output
        layout_source = self.cache.resolve(MARKUP_KIND, LAYOUT_NAME)
        return self.engine.render(layout_source, receiver, locals, content=output)
