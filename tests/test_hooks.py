"""Tests for the hook dispatch system."""

import logging

import pytest
from markupsafe import Markup

from wikiforge.hooks import (
    ROOT_TYPE,
    ContentHookMixin,
    HookCapable,
    HookRegistry,
    TypeHierarchy,
    error_fragment,
    escape_html,
)


# =============================================================================
# Fixtures
# =============================================================================


class Entity(ContentHookMixin):
    """Minimal hook-capable entity."""

    def __init__(self, registry: HookRegistry, hook_type: str, name: str = "Home"):
        self.hook_registry = registry
        self.hook_type = hook_type
        self.name = name


@pytest.fixture
def types():
    """object <- resource <- page <- special_page, object <- tree."""
    hierarchy = TypeHierarchy()
    hierarchy.define("resource")
    hierarchy.define("page", parent="resource")
    hierarchy.define("special_page", parent="page")
    hierarchy.define("tree")
    return hierarchy


@pytest.fixture
def registry(types):
    return HookRegistry(types)


@pytest.fixture
def page(registry):
    return Entity(registry, "page")


# =============================================================================
# TypeHierarchy tests
# =============================================================================


class TestTypeHierarchy:
    def test_lineage_walks_to_root(self, types):
        assert list(types.lineage("special_page")) == [
            "special_page",
            "page",
            "resource",
            ROOT_TYPE,
        ]

    def test_lineage_of_root(self, types):
        assert list(types.lineage(ROOT_TYPE)) == [ROOT_TYPE]

    def test_unknown_type_stops_at_itself(self, types):
        assert list(types.lineage("ghost")) == ["ghost"]

    def test_undefined_parent_stops_chain(self):
        types = TypeHierarchy()
        types.define("orphan", parent="missing")
        assert list(types.lineage("orphan")) == ["orphan", "missing"]

    def test_parent_of(self, types):
        assert types.parent_of("page") == "resource"
        assert types.parent_of("resource") == ROOT_TYPE
        assert types.parent_of(ROOT_TYPE) is None
        assert types.parent_of("ghost") is None

    def test_define_idempotent(self, types):
        types.define("page", parent="resource")
        assert types.parent_of("page") == "resource"

    def test_conflicting_parent_raises(self, types):
        with pytest.raises(ValueError, match="already has parent"):
            types.define("page", parent="tree")

    def test_root_cannot_be_defined(self, types):
        with pytest.raises(ValueError, match="root type"):
            types.define(ROOT_TYPE, parent="page")

    def test_cycle_rejected(self):
        types = TypeHierarchy()
        types.define("a", parent="b")
        with pytest.raises(ValueError, match="cycle"):
            types.define("b", parent="a")

    def test_is_defined(self, types):
        assert types.is_defined(ROOT_TYPE)
        assert types.is_defined("page")
        assert not types.is_defined("ghost")

    def test_list_types(self, types):
        assert types.list_types() == ["page", "resource", "special_page", "tree"]


# =============================================================================
# HookRegistry registration tests
# =============================================================================


class TestHookRegistration:
    def test_add_hook_appends_in_order(self, registry):
        def first(source):
            return "1"

        def second(source):
            return "2"

        registry.add_hook("page", "footer", first)
        registry.add_hook("page", "footer", second)
        assert registry.hooks_for("page", "footer") == (first, second)

    def test_register_alias(self, registry):
        def fn(source):
            return "x"

        registry.register("page", "footer", fn)
        assert registry.hooks_for("page", "footer") == (fn,)

    def test_same_function_twice_fires_twice(self, registry, page):
        def fn(source):
            return "x"

        registry.add_hook("page", "footer", fn)
        registry.add_hook("page", "footer", fn)
        assert registry.invoke(page, "footer") == ["x", "x"]

    def test_decorator_registers_and_preserves_function(self, registry):
        @registry.hook("page", "head")
        def page_head(source):
            return "<meta>"

        assert page_head.__name__ == "page_head"
        assert registry.hooks_for("page", "head") == (page_head,)

    def test_declare_creates_empty_entry(self, registry):
        registry.declare("page", "footer")
        assert registry.has_entry("page", "footer")
        assert registry.hooks_for("page", "footer") == ()

    def test_declare_keeps_existing_callbacks(self, registry):
        def fn(source):
            return "x"

        registry.add_hook("page", "footer", fn)
        registry.declare("page", "footer")
        assert registry.hooks_for("page", "footer") == (fn,)

    def test_events_for(self, registry):
        registry.declare("page", "head")
        registry.add_hook("page", "footer", lambda source: "")
        assert registry.events_for("page") == ["footer", "head"]
        assert registry.events_for("tree") == []

    def test_registries_are_independent(self, types):
        one = HookRegistry(types)
        two = HookRegistry(types)
        one.add_hook("page", "footer", lambda source: "x")
        assert not two.has_entry("page", "footer")

    def test_clear(self, registry):
        registry.add_hook("page", "footer", lambda source: "x")
        registry.clear()
        assert not registry.has_entry("page", "footer")

    def test_default_hierarchy(self):
        registry = HookRegistry()
        assert list(registry.types.lineage("anything")) == ["anything"]


# =============================================================================
# HookRegistry invocation tests
# =============================================================================


class TestHookInvoke:
    def test_no_registrations_returns_empty(self, registry, page):
        assert registry.invoke(page, "footer") == []

    def test_own_callbacks_in_registration_order(self, registry, page):
        registry.add_hook("page", "footer", lambda source: "a")
        registry.add_hook("page", "footer", lambda source: "b")
        registry.add_hook("page", "footer", lambda source: "c")
        assert registry.invoke(page, "footer") == ["a", "b", "c"]

    def test_walks_up_to_ancestor(self, registry):
        registry.add_hook("resource", "footer", lambda source: "resource")
        special = Entity(registry, "special_page")
        assert registry.invoke(special, "footer") == ["resource"]

    def test_walk_reaches_root(self, registry):
        registry.add_hook(ROOT_TYPE, "footer", lambda source: "root")
        assert registry.invoke(Entity(registry, "special_page"), "footer") == ["root"]

    def test_most_specific_level_stops_walk(self, registry, page):
        registry.add_hook("page", "footer", lambda source: "page")
        registry.add_hook("resource", "footer", lambda source: "resource")
        registry.add_hook(ROOT_TYPE, "footer", lambda source: "root")
        assert registry.invoke(page, "footer") == ["page"]

    def test_ancestor_callbacks_apply_to_descendants_only(self, registry):
        registry.add_hook("page", "footer", lambda source: "page")
        assert registry.invoke(Entity(registry, "resource"), "footer") == []
        assert registry.invoke(Entity(registry, "tree"), "footer") == []

    def test_empty_declaration_halts_walk(self, registry, page):
        registry.declare("page", "footer")
        registry.add_hook("resource", "footer", lambda source: "resource")
        assert registry.invoke(page, "footer") == []

    def test_events_are_independent(self, registry, page):
        registry.add_hook("page", "head", lambda source: "head")
        registry.add_hook("resource", "footer", lambda source: "footer")
        assert registry.invoke(page, "footer") == ["footer"]
        assert registry.invoke(page, "head") == ["head"]

    def test_unknown_type_only_uses_own_hooks(self, registry):
        registry.add_hook(ROOT_TYPE, "footer", lambda source: "root")
        ghost = Entity(registry, "ghost")
        assert registry.invoke(ghost, "footer") == []
        registry.add_hook("ghost", "footer", lambda source: "ghost")
        assert registry.invoke(ghost, "footer") == ["ghost"]

    def test_callback_receives_source_and_arguments(self, registry, page):
        received = []

        def capture(source, *args, **kwargs):
            received.append((source, args, kwargs))
            return source.name

        registry.add_hook("page", "footer", capture)
        assert registry.invoke(page, "footer", 1, 2, mode="full") == ["Home"]
        assert received == [(page, (1, 2), {"mode": "full"})]

    def test_results_are_not_converted(self, registry, page):
        marker = object()
        registry.add_hook("page", "footer", lambda source: marker)
        registry.add_hook("page", "footer", lambda source: None)
        assert registry.invoke(page, "footer") == [marker, None]

    def test_callback_error_propagates(self, registry, page):
        def broken(source):
            raise RuntimeError("boom")

        registry.add_hook("page", "footer", broken)
        with pytest.raises(RuntimeError, match="boom"):
            registry.invoke(page, "footer")

    def test_callback_error_skips_later_callbacks(self, registry, page):
        calls = []

        def broken(source):
            calls.append("broken")
            raise RuntimeError("boom")

        def after(source):
            calls.append("after")
            return "after"

        registry.add_hook("page", "footer", broken)
        registry.add_hook("page", "footer", after)
        with pytest.raises(RuntimeError):
            registry.invoke(page, "footer")
        assert calls == ["broken"]


# =============================================================================
# ContentHookMixin tests
# =============================================================================


class TestContentHookMixin:
    def test_entity_is_hook_capable(self, page):
        assert isinstance(page, HookCapable)

    def test_invoke_hook_delegates(self, registry, page):
        registry.add_hook("page", "footer", lambda source, n: source.name * n)
        assert page.invoke_hook("footer", 2) == ["HomeHome"]

    def test_content_hook_concatenates(self, registry, page):
        registry.add_hook("page", "footer", lambda source: "<p>")
        registry.add_hook("page", "footer", lambda source: 42)
        registry.add_hook("page", "footer", lambda source: None)
        registry.add_hook("page", "footer", lambda source: "</p>")
        assert page.content_hook("footer") == "<p>42</p>"

    def test_content_hook_returns_markup(self, registry, page):
        registry.add_hook("page", "footer", lambda source: "<b>x</b>")
        result = page.content_hook("footer")
        assert isinstance(result, Markup)
        assert str(Markup("{}").format(result)) == "<b>x</b>"

    def test_content_hook_empty(self, page):
        assert page.content_hook("footer") == ""

    def test_content_hook_contains_failure(self, registry, page):
        def broken(source):
            raise ValueError('bad <input> & "quote"')

        registry.add_hook("page", "footer", lambda source: "ok")
        registry.add_hook("page", "footer", broken)

        result = page.content_hook("footer")
        assert result == (
            '<span class="error">bad &lt;input&gt; &amp; &#34;quote&#34;</span>'
        )

    def test_content_hook_logs_failure(self, registry, page, caplog):
        def broken(source):
            raise RuntimeError("boom")

        registry.add_hook("page", "footer", broken)
        with caplog.at_level(logging.WARNING, logger="wikiforge.hooks.content"):
            page.content_hook("footer")
        assert "Hook 'footer' on 'page' failed: boom" in caplog.text

    def test_content_hook_without_hook_type(self, registry):
        class Untyped(ContentHookMixin):
            def __init__(self, registry):
                self.hook_registry = registry

        result = Untyped(registry).content_hook("footer")
        assert result.startswith('<span class="error">')
        assert "hook_type" in result

    def test_invoke_hook_still_raises(self, registry, page):
        def broken(source):
            raise RuntimeError("boom")

        registry.add_hook("page", "footer", broken)
        with pytest.raises(RuntimeError):
            page.invoke_hook("footer")

    def test_class_level_hook_type(self, registry):
        class Tree(ContentHookMixin):
            hook_type = "tree"

            def __init__(self, registry):
                self.hook_registry = registry

        registry.add_hook("tree", "footer", lambda source: "tree")
        assert Tree(registry).content_hook("footer") == "tree"


# =============================================================================
# Escaping helpers
# =============================================================================


class TestEscaping:
    def test_escape_html(self):
        assert escape_html("<a href='x'>&</a>") == "&lt;a href=&#39;x&#39;&gt;&amp;&lt;/a&gt;"

    def test_escape_html_non_string(self):
        assert escape_html(3) == "3"

    def test_error_fragment(self):
        assert error_fragment("<x>") == '<span class="error">&lt;x&gt;</span>'
