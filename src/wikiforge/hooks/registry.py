"""Hook registry for wikiforge.

Callbacks are registered against an (owner type, event type) pair and
invoked by walking the owner type hierarchy from the invoking entity's
type towards the root.
"""

from collections.abc import Callable
from typing import Any

from wikiforge.hooks.types import ROOT_TYPE, HookCapable, HookFn, TypeHierarchy


class HookRegistry:
    """Registry for hook callbacks.

    Registration happens once, while the application context is being
    built; invocation happens per render afterwards. The two phases must
    not overlap.

    Example:
        registry = HookRegistry(types)

        @registry.hook("page", "footer")
        def page_footer(page):
            return "<p>footer</p>"

        registry.invoke(page, "footer")  # ["<p>footer</p>"]
    """

    def __init__(self, types: TypeHierarchy | None = None):
        self.types = types if types is not None else TypeHierarchy()
        self._hooks: dict[str, dict[str, list[HookFn]]] = {}

    def add_hook(self, owner_type: str, event_type: str, hook_fn: HookFn) -> None:
        """Append a callback for ``event_type`` on ``owner_type``.

        Callbacks fire in the order they were added. Adding the same
        function twice makes it fire twice.
        """
        self._hooks.setdefault(owner_type, {}).setdefault(event_type, []).append(hook_fn)

    register = add_hook

    def declare(self, owner_type: str, event_type: str) -> None:
        """Create an entry for ``event_type`` on ``owner_type`` without callbacks.

        The hierarchy walk stops at a type holding an entry, so declaring
        an event hides every ancestor callback for it.
        """
        self._hooks.setdefault(owner_type, {}).setdefault(event_type, [])

    def hook(self, owner_type: str, event_type: str) -> Callable[[HookFn], HookFn]:
        """Decorator to register a hook function.

        Usage:
            @registry.hook("page", "head")
            def page_head(page):
                ...
        """

        def decorator(fn: HookFn) -> HookFn:
            self.add_hook(owner_type, event_type, fn)
            return fn

        return decorator

    def invoke(self, source: HookCapable, event_type: str, *args: Any, **kwargs: Any) -> list[Any]:
        """Run every callback that applies to ``source`` for ``event_type``.

        Starting at ``source.hook_type``, each level contributes the
        results of its own callbacks. The walk stops at the root, or at
        the first level that has an entry for the event, even an empty
        one. Exceptions raised by a callback propagate unchanged and the
        remaining callbacks are skipped.

        Args:
            source: The invoking entity, passed as first argument to each callback
            event_type: The event to dispatch
            *args, **kwargs: Forwarded to each callback

        Returns:
            Callback results, most specific level first and in
            registration order within a level
        """
        results: list[Any] = []
        for owner_type in self.types.lineage(source.hook_type):
            callbacks = self._hooks.get(owner_type, {}).get(event_type)
            if callbacks is not None:
                results.extend(fn(source, *args, **kwargs) for fn in callbacks)
                break
            if owner_type == ROOT_TYPE:
                break
        return results

    def hooks_for(self, owner_type: str, event_type: str) -> tuple[HookFn, ...]:
        """Callbacks registered directly on ``owner_type`` (no walk)."""
        return tuple(self._hooks.get(owner_type, {}).get(event_type, ()))

    def has_entry(self, owner_type: str, event_type: str) -> bool:
        """Check if ``owner_type`` has an entry for ``event_type``, even an empty one."""
        return event_type in self._hooks.get(owner_type, {})

    def events_for(self, owner_type: str) -> list[str]:
        """List event types with an entry on ``owner_type``."""
        return sorted(self._hooks.get(owner_type, {}))

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        self._hooks.clear()
