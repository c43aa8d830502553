"""Hook system types for wikiforge.

Owner types form an explicit single-rooted hierarchy: every type id maps
to at most one parent, and every chain ends at ROOT_TYPE. The hook walk
climbs this map instead of inspecting Python classes.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wikiforge.hooks.registry import HookRegistry

ROOT_TYPE = "object"

# Hook function signature: (source, *args, **kwargs) -> fragment
HookFn = Callable[..., Any]


class TypeHierarchy:
    """Parent map for owner types.

    Example:
        types = TypeHierarchy()
        types.define("resource")
        types.define("page", parent="resource")
        list(types.lineage("page"))  # ["page", "resource", "object"]
    """

    def __init__(self) -> None:
        self._parents: dict[str, str] = {}

    def define(self, type_id: str, parent: str = ROOT_TYPE) -> None:
        """Declare ``type_id`` as a child of ``parent``.

        Idempotent for the same parent.

        Raises:
            ValueError: If the type is the root, already has a different
                parent, or the new edge would close a cycle
        """
        if type_id == ROOT_TYPE:
            raise ValueError(f"'{ROOT_TYPE}' is the root type and has no parent")

        existing = self._parents.get(type_id)
        if existing is not None:
            if existing != parent:
                raise ValueError(
                    f"Type '{type_id}' already has parent '{existing}', "
                    f"cannot redefine it with parent '{parent}'"
                )
            return

        if type_id in self.lineage(parent):
            raise ValueError(f"Defining '{type_id}' under '{parent}' creates a cycle")

        self._parents[type_id] = parent

    def parent_of(self, type_id: str) -> str | None:
        """Parent type id, or None for the root and for unknown types."""
        return self._parents.get(type_id)

    def is_defined(self, type_id: str) -> bool:
        return type_id == ROOT_TYPE or type_id in self._parents

    def lineage(self, type_id: str) -> Iterator[str]:
        """Yield ``type_id`` and its ancestors, most specific first.

        An unknown type, or a chain ending at an undefined parent, stops
        there as if it had reached the root.
        """
        current: str | None = type_id
        while current is not None:
            yield current
            if current == ROOT_TYPE:
                return
            current = self._parents.get(current)

    def list_types(self) -> list[str]:
        return sorted(self._parents)


@runtime_checkable
class HookCapable(Protocol):
    """An entity that can invoke hooks.

    Attributes:
        hook_registry: Registry holding the callbacks
        hook_type: Runtime owner type where the hierarchy walk starts
    """

    hook_registry: "HookRegistry"
    hook_type: str
