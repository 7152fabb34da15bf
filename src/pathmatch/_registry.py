"""Type registry for typed named parameters.

Maps lower-cased type tags (the ``int`` in ``:id:int``) to "can parse"
predicates. The built-in ParamType tags are pre-registered in
DEFAULT_REGISTRY; applications can add their own tags:

    builder = register_builtin_types(TypeRegistryBuilder())
    builder.param_type("slug", lambda text: text.isascii() and text.islower())
    registry = builder.build()

    matcher = PathMatcher(registry=registry)
    matcher.match("/posts/hello", "/posts/:slug:slug")

A tag that is not registered never matches; it is not a pattern error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from pathmatch._errors import InvalidTypeTagError
from pathmatch._param_types import ParamType

if TYPE_CHECKING:
    from collections.abc import Callable

type TypePredicate = Callable[[str], bool]


class TypeRegistryBuilder:
    """Builder for constructing a TypeRegistry.

    Register predicates under type tags, then call build() to produce an
    immutable TypeRegistry. Registering the same tag twice replaces the
    earlier predicate.
    """

    def __init__(self) -> None:
        self._predicates: dict[str, TypePredicate] = {}

    def param_type(self, tag: str, predicate: TypePredicate) -> TypeRegistryBuilder:
        """Register a predicate for a type tag (case-insensitive).

        Raises:
            InvalidTypeTagError: If the tag is empty or contains ``/`` or ``:``.
        """
        if not tag or "/" in tag or ":" in tag:
            raise InvalidTypeTagError(tag)
        self._predicates[tag.lower()] = predicate
        return self

    def build(self) -> TypeRegistry:
        """Freeze the registry. No further registration is possible."""
        return TypeRegistry(_predicates=MappingProxyType(dict(self._predicates)))


def register_builtin_types(builder: TypeRegistryBuilder) -> TypeRegistryBuilder:
    """Register every built-in ParamType on *builder*."""
    for param_type in ParamType:
        builder.param_type(param_type.value, param_type.accepts)
    return builder


@dataclass(frozen=True, slots=True)
class TypeRegistry:
    """Immutable mapping of type tags to predicates.

    Constructed via TypeRegistryBuilder.
    """

    _predicates: MappingProxyType[str, TypePredicate] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def accepts(self, tag: str, text: str) -> bool:
        """Return True if *text* is valid for the type registered as *tag*.

        Unknown tags never accept. A predicate raising ValueError or
        TypeError is read as "not valid".
        """
        predicate = self._predicates.get(tag.lower())
        if predicate is None:
            return False
        try:
            return bool(predicate(text))
        except (ValueError, TypeError):
            return False

    @property
    def type_count(self) -> int:
        """Number of registered type tags."""
        return len(self._predicates)

    def contains(self, tag: str) -> bool:
        """Check if a type tag is registered."""
        return tag.lower() in self._predicates

    def type_tags(self) -> list[str]:
        """Return all registered type tags (sorted)."""
        return sorted(self._predicates.keys())


DEFAULT_REGISTRY = register_builtin_types(TypeRegistryBuilder()).build()
