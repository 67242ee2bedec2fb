"""Structured form of a fully-qualified runtime type name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .reconstructor import render_signature

__all__ = ["ARITY_MARKER", "TypeSignature"]

ARITY_MARKER = "`"


@dataclass(slots=True, frozen=True)
class TypeSignature:
    """Parsed type name such as ``System.Collections.Generic.List`1[System.Int32]``.

    ``namespace_path`` holds the dotted segments outermost first and never carries
    the arity marker or any bracket; those live in ``generic_arity`` and
    ``type_arguments``.  Nested-type separators (``+``) stay inside a segment.
    ``array_suffix`` keeps trailing rank specifiers like ``[]`` or ``[,]``.
    ``nested_suffix`` holds the ``+Inner`` part of a type nested in a generic
    (``List`1+Enumerator[T]``), which the runtime writes after the arity marker.

    Build instances through :mod:`typediff.typenames.parser`, which enforces the
    structural invariants the resolver relies on.
    """

    namespace_path: tuple[str, ...]
    generic_arity: int = 0
    type_arguments: tuple[TypeSignature, ...] = ()
    array_suffix: str = ""
    nested_suffix: str = ""

    @property
    def is_generic(self) -> bool:
        return self.generic_arity > 0

    @property
    def name(self) -> str:
        """Bare name: the last namespace segment."""

        return self.namespace_path[-1]

    @property
    def display_name(self) -> str:
        """Bare name plus the arity marker for generic types (``List`1``).

        A nested type keeps its declaring generic: ``List`1+Enumerator``.
        """

        if self.is_generic:
            return f"{self.name}{ARITY_MARKER}{self.generic_arity}{self.nested_suffix}"
        return self.name

    @property
    def qualified_segments(self) -> tuple[str, ...]:
        """Namespace path whose final segment carries the arity marker."""

        return self.namespace_path[:-1] + (self.display_name,)

    @property
    def depth(self) -> int:
        """Generic nesting depth, 0 for a type without arguments."""

        if not self.type_arguments:
            return 0
        return 1 + max(argument.depth for argument in self.type_arguments)

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace_path": list(self.namespace_path),
            "generic_arity": self.generic_arity,
            "type_arguments": [argument.to_dict() for argument in self.type_arguments],
            "array_suffix": self.array_suffix,
            "nested_suffix": self.nested_suffix,
        }

    def __str__(self) -> str:
        return render_signature(self)
