"""Render type signatures back into display text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .signature import TypeSignature

__all__ = ["fully_shorten", "render", "render_signature"]


def render(name: str, args: Sequence[str]) -> str:
    """Join ``name`` with its rendered generic arguments.

    ``render("Dictionary`2", ["String", "Int32"])`` gives
    ``"Dictionary`2[String,Int32]"``; an empty ``args`` returns ``name`` as is.
    """

    if not args:
        return name
    return name + "[" + ",".join(args) + "]"


def render_signature(signature: TypeSignature) -> str:
    """Return the full, unshortened name ``signature`` was parsed from."""

    name = ".".join(signature.qualified_segments)
    args = [render_signature(argument) for argument in signature.type_arguments]
    return render(name, args) + signature.array_suffix


def fully_shorten(signature: TypeSignature) -> str:
    """Reduce every nesting level of ``signature`` to its bare name."""

    args = [fully_shorten(argument) for argument in signature.type_arguments]
    return render(signature.display_name, args) + signature.array_suffix
