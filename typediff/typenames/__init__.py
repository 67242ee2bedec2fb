"""Public entry points for type-name parsing and difference resolution."""

from typediff.typenames.differ import diff_suffixes, shorten_type_names
from typediff.typenames.parser import (
    DEFAULT_MAX_DEPTH,
    ParseError,
    TypeNameParser,
    parse_type_name,
)
from typediff.typenames.reconstructor import fully_shorten, render, render_signature
from typediff.typenames.resolver import (
    TypeNameDifferenceResolver,
    fully_shorten_type_name,
    resolve_type_name_difference,
)
from typediff.typenames.signature import ARITY_MARKER, TypeSignature

__all__ = [
    "ARITY_MARKER",
    "DEFAULT_MAX_DEPTH",
    "ParseError",
    "TypeNameDifferenceResolver",
    "TypeNameParser",
    "TypeSignature",
    "diff_suffixes",
    "fully_shorten",
    "fully_shorten_type_name",
    "parse_type_name",
    "render",
    "render_signature",
    "resolve_type_name_difference",
    "shorten_type_names",
]
