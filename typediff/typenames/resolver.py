"""Resolve the minimal visible difference between two type names.

The resolver powers "expected type X but got type Y" failure messages.  Both
names are cut down to the shortest suffix that still tells them apart, at every
level of generic nesting:

* both generic: the top-level names (arity marker included) are suffix-diffed
  and the arguments shared by both sides are resolved pairwise; arguments only
  one side has are fully shortened since there is nothing to diff them against;
* exactly one generic: each side is fully shortened on its own, the generic
  operand's internals are never diffed against a non-generic name;
* neither generic: the namespace paths are suffix-diffed directly.

Array rank suffixes are appended to each side after shortening.
"""

from __future__ import annotations

from typediff.telemetry.logger import get_logger

from .differ import diff_suffixes
from .parser import TypeNameParser, parse_type_name
from .reconstructor import fully_shorten, render
from .signature import TypeSignature

__all__ = [
    "TypeNameDifferenceResolver",
    "fully_shorten_type_name",
    "resolve_type_name_difference",
]

_LOGGER = get_logger("typediff.typenames.resolver")


class TypeNameDifferenceResolver:
    """Shorten pairs of type names for display.

    Raw strings go through ``parser`` (a default :class:`TypeNameParser` when
    omitted) and :class:`~typediff.typenames.parser.ParseError` propagates to the
    caller.  Once both sides are signatures resolution cannot fail.
    """

    def __init__(self, parser: TypeNameParser | None = None) -> None:
        self.parser = parser or TypeNameParser()

    def resolve(
        self, expected: str | TypeSignature, actual: str | TypeSignature
    ) -> tuple[str, str]:
        expected_sig = self._coerce(expected)
        actual_sig = self._coerce(actual)
        shortened = self.resolve_signatures(expected_sig, actual_sig)
        _LOGGER.debug("resolved %s / %s -> %s / %s", expected_sig, actual_sig, *shortened)
        return shortened

    def resolve_signatures(
        self, expected: TypeSignature, actual: TypeSignature
    ) -> tuple[str, str]:
        if expected.is_generic and actual.is_generic:
            return self._resolve_generic(expected, actual)
        if expected.is_generic or actual.is_generic:
            return fully_shorten(expected), fully_shorten(actual)
        expected_short, actual_short = diff_suffixes(expected.namespace_path, actual.namespace_path)
        return expected_short + expected.array_suffix, actual_short + actual.array_suffix

    def _resolve_generic(
        self, expected: TypeSignature, actual: TypeSignature
    ) -> tuple[str, str]:
        expected_name, actual_name = diff_suffixes(
            expected.qualified_segments, actual.qualified_segments
        )

        expected_args: list[str] = []
        actual_args: list[str] = []
        for expected_arg, actual_arg in zip(expected.type_arguments, actual.type_arguments):
            expected_short, actual_short = self.resolve_signatures(expected_arg, actual_arg)
            expected_args.append(expected_short)
            actual_args.append(actual_short)

        # Arguments without a counterpart on the other side.
        shared = len(expected_args)
        expected_args.extend(fully_shorten(arg) for arg in expected.type_arguments[shared:])
        actual_args.extend(fully_shorten(arg) for arg in actual.type_arguments[shared:])

        return (
            render(expected_name, expected_args) + expected.array_suffix,
            render(actual_name, actual_args) + actual.array_suffix,
        )

    def _coerce(self, value: str | TypeSignature) -> TypeSignature:
        if isinstance(value, TypeSignature):
            return value
        return self.parser.parse(value)


_DEFAULT_RESOLVER = TypeNameDifferenceResolver()


def resolve_type_name_difference(
    expected: str | TypeSignature, actual: str | TypeSignature
) -> tuple[str, str]:
    """Shorten ``expected`` and ``actual`` with the default resolver."""

    return _DEFAULT_RESOLVER.resolve(expected, actual)


def fully_shorten_type_name(raw: str) -> str:
    """Parse ``raw`` and reduce every nesting level to its bare name."""

    return fully_shorten(parse_type_name(raw))
