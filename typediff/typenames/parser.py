"""Parser for fully-qualified runtime type names.

Names follow the convention ``Namespace.Outer+Inner`N[Arg1,Arg2,...]``: dotted
namespace segments, a backtick followed by the generic arity, and a bracketed,
comma-separated argument list whose entries may themselves be generic.  Array
types carry trailing rank specifiers (``System.Int32[]``, ``Grid`1[Cell][,]``).
Types nested inside a generic keep the arguments of their declaring type,
as in ``List`1+Enumerator[System.Int32]``.

The parser descends over bracket depth instead of splitting on commas, so an
argument such as ``Outer`1[Inner`2[A,B]]`` stays a single token at its level.
Every position reported in a :class:`ParseError` is an offset into the original
string, including errors raised while parsing a nested argument.
"""

from __future__ import annotations

import logging
import re

from typediff.telemetry.logger import get_logger

from .signature import ARITY_MARKER, TypeSignature

__all__ = ["DEFAULT_MAX_DEPTH", "ParseError", "TypeNameParser", "parse_type_name"]

_LOGGER = get_logger("typediff.typenames.parser")

DEFAULT_MAX_DEPTH = 64

_ARITY_PATTERN = re.compile(re.escape(ARITY_MARKER) + r"(\d+)")
_RANK_PATTERN = re.compile(r"\[[,*]*\]")
_NESTED_PATTERN = re.compile(r"(?:\+[^\[\]`,.+\s]+)+")
_RESERVED = frozenset(ARITY_MARKER + "[],")


class ParseError(RuntimeError):
    """Raised when a type name cannot be turned into a :class:`TypeSignature`."""

    def __init__(self, message: str, source: str, position: int = 0) -> None:
        super().__init__(f"{message} (column {position + 1} of {source!r})")
        self.message = message
        self.source = source
        self.position = position


class TypeNameParser:
    """Recursive-descent parser producing :class:`TypeSignature` trees.

    ``max_depth`` caps generic nesting so hostile input cannot exhaust the
    interpreter's recursion limit.
    """

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    def parse(self, raw: str) -> TypeSignature:
        if not isinstance(raw, str):
            raise TypeError(f"type name must be a string, not {type(raw).__name__}")
        _check_balanced(raw)
        signature = self._parse_span(raw, 0, len(raw), depth=0)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("parsed %r (nesting depth %d)", raw, signature.depth)
        return signature

    def _parse_span(self, source: str, start: int, end: int, *, depth: int) -> TypeSignature:
        if depth > self.max_depth:
            raise ParseError(f"generic nesting exceeds {self.max_depth} levels", source, start)
        start, end = _trim(source, start, end)
        if start == end:
            raise ParseError("empty type name", source, start)

        marker = _ARITY_PATTERN.search(source, start, end)
        if marker is None:
            path_end = source.find("[", start, end)
            if path_end == -1:
                path_end = end
            return TypeSignature(
                namespace_path=_split_path(source, start, path_end),
                array_suffix=_array_suffix(source, path_end, end),
            )

        arity = int(marker.group(1))
        path = _split_path(source, start, marker.start())
        open_index = marker.end()
        if arity == 0:
            return self._parse_zero_arity(source, path, open_index, end)

        nested = _NESTED_PATTERN.match(source, open_index, end)
        nested_suffix = nested.group(0) if nested else ""
        open_index += len(nested_suffix)
        if open_index == end:
            raise ParseError(
                f"declared arity {arity} but found 0 type argument(s)", source, open_index
            )
        if source[open_index] != "[":
            raise ParseError("expected '[' after generic arity", source, open_index)
        close_index = _matching_bracket(source, open_index, end)

        spans = _split_arguments(source, open_index + 1, close_index)
        if len(spans) != arity:
            raise ParseError(
                f"declared arity {arity} but found {len(spans)} type argument(s)",
                source,
                open_index,
            )
        arguments = tuple(
            self._parse_span(source, token_start, token_end, depth=depth + 1)
            for token_start, token_end in spans
        )
        return TypeSignature(
            namespace_path=path,
            generic_arity=arity,
            type_arguments=arguments,
            array_suffix=_array_suffix(source, close_index + 1, end),
            nested_suffix=nested_suffix,
        )

    def _parse_zero_arity(
        self, source: str, path: tuple[str, ...], index: int, end: int
    ) -> TypeSignature:
        # ``Name`0`` and ``Name`0[]`` declare no arguments and read as plain names.
        if index < end and source[index] == "[":
            close_index = _matching_bracket(source, index, end)
            found = len(_split_arguments(source, index + 1, close_index))
            if found:
                raise ParseError(
                    f"declared arity 0 but found {found} type argument(s)", source, index
                )
            index = close_index + 1
        return TypeSignature(namespace_path=path, array_suffix=_array_suffix(source, index, end))


_DEFAULT_PARSER = TypeNameParser()


def parse_type_name(raw: str) -> TypeSignature:
    """Parse ``raw`` with a parser using the default nesting limit."""

    return _DEFAULT_PARSER.parse(raw)


# ---------------------------------------------------------------------------
# Scanning helpers


def _check_balanced(source: str) -> None:
    open_positions: list[int] = []
    for index, ch in enumerate(source):
        if ch == "[":
            open_positions.append(index)
        elif ch == "]":
            if not open_positions:
                raise ParseError("unmatched ']'", source, index)
            open_positions.pop()
    if open_positions:
        raise ParseError("unclosed '['", source, open_positions[-1])


def _trim(source: str, start: int, end: int) -> tuple[int, int]:
    while start < end and source[start].isspace():
        start += 1
    while end > start and source[end - 1].isspace():
        end -= 1
    return start, end


def _matching_bracket(source: str, open_index: int, end: int) -> int:
    depth = 0
    for index in range(open_index, end):
        ch = source[index]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return index
    raise ParseError("unclosed '['", source, open_index)


def _split_arguments(source: str, start: int, end: int) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of the comma-separated tokens at depth zero."""

    if not source[start:end].strip():
        return []
    spans: list[tuple[int, int]] = []
    depth = 0
    token_start = start
    for index in range(start, end):
        ch = source[index]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == "," and depth == 0:
            spans.append((token_start, index))
            token_start = index + 1
    spans.append((token_start, end))
    return spans


def _split_path(source: str, start: int, end: int) -> tuple[str, ...]:
    segments = source[start:end].split(".")
    offset = start
    for segment in segments:
        if not segment:
            raise ParseError("empty namespace segment", source, offset)
        for position, ch in enumerate(segment):
            if ch in _RESERVED:
                raise ParseError(f"unexpected {ch!r} in type name", source, offset + position)
        offset += len(segment) + 1
    return tuple(segments)


def _array_suffix(source: str, start: int, end: int) -> str:
    index = start
    while index < end:
        match = _RANK_PATTERN.match(source, index, end)
        if match is None:
            raise ParseError("unexpected text after type name", source, index)
        index = match.end()
    return source[start:end]
