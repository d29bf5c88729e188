"""Render value trees as indented block text.

A deliberately small YAML-shaped writer for generated grammar files. It is
not a general YAML emitter: it covers exactly the shapes the rule generator
produces, with two layout rules a stock emitter does not offer:

- Values under numeric keys are written inline, so capture tables read
  ``1: {name: storage.type.string.hitori}``.
- Strings are quoted only when a YAML reader would otherwise misread them,
  keeping regex-heavy grammar rules legible.

Python 3.13+.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum

from quoterules.constants import INDENT_WIDTH, MAX_DEPTH
from quoterules.core.depth_guard import DepthGuard
from quoterules.diagnostics import CyclicValueError, ErrorTemplate, UnsupportedValueError

__all__ = [
    "BlockWriter",
    "ScalarStyle",
    "Value",
    "classify_scalar",
    "serialize",
]

# Recursive value tree accepted by the writer.
# Mapping keys must be str or int; int keys render via str().
type Value = (
    str
    | int
    | float
    | bool
    | None
    | Sequence["Value"]
    | Mapping[str | int, "Value"]
)


class ScalarStyle(StrEnum):
    """How a string scalar is written. Exactly one applies to any string."""

    BARE = "bare"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    LITERAL_BLOCK = "literal_block"


# Leading or trailing whitespace, or a trailing colon.
_EDGE_SPACE_OR_COLON = re.compile(r"^\s|[\s:]$")
# Structural YAML characters at the start.
_STRUCTURAL_LEAD = re.compile(r"^[-:|#']")
# YAML indicator characters at the start.
_INDICATOR_LEAD = re.compile(r"^[:\[\]{},&*#?|\-<>=!%@]")
# Control characters that need escapes, or a leading double quote.
_NEEDS_ESCAPES = re.compile(r'[\b\f\n\r\t]|^"')

_NUMERIC_KEY = re.compile(r"[0-9]+")

# Sequence entry marker; continuation lines align with the text after it.
_DASH = "- "

# Above this magnitude integral floats keep their exponent form.
_INTEGRAL_FLOAT_LIMIT = 1e21


def classify_scalar(text: str) -> ScalarStyle:
    """Pick the quoting strategy for a string.

    Checked in order: literal block (contains a newline), single quotes,
    double quotes, bare.

    Example:
        >>> classify_scalar("-dash")
        <ScalarStyle.SINGLE_QUOTED: 'single_quoted'>
        >>> classify_scalar("hello: world")
        <ScalarStyle.BARE: 'bare'>
    """
    if "\n" in text:
        return ScalarStyle.LITERAL_BLOCK
    # The empty string is quoted: bare, it would read back as null.
    if (
        not text
        or _EDGE_SPACE_OR_COLON.search(text)
        or _STRUCTURAL_LEAD.match(text)
        or _INDICATOR_LEAD.match(text)
    ):
        return ScalarStyle.SINGLE_QUOTED
    if _NEEDS_ESCAPES.search(text):
        return ScalarStyle.DOUBLE_QUOTED
    return ScalarStyle.BARE


def _format_float(value: float) -> str:
    if value.is_integer() and abs(value) < _INTEGRAL_FLOAT_LIMIT:
        return str(int(value))
    return repr(value)


@dataclass(slots=True)
class _RenderState:
    """Per-call traversal state: depth guard and containers being rendered."""

    guard: DepthGuard
    ancestors: set[int] = field(default_factory=set)


@dataclass(frozen=True, slots=True)
class BlockWriter:
    """Converts value trees to indented block text.

    Stateless and reusable: traversal state lives in the serialize() call.

    Attributes:
        max_depth: Deepest container nesting accepted (default: MAX_DEPTH)
        indent_width: Spaces per nesting level (default: 2)

    Usage:
        >>> writer = BlockWriter()
        >>> print(writer.serialize({"a": 1, "b": [1, 2, 3]}))
        a: 1
        b:
          - 1
          - 2
          - 3
    """

    max_depth: int = MAX_DEPTH
    indent_width: int = INDENT_WIDTH

    def __post_init__(self) -> None:
        """Validate layout parameters.

        Raises:
            ValueError: If max_depth or indent_width is not positive
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if self.indent_width <= 0:
            msg = "indent_width must be positive"
            raise ValueError(msg)

    def serialize(self, value: Value) -> str:
        """Render a value tree in block layout.

        Args:
            value: Mapping, sequence, string, number, boolean or None

        Returns:
            Rendered text without a trailing newline

        Raises:
            UnsupportedValueError: If the tree holds any other kind of value
            CyclicValueError: If a container contains itself
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        state = _RenderState(guard=DepthGuard(max_depth=self.max_depth))
        return self._render(value, inline=False, state=state, path="$")

    def indent(self, text: str) -> str:
        """Prefix every non-blank line with one indentation level."""
        prefix = " " * self.indent_width
        return "\n".join(prefix + line if line.strip() else line for line in text.split("\n"))

    def _render(self, value: object, *, inline: bool, state: _RenderState, path: str) -> str:
        """Dispatch on the closed value union."""
        match value:
            case str():
                return self._render_string(value)
            case bool():
                return "true" if value else "false"
            case int():
                return str(value)
            case float():
                return _format_float(value)
            case None:
                return "null"
            case Mapping():
                with self._entering(value, state, path):
                    if inline:
                        return self._render_mapping_inline(value, state, path)
                    return self._render_mapping_block(value, state, path)
            case list() | tuple():
                with self._entering(value, state, path):
                    if inline:
                        return self._render_sequence_inline(value, state, path)
                    return self._render_sequence_block(value, state, path)
            case _:
                raise UnsupportedValueError(
                    ErrorTemplate.unsupported_value(type(value).__name__, path)
                )

    @contextmanager
    def _entering(self, container: object, state: _RenderState, path: str) -> Iterator[None]:
        """Guard depth and cycles while a container is being rendered."""
        key = id(container)
        if key in state.ancestors:
            raise CyclicValueError(ErrorTemplate.cyclic_value(type(container).__name__, path))
        with state.guard:
            state.ancestors.add(key)
            try:
                yield
            finally:
                state.ancestors.discard(key)

    def _render_key(self, key: object, path: str) -> str:
        if isinstance(key, str):
            return key
        if isinstance(key, int) and not isinstance(key, bool):
            return str(key)
        raise UnsupportedValueError(
            ErrorTemplate.unsupported_value(f"{type(key).__name__} key", path)
        )

    def _render_string(self, text: str) -> str:
        match classify_scalar(text):
            case ScalarStyle.LITERAL_BLOCK:
                return "|\n" + self.indent(text)
            case ScalarStyle.SINGLE_QUOTED:
                return "'" + text.replace("'", "''") + "'"
            case ScalarStyle.DOUBLE_QUOTED:
                return json.dumps(text, ensure_ascii=False)
            case ScalarStyle.BARE:
                return text

    def _render_sequence_inline(
        self, items: Sequence[object], state: _RenderState, path: str
    ) -> str:
        parts = [
            self._render(item, inline=True, state=state, path=f"{path}[{index}]")
            for index, item in enumerate(items)
        ]
        return "[" + ", ".join(parts) + "]"

    def _render_sequence_block(
        self, items: Sequence[object], state: _RenderState, path: str
    ) -> str:
        if not items:
            return "[]"

        if not any(isinstance(item, Mapping | list | tuple) for item in items):
            return "\n".join(
                _DASH + self._render(item, inline=True, state=state, path=f"{path}[{index}]")
                for index, item in enumerate(items)
            )

        continuation = "\n" + " " * len(_DASH)
        return "\n".join(
            _DASH
            + self._render(item, inline=False, state=state, path=f"{path}[{index}]").replace(
                "\n", continuation
            )
            for index, item in enumerate(items)
        )

    def _render_mapping_inline(
        self, mapping: Mapping[object, object], state: _RenderState, path: str
    ) -> str:
        parts: list[str] = []
        for key, child in mapping.items():
            name = self._render_key(key, path)
            rendered = self._render(child, inline=True, state=state, path=f"{path}.{name}")
            parts.append(f"{name}: {rendered}")
        return "{" + ", ".join(parts) + "}"

    def _render_mapping_block(
        self, mapping: Mapping[object, object], state: _RenderState, path: str
    ) -> str:
        if not mapping:
            return "{}"

        entries: list[str] = []
        for key, child in mapping.items():
            name = self._render_key(key, path)
            # Numeric keys keep their value on the key's line, whatever its shape.
            numeric = _NUMERIC_KEY.fullmatch(name) is not None
            rendered = self._render(child, inline=numeric, state=state, path=f"{path}.{name}")
            nested = isinstance(child, list | tuple) or (isinstance(child, Mapping) and bool(child))
            if not numeric and (nested or "\n" in rendered):
                entries.append(f"{name}:\n{self.indent(rendered)}")
            else:
                entries.append(f"{name}: {rendered}")
        return "\n".join(entries)


def serialize(value: Value, *, max_depth: int = MAX_DEPTH) -> str:
    """Render a value tree in block layout.

    Convenience function for BlockWriter.serialize().

    Args:
        value: Mapping, sequence, string, number, boolean or None
        max_depth: Deepest container nesting accepted

    Returns:
        Rendered text without a trailing newline

    Raises:
        SerializationError: If the tree is outside the writer's domain

    Example:
        >>> serialize({"strings": {"patterns": []}})
        'strings:\\n  patterns:\\n    []'
    """
    return BlockWriter(max_depth=max_depth).serialize(value)
