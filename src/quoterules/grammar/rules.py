"""Rule descriptors for quoted string literals.

One descriptor describes one concrete string-literal variant: a quote
character, single- or multi-line delimiters, and the subset of markers whose
prefix characters may precede the opening quote. For example, with the
escape and format markers active the descriptor matches::

    \\%'value: %d'
    %\\"path: \\n"

Descriptors are built by pure functions. All intermediate accumulators are
local to build_rule(); the returned dataclass is frozen.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from quoterules.config import GeneratorConfig
from quoterules.constants import STRING_ESCAPES_INCLUDE
from quoterules.core.babel_compat import format_natural_list
from quoterules.enums import Marker, QuoteStyle

from .combinations import escape_regex

__all__ = [
    "FLAG_GROUP",
    "DELIMITER_GROUP",
    "RuleDescriptor",
    "build_rule",
    "normalize_markers",
]

logger = logging.getLogger(__name__)

# Capture group numbers in the begin pattern.
FLAG_GROUP: int = 1
DELIMITER_GROUP: int = 2

_CANONICAL_INDEX: dict[Marker, int] = {marker: index for index, marker in enumerate(Marker)}


@dataclass(frozen=True, slots=True)
class RuleDescriptor:
    """Grammar rule for one string-literal variant.

    Attributes:
        description: Human-readable variant name, e.g.
            "multi single-quoted verbatim and format string"
        begin: Regex matching optional flag prefix and opening delimiter
        content_name: Scope of the text between the delimiters
        end: Regex matching the closing delimiter (same run as the opening)
        captures: (group number, scope) pairs for the begin/end groups
        patterns: Nested rule references, in canonical marker order
        escape_pattern: Alternation of doubled marker tokens that the escape
            rule recognizes as literal characters; empty unless the escape
            marker is active alongside another marker
        escape_scope: Scope of the escape rule's matches
        quote: Quote style the rule was built for
        multiline: Whether delimiters are tripled
        markers: Active markers, in canonical order
    """

    description: str
    begin: str
    content_name: str
    end: str
    captures: tuple[tuple[int, str], ...]
    patterns: tuple[str, ...]
    escape_pattern: str
    escape_scope: str
    quote: QuoteStyle
    multiline: bool
    markers: tuple[Marker, ...]

    @property
    def flag_prefix(self) -> str:
        """Flag-prefix expression inside the first begin group."""
        return _flag_prefix(self.markers)

    @property
    def escape_rule(self) -> dict[str, str]:
        """Match rule for doubled marker characters."""
        return {"match": self.escape_pattern, "name": self.escape_scope}

    def to_mapping(self) -> dict[str, object]:
        """Serializable mapping in grammar key order.

        Keys: comment, begin, contentName, end, captures, patterns.
        Capture keys are numeric strings so the writer renders each
        capture inline (``1: {name: ...}``).
        """
        return {
            "comment": self.description,
            "begin": self.begin,
            "contentName": self.content_name,
            "end": self.end,
            "captures": {str(group): {"name": scope} for group, scope in self.captures},
            "patterns": [{"include": reference} for reference in self.patterns],
        }


def normalize_markers(markers: Iterable[Marker | str]) -> tuple[Marker, ...]:
    """Resolve markers and order them canonically.

    Accepts Marker members or their prefix symbols, so a flag string such as
    ``"%\\\\"`` is equivalent to ``(Marker.ESCAPE, Marker.FORMAT)``.

    Raises:
        ValueError: On unknown symbols or duplicate markers
    """
    resolved: list[Marker] = []
    for item in markers:
        marker = item if isinstance(item, Marker) else Marker.from_symbol(item)
        if marker in resolved:
            msg = f"Duplicate marker {marker.symbol!r}"
            raise ValueError(msg)
        resolved.append(marker)
    return tuple(sorted(resolved, key=_CANONICAL_INDEX.__getitem__))


def _flag_prefix(markers: tuple[Marker, ...]) -> str:
    """Regex for the flag characters allowed before the opening quote."""
    match len(markers):
        case 0:
            return ""
        case 1:
            return escape_regex(markers[0].symbol)
        case _:
            return "[" + "".join(escape_regex(marker.symbol) for marker in markers) + "]+"


def _describe(names: list[str], quote: QuoteStyle, multiline: bool, locale: str) -> str:
    """Build "multi double-quoted verbatim and format string" style text."""
    match len(names):
        case 0:
            features = "plain"
        case 1:
            features = names[0]
        case _:
            features = format_natural_list(names, locale)
    multi = "multi" if multiline else ""
    text = f"{multi} {quote.label}-quoted {features} string"
    return " ".join(text.split())


def build_rule(
    quote: QuoteStyle | str,
    markers: Iterable[Marker | str] = (),
    *,
    multiline: bool = False,
    config: GeneratorConfig | None = None,
) -> RuleDescriptor:
    """Build the rule descriptor for one string-literal variant.

    Args:
        quote: Quote style or raw quote character (' or ")
        markers: Active markers (members or prefix symbols), any order
        multiline: Use tripled (or longer) delimiters
        config: Scope suffix and description locale (default: GeneratorConfig())

    Returns:
        Fully populated RuleDescriptor

    Raises:
        ValueError: On an unknown quote character or invalid markers

    Example:
        >>> rule = build_rule("'")
        >>> rule.description
        'single-quoted plain string'
        >>> print(rule.begin)
        \\s*()(')\\s*
    """
    if config is None:
        config = GeneratorConfig()
    style = QuoteStyle.coerce(quote)
    active = normalize_markers(markers)
    suffix = config.scope_suffix

    delimiter = style.value * 3 + "+" if multiline else style.value

    escape_tokens: list[str] = []
    if Marker.ESCAPE in active:
        escape_tokens = [
            marker.doubled_token(style) for marker in active if marker is not Marker.ESCAPE
        ]
    escape_pattern = "|".join(escape_regex(token) for token in escape_tokens)

    # Quotes and backslashes can always be escaped; the shared rule is
    # listed once, at the escape marker's position when that marker is active.
    patterns: list[str] = [] if Marker.ESCAPE in active else [STRING_ESCAPES_INCLUDE]
    names: list[str] = []
    for marker in active:
        patterns.append(marker.include)
        names.append(marker.display_name)

    captures: list[tuple[int, str]] = []
    if active:
        captures.append((FLAG_GROUP, f"storage.type.string.{suffix}"))
    captures.append((DELIMITER_GROUP, f"punctuation.definition.string.{suffix}"))

    rule = RuleDescriptor(
        description=_describe(names, style, multiline, config.locale),
        begin=rf"\s*({_flag_prefix(active)})({delimiter})\s*",
        content_name=f"string.quoted.{style.label}.{suffix}",
        end=rf"\s*((\2)(?!{style.value}+))",
        captures=tuple(captures),
        patterns=tuple(patterns),
        escape_pattern=escape_pattern,
        escape_scope=f"constant.character.escape.{suffix}",
        quote=style,
        multiline=multiline,
        markers=active,
    )
    logger.debug("Built rule %r", rule.description)
    return rule
