"""Rule set assembly.

Drives build_rule() over every ordered marker combination, both delimiter
lengths and both quote styles, and wraps the result in the document shape
the grammar file expects::

    strings:
      patterns:
        - comment: multi single-quoted verbatim, interpolated, format, and template string
          ...

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from quoterules.config import GeneratorConfig
from quoterules.enums import QuoteStyle

from .combinations import marker_combinations
from .rules import RuleDescriptor, build_rule

__all__ = ["RuleSet", "build_rule_set"]

logger = logging.getLogger(__name__)

# Multi-line variants precede single-line ones: ''' must match before ''.
_VARIANTS: tuple[tuple[QuoteStyle, bool], ...] = (
    (QuoteStyle.SINGLE, True),
    (QuoteStyle.DOUBLE, True),
    (QuoteStyle.SINGLE, False),
    (QuoteStyle.DOUBLE, False),
)


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered, immutable collection of rule descriptors.

    Attributes:
        rules: Descriptors in match-priority order
    """

    rules: tuple[RuleDescriptor, ...]

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[RuleDescriptor]:
        return iter(self.rules)

    def __getitem__(self, index: int) -> RuleDescriptor:
        return self.rules[index]

    def to_document(self) -> dict[str, object]:
        """Wrap the rules as ``{"strings": {"patterns": [...]}}``."""
        return {"strings": {"patterns": [rule.to_mapping() for rule in self.rules]}}


def build_rule_set(config: GeneratorConfig | None = None) -> RuleSet:
    """Build every string-literal rule, most specific first.

    Args:
        config: Generator configuration (default: GeneratorConfig())

    Returns:
        RuleSet with four rules per marker combination
    """
    if config is None:
        config = GeneratorConfig()

    rules = [
        build_rule(quote, markers, multiline=multiline, config=config)
        for markers in marker_combinations(config.max_markers)
        for quote, multiline in _VARIANTS
    ]
    logger.debug("Assembled %d string rules", len(rules))
    return RuleSet(rules=tuple(rules))
