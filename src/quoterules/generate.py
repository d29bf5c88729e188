"""End-to-end grammar generation.

Builds the string rule set and renders it as grammar text. Performs no I/O;
pass the result to write_grammar() to store it.

Python 3.13+.
"""

from __future__ import annotations

import logging

from quoterules.config import GeneratorConfig
from quoterules.grammar import build_rule_set
from quoterules.writer import serialize

__all__ = ["generate_grammar"]

logger = logging.getLogger(__name__)


def generate_grammar(config: GeneratorConfig | None = None) -> str:
    """Render the complete string rule set as grammar text.

    Args:
        config: Generator configuration (default: GeneratorConfig())

    Returns:
        Block text rooted at ``strings: patterns:``

    Example:
        >>> text = generate_grammar()
        >>> text.splitlines()[:2]
        ['strings:', '  patterns:']
    """
    rule_set = build_rule_set(config)
    text = serialize(rule_set.to_document())
    logger.debug("Rendered %d rules into %d characters", len(rule_set), len(text))
    return text
