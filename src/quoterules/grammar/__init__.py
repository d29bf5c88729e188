"""String-literal grammar rule generation.

Enumerates marker combinations and builds one rule descriptor per
(quote style, delimiter length, marker subset) triple.

Python 3.13+.
"""

from .assembler import RuleSet, build_rule_set
from .combinations import escape_regex, marker_combinations, order_combinations, power_set
from .rules import RuleDescriptor, build_rule, normalize_markers

__all__ = [
    "RuleDescriptor",
    "RuleSet",
    "build_rule",
    "build_rule_set",
    "escape_regex",
    "marker_combinations",
    "normalize_markers",
    "order_combinations",
    "power_set",
]
