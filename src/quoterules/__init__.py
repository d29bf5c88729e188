"""quoterules - string-literal grammar rule generator.

Generates one grammar rule for every variant of a quoted string literal:
single or double quotes, single- or multi-line delimiters, and every
combination of four optional prefix markers (escape sequences, dollar
interpolation, percent format fields, hash template fields). The rule set is
rendered as YAML-shaped block text by a small purpose-built writer.

Public API:
    generate_grammar - Build and render the full rule set
    build_rule - Rule descriptor for one variant
    build_rule_set - Every rule descriptor, most specific first
    serialize_value - Render a value tree as block text
    write_grammar - Replace a grammar file with rendered text
    GeneratorConfig - Scope suffix, description locale, combination size

Exceptions:
    QuoteRulesError - Base exception class
    SerializationError - Value tree outside the writer's domain
    GrammarWriteError - Output file could not be written

Submodules:
    quoterules.grammar - Marker combinations and rule descriptors
    quoterules.writer - Block text writer
    quoterules.diagnostics - Error types and diagnostic formatting
"""

from .config import GeneratorConfig
from .diagnostics import (
    CyclicValueError,
    DepthLimitExceededError,
    GrammarWriteError,
    LocaleNotSupportedError,
    QuoteRulesError,
    SerializationError,
    UnsupportedValueError,
)
from .emit import write_grammar
from .enums import Marker, QuoteStyle
from .generate import generate_grammar
from .grammar import RuleDescriptor, RuleSet, build_rule, build_rule_set
from .writer import serialize as serialize_value

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("quoterules")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CyclicValueError",
    "DepthLimitExceededError",
    "GeneratorConfig",
    "GrammarWriteError",
    "LocaleNotSupportedError",
    "Marker",
    "QuoteRulesError",
    "QuoteStyle",
    "RuleDescriptor",
    "RuleSet",
    "SerializationError",
    "UnsupportedValueError",
    "__version__",
    "build_rule",
    "build_rule_set",
    "generate_grammar",
    "serialize_value",
    "write_grammar",
]
