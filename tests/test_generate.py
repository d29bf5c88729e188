"""End-to-end tests for grammar generation."""

from __future__ import annotations

from quoterules import generate_grammar
from quoterules.config import GeneratorConfig

FIRST_RULE = r"""strings:
  patterns:
    - comment: multi single-quoted verbatim, interpolated, format, and template string
      begin: \s*([\\\$%#]+)('''+)\s*
      contentName: string.quoted.single.hitori
      end: \s*((\2)(?!'+))
      captures:
        1: {name: storage.type.string.hitori}
        2: {name: punctuation.definition.string.hitori}
      patterns:
        - include: '#string-escapes'
        - include: '#embedded-expression'
        - include: '#embedded-format'
        - include: '#embedded-placeholder'
    - comment: multi double-quoted verbatim, interpolated, format, and template string
"""

LAST_RULE = r"""    - comment: double-quoted plain string
      begin: \s*()(")\s*
      contentName: string.quoted.double.hitori
      end: \s*((\2)(?!"+))
      captures:
        2: {name: punctuation.definition.string.hitori}
      patterns:
        - include: '#string-escapes'"""


class TestGenerateGrammar:
    """Rendered grammar text."""

    def test_head(self) -> None:
        """The most specific rule opens the document."""
        assert generate_grammar().startswith(FIRST_RULE)

    def test_tail(self) -> None:
        """The plain double-quoted rule closes it, without a trailing newline."""
        assert generate_grammar().endswith(LAST_RULE)

    def test_rule_count(self) -> None:
        """One '- comment:' entry per rule."""
        text = generate_grammar()

        assert text.count("\n    - comment: ") == 64

    def test_byte_identical_across_runs(self) -> None:
        """Generation is deterministic."""
        assert generate_grammar() == generate_grammar()

    def test_config(self) -> None:
        """Configuration reaches the rendered text."""
        text = generate_grammar(GeneratorConfig(scope_suffix="toy", max_markers=0))

        assert text.count("- comment: ") == 4
        assert "hitori" not in text
        assert "contentName: string.quoted.double.toy" in text
