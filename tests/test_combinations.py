"""Tests for marker subset enumeration, ordering and regex escaping."""

from __future__ import annotations

import re

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from quoterules.enums import Marker
from quoterules.grammar.combinations import (
    escape_regex,
    marker_combinations,
    order_combinations,
    power_set,
)

E, I, F, T = Marker.ESCAPE, Marker.INTERPOLATED, Marker.FORMAT, Marker.TEMPLATE


class TestPowerSet:
    """Binary-mask subset enumeration."""

    def test_four_symbols_give_sixteen_subsets(self) -> None:
        """2**4 subsets, empty and full exactly once."""
        subsets = power_set("abcd")

        assert len(subsets) == 16
        assert len(set(subsets)) == 16
        assert subsets.count(()) == 1
        assert subsets.count(("a", "b", "c", "d")) == 1

    def test_mask_order(self) -> None:
        """Subset k holds the symbols whose index bit is set in k."""
        assert power_set("abc") == [
            (),
            ("a",),
            ("b",),
            ("a", "b"),
            ("c",),
            ("a", "c"),
            ("b", "c"),
            ("a", "b", "c"),
        ]

    def test_max_len(self) -> None:
        """Subsets longer than max_len are dropped."""
        assert power_set([1, 2, 3], max_len=1) == [(), (1,), (2,), (3,)]

    def test_max_len_zero(self) -> None:
        """max_len=0 leaves only the empty subset."""
        assert power_set("ab", max_len=0) == [()]

    def test_empty_input(self) -> None:
        """The empty sequence has exactly one subset."""
        assert power_set("") == [()]

    def test_negative_max_len(self) -> None:
        """Negative caps are rejected."""
        with pytest.raises(ValueError, match="max_len"):
            power_set("ab", max_len=-1)

    @given(symbols=st.lists(st.integers(), unique=True, max_size=6))
    def test_relative_order_preserved(self, symbols: list[int]) -> None:
        """PROPERTY: each subset lists symbols in input order."""
        event(f"size={len(symbols)}")
        position = {symbol: index for index, symbol in enumerate(symbols)}

        for subset in power_set(symbols):
            indexes = [position[symbol] for symbol in subset]
            assert indexes == sorted(indexes)


class TestOrderCombinations:
    """Stable descending-length sort."""

    def test_longest_first_ties_stable(self) -> None:
        """Equal lengths keep enumeration order."""
        assert order_combinations(power_set("abc")) == [
            ("a", "b", "c"),
            ("a", "b"),
            ("a", "c"),
            ("b", "c"),
            ("a",),
            ("b",),
            ("c",),
            (),
        ]

    @given(symbols=st.lists(st.integers(), unique=True, max_size=6))
    def test_descending_length(self, symbols: list[int]) -> None:
        """PROPERTY: a longer subset never follows a shorter one."""
        ordered = order_combinations(power_set(symbols))
        lengths = [len(subset) for subset in ordered]

        assert lengths == sorted(lengths, reverse=True)


class TestMarkerCombinations:
    """Combinations of the four markers."""

    def test_full_order(self) -> None:
        """Canonical marker order, longest combinations first."""
        assert marker_combinations() == (
            (E, I, F, T),
            (E, I, F),
            (E, I, T),
            (E, F, T),
            (I, F, T),
            (E, I),
            (E, F),
            (I, F),
            (E, T),
            (I, T),
            (F, T),
            (E,),
            (I,),
            (F,),
            (T,),
            (),
        )

    def test_capped(self) -> None:
        """max_len limits the combination size."""
        assert marker_combinations(1) == ((E,), (I,), (F,), (T,), ())


class TestEscapeRegex:
    """Regex metacharacter escaping."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("$$", r"\$\$"),
            ("\\", "\\\\"),
            ("a-b/c", r"a\-b\/c"),
            ("[x]{1}", r"\[x\]\{1\}"),
            ("^.*+?()|", r"\^\.\*\+\?\(\)\|"),
            ("%%", "%%"),
            ("##", "##"),
            ("''", "''"),
        ],
    )
    def test_escape(self, text: str, expected: str) -> None:
        """Metacharacters gain a backslash; others are untouched."""
        assert escape_regex(text) == expected

    @given(text=st.text(max_size=20))
    def test_escaped_text_matches_itself(self, text: str) -> None:
        """PROPERTY: the escaped pattern matches the literal text exactly."""
        assert re.fullmatch(escape_regex(text), text, flags=re.DOTALL) is not None
