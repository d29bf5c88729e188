"""Hypothesis strategies for value trees and grammar inputs.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - marker_subsets: emits subset_size={n}
    - value_trees: emits tree_root={type}
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st

from quoterules.enums import Marker, QuoteStyle

# Characters that never trigger quoting anywhere in a string.
BARE_FIRST_CHARS = string.ascii_letters + string.digits + "_.(/\\$"
BARE_REST_CHARS = BARE_FIRST_CHARS + " :,#'\"-"
BARE_LAST_CHARS = BARE_FIRST_CHARS + ",#'\"-"

# Leading characters that always force single quotes.
SINGLE_QUOTE_LEAD_CHARS = "-:|#'[]{},&*?<>=!%@"


quote_styles = st.sampled_from(list(QuoteStyle))
quote_chars = st.sampled_from(["'", '"'])


@st.composite
def marker_subsets(draw: st.DrawFn) -> tuple[Marker, ...]:
    """Any subset of markers, in arbitrary (not canonical) order."""
    subset = draw(st.lists(st.sampled_from(list(Marker)), unique=True, max_size=4))
    event(f"subset_size={len(subset)}")
    return tuple(subset)


@st.composite
def bare_text(draw: st.DrawFn) -> str:
    """Strings the writer emits unquoted."""
    first = draw(st.sampled_from(BARE_FIRST_CHARS))
    middle = draw(st.text(alphabet=BARE_REST_CHARS, max_size=20))
    if not middle:
        return first
    last = draw(st.sampled_from(BARE_LAST_CHARS))
    return first + middle + last


single_line_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n"),
    max_size=30,
)

scalar_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(10**6), max_value=10**6),
    st.floats(allow_nan=False, allow_infinity=False, width=32),
    bare_text(),
    single_line_text,
)

mapping_keys = st.one_of(
    st.from_regex(r"[a-z][a-zA-Z]{0,8}", fullmatch=True),
    st.integers(min_value=0, max_value=99).map(str),
)


@st.composite
def value_trees(draw: st.DrawFn) -> object:
    """Finite acyclic trees of mappings, lists and scalars."""
    tree = draw(
        st.recursive(
            scalar_values,
            lambda children: st.one_of(
                st.lists(children, max_size=4),
                st.dictionaries(mapping_keys, children, max_size=4),
            ),
            max_leaves=20,
        )
    )
    event(f"tree_root={type(tree).__name__}")
    return tree
