"""Hypothesis strategies for pcomb property-based testing.

Provides random parsers (built from the public combinators) together with
inputs that are likely to exercise both their matching and failing paths.
"""

from __future__ import annotations

import string
from typing import Any

from hypothesis import strategies as st
from hypothesis.strategies import composite

from pcomb import alternation, char_class, literal, optional, repetition, sequence
from pcomb.syntax.parser.types import Parser

# Small alphabet so that random parsers and random inputs overlap often.
ALPHABET = "ab01+"

source_text = st.text(alphabet=ALPHABET, min_size=0, max_size=12)

class_patterns = st.sampled_from(["a", "ab", "0-1", "a-b0", "+", "^a", "a-z0-9+"])


@composite
def literal_parsers(draw: st.DrawFn) -> Parser[Any]:
    """Literal over the shared alphabet (possibly empty)."""
    return literal(draw(st.text(alphabet=ALPHABET, max_size=3)))


@composite
def char_class_parsers(draw: st.DrawFn) -> Parser[Any]:
    """Character class drawn from a fixed set of valid patterns."""
    return char_class(draw(class_patterns))


def _extend(children: st.SearchStrategy[Parser[Any]]) -> st.SearchStrategy[Parser[Any]]:
    lists = st.lists(children, max_size=3)
    return st.one_of(
        lists.map(sequence),
        lists.map(alternation),
        children.map(optional),
        st.tuples(children, st.integers(min_value=0, max_value=2)).map(
            lambda pair: repetition(pair[0], pair[1])
        ),
    )


parsers: st.SearchStrategy[Parser[Any]] = st.recursive(
    st.one_of(literal_parsers(), char_class_parsers()),
    _extend,
    max_leaves=8,
)

# References are left out of `parsers` since they need a registry.

# Formatters with deliberately falsy and non-mapping outputs.
formatters = st.sampled_from(
    [
        lambda value: value,
        lambda value: ("wrapped", value),
        lambda value: None,
        lambda value: 0,
    ]
)

identifiers = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8)
