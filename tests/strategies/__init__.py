"""Hypothesis strategies shared across the icumessage test suite."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "argument_names",
    "argument_values",
    "finite_numbers",
    "plain_text",
]

# Argument names as the parser accepts them: no whitespace, braces, commas or quotes.
argument_names = st.text(
    alphabet=st.characters(
        categories=("Ll", "Lu", "Nd"), include_characters="_.-"
    ),
    min_size=1,
    max_size=12,
)

# Literal text with no '#', so rendering never substitutes anything.
plain_text = st.text(
    alphabet=st.characters(exclude_characters="#", exclude_categories=("Cs",)),
    max_size=40,
)

finite_numbers = st.one_of(
    st.integers(min_value=-(10**12), max_value=10**12),
    st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9),
    st.decimals(
        allow_nan=False, allow_infinity=False, places=3, min_value=-(10**6), max_value=10**6
    ),
)

# Hashable argument values accepted by LocalizedString and MessageEnvironment.
argument_values = st.one_of(
    st.integers(),
    st.text(max_size=10),
    st.booleans(),
    st.decimals(allow_nan=False, allow_infinity=False, places=2),
)
