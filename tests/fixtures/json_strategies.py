# tests/fixtures/json_strategies.py

"""Hypothesis strategies for JSON documents"""

# Third party imports
from hypothesis import strategies as st

json_scalars = (
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text()
)


def json_values(keys: st.SearchStrategy[str] = st.text()) -> st.SearchStrategy:
    """Arbitrary nested JSON values with object keys drawn from keys"""
    return st.recursive(
        json_scalars,
        lambda children: st.lists(children, max_size=5)
        | st.dictionaries(keys, children, max_size=5),
        max_leaves=20,
    )


# Keys every path syntax can express: non-blank, no dots, no quotes
path_keys = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters=".'\""),
    min_size=1,
    max_size=8,
).filter(lambda key: key.strip() != "")
