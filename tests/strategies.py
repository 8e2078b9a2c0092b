"""Shared hypothesis strategies for mustache_js property-based testing.

Provides strategies generating node trees directly (bypassing the parser)
and template source fragments the parser accepts.
"""

from __future__ import annotations

from hypothesis import strategies as st

from mustache_js.nodes import Interpolation, Section, Sequence, StaticText

# ---------------------------------------------------------------------------
# Names and paths
# ---------------------------------------------------------------------------

safe_identifier = st.sampled_from(
    [
        "a",
        "b",
        "c",
        "name",
        "items",
        "flag",
        "user",
        "title",
        "count",
    ]
)

# Zero segments is the implicit iterator.
lookup_path = st.lists(safe_identifier, min_size=0, max_size=3).map(tuple)

# Any text, including quotes, backslashes, line terminators and non-ASCII.
any_text = st.text(min_size=0, max_size=40)

# ---------------------------------------------------------------------------
# Node trees
# ---------------------------------------------------------------------------

static_text = any_text.map(StaticText)
interpolation = st.builds(Interpolation, path=lookup_path, escape=st.booleans())

leaf = st.one_of(static_text, interpolation)


def _extend(children: st.SearchStrategy) -> st.SearchStrategy:
    body = st.lists(children, max_size=4).map(lambda nodes: Sequence(tuple(nodes)))
    return st.one_of(
        body,
        st.builds(Section, path=lookup_path, body=body, inverted=st.booleans()),
    )


node_tree = st.recursive(leaf, _extend, max_leaves=20).map(
    lambda node: node if isinstance(node, Sequence) else Sequence((node,))
)

# ---------------------------------------------------------------------------
# Template sources
# ---------------------------------------------------------------------------

# Plain text that cannot open a tag.
plain_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="{}"),
    min_size=1,
    max_size=40,
)

variable_tag = safe_identifier.map(lambda name: f"{{{{{name}}}}}")
comment_tag = st.from_regex(r"[a-z ]{0,10}", fullmatch=True).map(lambda body: f"{{{{! {body} }}}}")

template_fragment = st.lists(
    st.one_of(plain_text, variable_tag, comment_tag),
    min_size=1,
    max_size=6,
).map("".join)
