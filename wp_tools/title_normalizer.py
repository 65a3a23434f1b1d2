# wp_tools/title_normalizer.py
"""Canonical form of a post title, used as the duplicate-detection key."""

import re

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&[^;]+;")
_WHITESPACE_RE = re.compile(r"\s+")

# Applied in order, each as a literal global replace.
# Anything still shaped like an entity afterwards is dropped, not decoded.
ENTITY_REPLACEMENTS = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#8217;", "'"),   # right single quotation mark
    ("&#8216;", "'"),   # left single quotation mark
    ("&#39;", "'"),
    ("&#038;", "&"),
)


def normalize_title(raw) -> str:
    """Lowercase, whitespace-collapsed, markup-free title.

    Returns "" for empty or non-string input; never raises.
    """
    if not raw or not isinstance(raw, str):
        return ""

    text = _TAG_RE.sub("", raw)
    for entity, literal in ENTITY_REPLACEMENTS:
        text = text.replace(entity, literal)
    text = _ENTITY_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.lower().strip()
