# ABOUTME: Plain-text cleanup of WordPress rendered HTML fields.
# ABOUTME: Strips tags and decodes the handful of entities WordPress emits in titles and excerpts.

import re

TAG_RE = re.compile(r"<[^>]+>")

# Applied in order
ENTITY_REPLACEMENTS: list[tuple[str, str]] = [
    ("&#8211;", "–"),
    ("&#8217;", "'"),
    ("&#8220;", '"'),
    ("&#8221;", '"'),
    ("&nbsp;", " "),
    ("&amp;", "&"),
]


def clean_html(html: str) -> str:
    """Strip tags, decode known entities and trim surrounding whitespace."""
    text = TAG_RE.sub("", html)
    for entity, replacement in ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return text.strip()
