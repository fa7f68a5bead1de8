"""
HTML sanitization for user supplied text.

Markup on the allow list passes through untouched. Anything else is escaped
rather than stripped, so ``<script>`` bodies stay readable but inert, and
attributes outside the allow list (every ``on*`` handler included) are dropped.
Bare ampersands in text are left as typed.
"""

from typing import Optional

from bleach.sanitizer import ALLOWED_TAGS as BASE_TAGS, Cleaner

ALLOWED_TAGS = frozenset(
    BASE_TAGS
    | {
        "br", "del", "div", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "img",
        "ins", "mark", "p", "pre", "s", "small", "span", "sub", "sup", "table",
        "tbody", "td", "tfoot", "th", "thead", "tr", "u",
    }
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "acronym": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
    "td": ["colspan", "rowspan"],
    "th": ["colspan", "rowspan"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_cleaner = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def sanitize_html(value: Optional[str]) -> Optional[str]:
    """Neutralize executable markup in ``value``.

    Safe to apply more than once: cleaning already cleaned text is a no-op.
    """
    if value is None:
        return None
    # an ampersand cannot open a tag, so undo the escaping bleach adds to it
    return _cleaner.clean(value).replace("&amp;", "&")
