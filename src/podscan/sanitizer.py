"""
Text cleanup for fragments pulled out of podcast feeds.

Feeds in the wild leak entities, CDATA markers, stray tag remnants and
anchor markup into field values. Two passes deal with that:

- ``clean_string`` trims whitespace and junk characters left at the edges of
  a captured span, and drops a few dangling prefixes.
- ``convert_special_chars`` rewrites a fixed table of entities and strips
  the markup fragments commonly found inside descriptions.

All functions are pure and pass ``None`` straight through.
"""

from typing import Optional

# Java-style trim: every character up to and including the space.
_ASCII_WHITESPACE = "".join(chr(code) for code in range(0x21))

_TRAILING_JUNK = ' /<"'
_LEADING_JUNK = '</> "'

# (prefix, minimum length that must be exceeded, characters removed)
_DANGLING_PREFIXES = (
    # drops the attribute name and its opening quote
    ("href=", 5, 6),
    ("![CDATA[", 8, 8),
    ("![CDATA[<p>", 11, 11),
)

# Applied in order; "&#" must come after the numeric dash entity.
_ENTITY_TABLE = (
    ("\u00a9", ""),
    ("&amp;", "&"),
    ("&#8211;", "--"),
    ("&#", "#"),
    ("\u00b3", ""),
    ("&apos;", "'"),
    ("#039;", "'"),
    ("&quot;", "'"),
)

_MARKUP_FRAGMENTS = ("<br>", "<em>", "<p>", "<div>", "]]>", "div>")

ANCHOR_OPEN = '<a href="'
ANCHOR_CLOSE = '">'


def clean_string(text: Optional[str]) -> Optional[str]:
    """Strip junk characters and dangling prefixes from a captured span.

    An empty result is valid output.
    """
    if text is None:
        return None

    text = text.strip(_ASCII_WHITESPACE)
    if not text:
        return text

    text = text.rstrip(_TRAILING_JUNK)
    text = text.lstrip(_LEADING_JUNK)

    for prefix, min_length, cut in _DANGLING_PREFIXES:
        if len(text) > min_length and text.startswith(prefix):
            text = text[cut:]

    return text


def _strip_non_ascii(text: str) -> str:
    return "".join(char for char in text if ord(char) <= 0x7F)


def convert_special_chars(text: Optional[str]) -> Optional[str]:
    """Replace known entities and remove markup fragments.

    Characters beyond U+007F are dropped once the entity table has been
    applied. If an anchor opening tag survives, it is spliced out with
    ``remove_anchor``.
    """
    if text is None:
        return None

    for entity, replacement in _ENTITY_TABLE:
        text = text.replace(entity, replacement)

    text = _strip_non_ascii(text)

    for fragment in _MARKUP_FRAGMENTS:
        text = text.replace(fragment, "")

    if ANCHOR_OPEN in text:
        text = remove_anchor(text)

    return text


def remove_anchor(text: str) -> str:
    """Excise the first ``<a href="...">`` opening tag.

    The anchor's inner text and its ``</a>`` closer are kept. Only the first
    anchor is handled. Text without a ``">`` after the anchor is returned
    unchanged.
    """
    start = text.find(ANCHOR_OPEN)
    if start == -1:
        return text

    end = text.find(ANCHOR_CLOSE, start)
    if end == -1:
        return text

    return text[:start] + text[end + len(ANCHOR_CLOSE):]


def sanitize(text: Optional[str]) -> Optional[str]:
    """Run both cleanup passes in order."""
    return convert_special_chars(clean_string(text))
