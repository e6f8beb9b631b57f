"""
Input Sanitizer

Strips markup from free text before it is stored.
"""

import html

from bleach.html5lib_shim import Filter
from bleach.sanitizer import Cleaner

# Elements removed together with everything inside them
DROP_CONTENT_TAGS = frozenset({'script', 'style', 'textarea', 'noscript', 'option'})

# Layers of entity encoding undone before cleaning (&amp;lt; -> &lt; -> <)
MAX_DECODE_ROUNDS = 5


class DropContentFilter(Filter):
    """Drop DROP_CONTENT_TAGS elements and their text from the token stream."""

    def __iter__(self):
        depth = 0
        for token in super().__iter__():
            name = token.get('name')
            if name in DROP_CONTENT_TAGS:
                if token['type'] == 'StartTag':
                    depth += 1
                elif token['type'] == 'EndTag':
                    depth = max(depth - 1, 0)
                continue
            if depth:
                continue
            yield token


# The dropped tags must survive the sanitizer so the filter can see them
_cleaner = Cleaner(tags=DROP_CONTENT_TAGS, attributes={}, strip=True, strip_comments=True,
                   filters=[DropContentFilter])


def _decode_entities(text):
    for _ in range(MAX_DECODE_ROUNDS):
        decoded = html.unescape(text)
        if decoded == text:
            break
        text = decoded
    return text


def sanitize(text):
    """Return ``text`` as plain text with every tag removed.

    Entity-encoded markup is decoded first so it is stripped like any other
    tag. Script, style and form-option bodies go with their tags. bleach
    escapes what remains; that is decoded back to plain text, and stray angle
    brackets left over are dropped, so the result never contains ``<`` or
    ``>``. None and empty input give ''.
    """
    if not text:
        return ''
    cleaned = _cleaner.clean(_decode_entities(str(text)))
    plain = html.unescape(cleaned)
    return plain.replace('<', '').replace('>', '').strip()
