"""String helpers used when deriving identifiers from free-form text."""

from __future__ import annotations

import re
from typing import Any, List

# lowercase/digit followed by uppercase: fooBar -> foo Bar
_LOWER_UPPER = re.compile(r'([a-z0-9])([A-Z])')
# acronym followed by a word: HTTPServer -> HTTP Server
_ACRONYM_WORD = re.compile(r'([A-Z]+)([A-Z][a-z])')
_NON_ALNUM = re.compile(r'[^0-9A-Za-z]+')


def split_words(text: str) -> List[str]:
    spaced = _ACRONYM_WORD.sub(r'\1 \2', text)
    spaced = _LOWER_UPPER.sub(r'\1 \2', spaced)
    return [word for word in _NON_ALNUM.split(spaced) if word]


def constant_case(text: str) -> str:
    """Return ``text`` as an UPPER_SNAKE identifier.

    >>> constant_case('fontStyle italic')
    'FONT_STYLE_ITALIC'
    """

    return '_'.join(word.upper() for word in split_words(text))


def get_type_name(obj: Any) -> str:
    return type(obj).__name__
