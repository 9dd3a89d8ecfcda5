"""Title casing for examinee names.

Names are split into words at every character that is not a Unicode
letter or digit, and inside each run at case boundaries: a lowercase
letter followed by an uppercase one (``McDonald`` is ``Mc Donald``),
and the last capital of an uppercase run that starts a lowercase word
(``ABc`` is ``A Bc``). Each word is capitalized and the words are joined
with single spaces.

Apostrophes and hyphens are separators too, so ``O'BRIEN`` becomes
``O Brien``. Input decoded with the wrong codec is cased as-is: the
mojibake ``PEÃ‘A`` becomes ``Peã A`` rather than ``Peña``.
"""

from __future__ import annotations

import re
from typing import Iterator

_WORD_RUN_RE = re.compile(r"[^\W_]+")

_BOUNDARY = 0
_LOWERCASE = 1
_UPPERCASE = 2


def to_title_case(text: str) -> str:
    """Title-case a name.

    Args:
        text: Raw name text.

    Returns:
        Words capitalized and joined by single spaces.
    """
    words = (
        word
        for run in _WORD_RUN_RE.findall(text)
        for word in _split_case_boundaries(run)
    )
    return " ".join(_capitalize(word) for word in words)


def _split_case_boundaries(run: str) -> Iterator[str]:
    """Split one alphanumeric run at lower-to-upper and acronym boundaries."""
    start = 0
    mode = _BOUNDARY
    for index, char in enumerate(run[:-1]):
        following = run[index + 1]
        if char.islower():
            next_mode = _LOWERCASE
        elif char.isupper():
            next_mode = _UPPERCASE
        else:
            next_mode = mode
        if next_mode == _LOWERCASE and following.isupper():
            yield run[start : index + 1]
            start = index + 1
            mode = _BOUNDARY
        elif mode == _UPPERCASE and char.isupper() and following.islower():
            yield run[start:index]
            start = index
            mode = _BOUNDARY
        else:
            mode = next_mode
    yield run[start:]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()
