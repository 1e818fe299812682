"""Sentence segmentation on terminal punctuation."""

from __future__ import annotations

import re
from typing import Iterator

# Runs of . ! ? ; a lone period between two digits ("ASAM Level 2.1") is not a terminator
_TERMINATOR = re.compile(r"[.!?]*[!?][.!?]*|(?<!\d)\.+|\.+(?!\d)")


class SentenceSequence:
    """Lazy, restartable view of the sentences in a text.

    Every iteration re-scans the source, so the sequence can be consumed
    any number of times.  Yielded sentences are trimmed and never empty.
    """

    def __init__(self, text: str) -> None:
        self._text = text or ""

    def __iter__(self) -> Iterator[str]:
        start = 0
        for match in _TERMINATOR.finditer(self._text):
            sentence = self._text[start:match.start()].strip()
            if sentence:
                yield sentence
            start = match.end()
        tail = self._text[start:].strip()
        if tail:
            yield tail

    def __repr__(self) -> str:
        return f"SentenceSequence({self._text[:40]!r})"


def split_sentences(text: str) -> SentenceSequence:
    """Split *text* into trimmed, non-empty sentence-like units."""
    return SentenceSequence(text)
