"""Scanner for "@word" mention tokens."""

from dataclasses import dataclass
from typing import Iterator

MENTION_PREFIX = "@"


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_mention_name(name: str) -> bool:
    """True when "@" + name scans as a single mention token."""
    return bool(name) and all(is_word_char(ch) for ch in name)


@dataclass(frozen=True)
class Segment:
    """A run of text, either plain or a single mention token."""

    text: str
    is_mention: bool = False

    @property
    def name(self) -> str:
        """The mention body without the leading "@"."""
        return self.text[len(MENTION_PREFIX) :] if self.is_mention else ""


def scan(text: str) -> Iterator[Segment]:
    """
    Split text into plain segments and mention tokens.

    A mention is "@" followed by a maximal run of word characters. A lone
    "@" stays in the surrounding plain text. Joining the segment texts gives
    back the input.
    """
    plain_start = 0
    i = 0
    length = len(text)
    while i < length:
        if text[i] != MENTION_PREFIX:
            i += 1
            continue
        end = i + 1
        while end < length and is_word_char(text[end]):
            end += 1
        if end == i + 1:
            i += 1
            continue
        if plain_start < i:
            yield Segment(text[plain_start:i])
        yield Segment(text[i:end], is_mention=True)
        plain_start = i = end
    if plain_start < length:
        yield Segment(text[plain_start:])
