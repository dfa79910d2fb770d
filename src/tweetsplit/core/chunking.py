from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Literal

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 280

SpanKind = Literal["word", "gap"]

WORD_PATTERN = re.compile(r"\S+")
GAP_PATTERN = re.compile(r"\s+")


class LimitTooSmallError(ValueError):
    """Raised when max_length cannot hold a unit that has no split point."""

    def __init__(self, max_length: int, word_length: int | None = None):
        self.max_length = max_length
        self.word_length = word_length
        if word_length is None:
            msg = f"max_length must be at least 1, got {max_length}"
        else:
            msg = (
                f"max_length {max_length} is too small for a word of "
                f"{word_length} characters with no whitespace to split on"
            )
        super().__init__(msg)


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) range into the trimmed source text."""

    kind: SpanKind
    start: int
    end: int
    length: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", self.end - self.start)

    @classmethod
    def from_match(cls, kind: SpanKind, match: re.Match) -> Span:
        return cls(kind, match.start(), match.end())


def _check_limit(max_length: int) -> None:
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise TypeError(f"max_length must be an int, got {type(max_length).__name__}")
    if max_length < 1:
        raise LimitTooSmallError(max_length)


def find_spans(text: str) -> list[Span]:
    """
    Alternating word/gap spans of an already trimmed text, in source order.
    """
    spans = [Span.from_match("word", m) for m in WORD_PATTERN.finditer(text)]
    spans += [Span.from_match("gap", m) for m in GAP_PATTERN.finditer(text)]
    spans.sort(key=lambda s: s.start)
    return spans


def group_spans(spans: List[Span], max_length: int) -> list[list[Span]]:
    """
    Greedily pack spans into groups whose total length fits max_length.

    Each word is paired with the gap that follows it. A word that fits exactly
    is kept; a gap that would reach the limit is dropped and never carried
    into the next group.
    """
    _check_limit(max_length)

    words = [s for s in spans if s.kind == "word"]
    gaps = [s for s in spans if s.kind == "gap"]
    if not words:
        return []

    # the final word has no gap after it; it gets a copy of the last one,
    # which only ever lands at the end of a chunk and is trimmed away
    trailing = gaps[-1] if gaps else None
    gaps += [trailing] * (len(words) - len(gaps))

    groups: list[list[Span]] = []
    group: list[Span] = []
    size = 0

    for word, gap in zip(words, gaps):
        if word.length > max_length:
            raise LimitTooSmallError(max_length, word_length=word.length)

        if size + word.length <= max_length:
            group.append(word)
            size += word.length
        else:
            groups.append(group)
            group = [word]
            size = word.length

        if gap is not None and size + gap.length < max_length:
            group.append(gap)
            size += gap.length

    groups.append(group)
    return groups


def _split_chars(text: str, max_length: int) -> list[str]:
    return [text[i:i + max_length] for i in range(0, len(text), max_length)]


def segment(text: str, max_length: int) -> list[str]:
    """
    Split text into chunks of at most max_length characters.

    Splits happen on whitespace only; whitespace that falls on a split is
    discarded and every chunk has its trailing whitespace removed. Text with
    no whitespace at all is cut every max_length characters instead.

    Raises LimitTooSmallError when max_length < 1 or when a single word is
    longer than max_length while the text has whitespace elsewhere.
    """
    _check_limit(max_length)
    text = text.strip()
    spans = find_spans(text)

    if not any(s.kind == "gap" for s in spans):
        chunks = _split_chars(text, max_length)
        logger.debug("No whitespace in %d chars, cut into %d chunks", len(text), len(chunks))
        return chunks

    groups = group_spans(spans, max_length)
    chunks = ["".join(text[s.start:s.end] for s in group).rstrip() for group in groups]
    logger.debug("Segmented %d chars into %d chunks (max_length=%d)", len(text), len(chunks), max_length)
    return chunks
