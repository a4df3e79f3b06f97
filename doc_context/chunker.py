"""
Word-level chunking with a character budget and word-level overlap.
"""

import re
import logging
from typing import List

from .exceptions import InvalidArgumentError
from .models import Chunk, DEFAULT_SOURCE

logger = logging.getLogger(__name__)

# Sentence punctuation separates words like whitespace does
_WORD_SEPARATOR = re.compile(r"[\s.!?]+")


def tokenize(text: str) -> List[str]:
    """
    Split text into words on whitespace and sentence punctuation (. ! ?).

    Args:
        text: Raw document text

    Returns:
        List of words in reading order
    """
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def _joined_length(words: List[str]) -> int:
    if not words:
        return 0
    return sum(len(word) for word in words) + len(words) - 1


def _overlap_words(words: List[str], overlap: int) -> List[str]:
    """
    Trailing words of a closed chunk that fit within `overlap` characters.

    With a positive overlap the last word is always carried, even when it
    is longer than `overlap`.
    """
    if overlap <= 0 or not words:
        return []
    carried = [words[-1]]
    for word in reversed(words[:-1]):
        if _joined_length([word] + carried) > overlap:
            break
        carried.insert(0, word)
    return carried


def chunk_text(
    text: str,
    chunk_size: int,
    overlap: int = 0,
    source: str = DEFAULT_SOURCE,
) -> List[Chunk]:
    """
    Split text into ordered, overlapping chunks.

    Words are accumulated until the next one would push the chunk past
    `chunk_size` characters. The next chunk then starts with the trailing
    words of the closed one that fit in `overlap` characters, and always at
    least its last word when `overlap` is positive. Carried words are dropped
    when the next word would not fit beside them. A single word longer than
    `chunk_size` becomes a chunk of its own.

    Args:
        text: Text to split
        chunk_size: Maximum characters per chunk
        overlap: Characters of trailing words repeated at the start of the next chunk
        source: Identifier of the originating document

    Returns:
        List of chunks with contiguous indexes starting at 0

    Raises:
        InvalidArgumentError: If chunk_size is not positive or overlap is
            negative or not smaller than chunk_size. Arguments are checked
            before the text is looked at, so a text that would fit in one
            chunk is still rejected with an invalid overlap.
    """
    if chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise InvalidArgumentError(
            f"overlap must be in [0, chunk_size), got overlap={overlap} chunk_size={chunk_size}",
            details={"overlap": overlap, "chunk_size": chunk_size},
        )

    words = tokenize(text)
    chunks: List[Chunk] = []
    current: List[str] = []
    length = 0

    for word in words:
        added = len(word) + (1 if current else 0)
        if current and length + added > chunk_size:
            chunks.append(Chunk(content=" ".join(current), index=len(chunks), source=source))

            current = _overlap_words(current, overlap)
            # Carried words give way when the new word would not fit next to them
            while current and _joined_length(current + [word]) > chunk_size:
                current.pop(0)
            length = _joined_length(current)
            added = len(word) + (1 if current else 0)

        current.append(word)
        length += added

    if current:
        chunks.append(Chunk(content=" ".join(current), index=len(chunks), source=source))

    logger.debug(f"Split {len(words)} words from {source} into {len(chunks)} chunks")
    return chunks
