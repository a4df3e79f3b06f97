"""
Assembly of a bounded prompt context string from processed documents.
"""

import logging
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG
from .exceptions import InvalidArgumentError
from .models import Document

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"


def format_section(document: Document) -> str:
    """Header line naming the file, followed by its chunks one per line."""
    header = f"--- From {document.filename} ---"
    return "\n".join([header] + [chunk.content for chunk in document.chunks])


def create_context_from_documents(
    documents: Sequence[Document],
    max_length: Optional[int] = None,
) -> str:
    """
    Concatenate the chunks of every document into one labeled context string.

    Documents appear in input order; documents without chunks are skipped.
    The result is cut at `max_length` characters, possibly mid-word.

    Args:
        documents: Processed documents
        max_length: Maximum length of the result
            (defaults to DEFAULT_CONFIG.max_context_length)

    Returns:
        Context string no longer than max_length, empty when there are no documents

    Raises:
        InvalidArgumentError: If max_length is negative
    """
    if max_length is None:
        max_length = DEFAULT_CONFIG.max_context_length
    if max_length < 0:
        raise InvalidArgumentError(f"max_length must not be negative, got {max_length}")

    sections = [format_section(doc) for doc in documents if doc.chunks]
    context = SECTION_SEPARATOR.join(sections)

    if len(context) > max_length:
        logger.info(f"Truncating context from {len(context)} to {max_length} characters")
        context = context[:max_length]
    return context
