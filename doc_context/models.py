"""
Shared data models for the document preparation pipeline.
"""

from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

DEFAULT_SOURCE = "document"


@dataclass(frozen=True)
class Chunk:
    """A single window of document text with its position and origin."""

    content: str
    index: int
    source: str = DEFAULT_SOURCE

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "index": self.index, "source": self.source}


@dataclass(frozen=True)
class Document:
    """Text extracted from one uploaded file together with its chunks."""

    filename: str
    content: str
    chunks: Tuple[Chunk, ...] = ()
    word_count: int = 0
    error: Optional[str] = None  # set when extraction failed

    @classmethod
    def failed(cls, filename: str, error: str) -> "Document":
        """Empty document standing in for a file whose text could not be extracted."""
        return cls(filename=filename, content="", error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "filename": self.filename,
            "content": self.content,
            "chunks": [chunk.to_dict() for chunk in self.chunks],
            "word_count": self.word_count,
            "error": self.error,
        }


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of processing one batch of files, in input order."""

    documents: Tuple[Document, ...] = ()
    total_words: int = 0

    @property
    def total_chunks(self) -> int:
        return sum(len(doc.chunks) for doc in self.documents)

    @property
    def failed(self) -> List[str]:
        """Filenames whose extraction failed."""
        return [doc.filename for doc in self.documents if not doc.ok]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documents": [doc.to_dict() for doc in self.documents],
            "total_words": self.total_words,
            "total_chunks": self.total_chunks,
            "failed": self.failed,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a file batch against the upload policy."""

    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors
