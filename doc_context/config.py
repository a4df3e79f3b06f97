import os
from dataclasses import dataclass, field
from typing import Tuple
from dotenv import load_dotenv

from .exceptions import InvalidArgumentError

# Load environment variables from .env file
load_dotenv()

MB = 1024 * 1024

# Upload policy
MAX_FILES = 5
MAX_FILE_SIZE = 5 * MB  # a 6 MB upload must be rejected

PDF_TYPE = "application/pdf"
TEXT_TYPE = "text/plain"
MARKDOWN_TYPE = "text/markdown"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ALLOWED_TYPES = (PDF_TYPE, TEXT_TYPE, MARKDOWN_TYPE, DOCX_TYPE)
ALLOWED_EXTENSIONS = (".pdf", ".txt", ".md", ".markdown", ".docx")

# Chunking and context configuration
CHUNK_SIZE = 600  # characters per chunk
CHUNK_OVERLAP = 100  # characters carried into the next chunk
MAX_CONTEXT_LENGTH = 3000  # characters in the assembled prompt context

READ_ATTEMPTS = 3  # reads of a file handle before giving up on OSError


@dataclass(frozen=True)
class PipelineConfig:
    """Limits and defaults shared by the validator, processor and assembler."""

    max_files: int = MAX_FILES
    max_file_size: int = MAX_FILE_SIZE
    allowed_types: Tuple[str, ...] = field(default=ALLOWED_TYPES)
    allowed_extensions: Tuple[str, ...] = field(default=ALLOWED_EXTENSIONS)
    chunk_size: int = CHUNK_SIZE
    chunk_overlap: int = CHUNK_OVERLAP
    max_context_length: int = MAX_CONTEXT_LENGTH
    read_attempts: int = READ_ATTEMPTS

    def __post_init__(self):
        if self.max_files < 1:
            raise InvalidArgumentError(f"max_files must be positive, got {self.max_files}")
        if self.max_file_size < 1:
            raise InvalidArgumentError(f"max_file_size must be positive, got {self.max_file_size}")
        if self.chunk_size < 1:
            raise InvalidArgumentError(f"chunk_size must be positive, got {self.chunk_size}")
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise InvalidArgumentError(
                f"chunk_overlap must be in [0, chunk_size), got {self.chunk_overlap}"
            )
        if self.max_context_length < 0:
            raise InvalidArgumentError(
                f"max_context_length must not be negative, got {self.max_context_length}"
            )
        if self.read_attempts < 1:
            raise InvalidArgumentError(f"read_attempts must be positive, got {self.read_attempts}")

    @property
    def max_file_size_label(self) -> str:
        """Human readable size ceiling, e.g. '5MB'."""
        if self.max_file_size % MB == 0:
            return f"{self.max_file_size // MB}MB"
        return f"{self.max_file_size} bytes"

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """
        Build a configuration from DOC_CONTEXT_* environment variables.

        Unset variables keep the module defaults.
        """
        return cls(
            max_files=int(os.getenv("DOC_CONTEXT_MAX_FILES", str(MAX_FILES))),
            max_file_size=int(os.getenv("DOC_CONTEXT_MAX_FILE_SIZE", str(MAX_FILE_SIZE))),
            chunk_size=int(os.getenv("DOC_CONTEXT_CHUNK_SIZE", str(CHUNK_SIZE))),
            chunk_overlap=int(os.getenv("DOC_CONTEXT_CHUNK_OVERLAP", str(CHUNK_OVERLAP))),
            max_context_length=int(
                os.getenv("DOC_CONTEXT_MAX_CONTEXT_LENGTH", str(MAX_CONTEXT_LENGTH))
            ),
            read_attempts=int(os.getenv("DOC_CONTEXT_READ_ATTEMPTS", str(READ_ATTEMPTS))),
        )


DEFAULT_CONFIG = PipelineConfig()
