"""
Document Context Preparation
============================

This package turns uploaded business documents into overlapping text chunks
and a length-capped context string that can be injected into a language-model prompt.
"""

__version__ = "0.1.0"

from .config import PipelineConfig, DEFAULT_CONFIG
from .models import Chunk, Document, ProcessingResult, ValidationResult
from .exceptions import DocumentContextError, ExtractionError, InvalidArgumentError
from .chunker import chunk_text
from .validation import validate_files
from .context import create_context_from_documents
from .files import InMemoryFile, LocalFile
from .extraction import DefaultTextExtractor
from .processors import FileProcessor, process_files

__all__ = [
    "PipelineConfig",
    "DEFAULT_CONFIG",
    "Chunk",
    "Document",
    "ProcessingResult",
    "ValidationResult",
    "DocumentContextError",
    "ExtractionError",
    "InvalidArgumentError",
    "chunk_text",
    "validate_files",
    "create_context_from_documents",
    "InMemoryFile",
    "LocalFile",
    "DefaultTextExtractor",
    "FileProcessor",
    "process_files",
]
