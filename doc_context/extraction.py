"""
Text extraction boundary: turns a file handle into raw text.
"""

import os
import logging
from typing import Optional, Protocol

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import DEFAULT_CONFIG, DOCX_TYPE, PDF_TYPE, PipelineConfig
from .exceptions import ExtractionError
from .files import FileHandle
from .utils import PDFExtractor, WordExtractor

logger = logging.getLogger(__name__)


class TextExtractor(Protocol):
    """Anything that can turn a file handle into text."""

    async def extract(self, file: FileHandle) -> str:
        ...


class DefaultTextExtractor:
    """
    Extracts text based on the file's MIME type, falling back to its extension.

    Plain text and Markdown are read directly, PDFs are decoded with pypdf and
    Word documents with python-docx. Anything else is read as text.
    Reads that fail with an OSError are retried.
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.pdf_extractor = PDFExtractor()
        self.word_extractor = WordExtractor()

    def _kind(self, file: FileHandle) -> str:
        file_type = (file.type or "").lower()
        extension = os.path.splitext(file.name)[1].lower()

        if PDF_TYPE in file_type or extension == ".pdf":
            return "pdf"
        if DOCX_TYPE in file_type or extension == ".docx":
            return "docx"
        # text/plain, text/markdown and unknown types
        return "text"

    async def _read(self, file: FileHandle, binary: bool):
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.config.read_attempts),
            wait=wait_exponential(multiplier=0.5, max=4),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        ):
            with attempt:
                if binary:
                    return await file.read_bytes()
                return await file.read_text()

    async def extract(self, file: FileHandle) -> str:
        """
        Extract the raw text of one file.

        Args:
            file: File handle to read

        Returns:
            Extracted text

        Raises:
            ExtractionError: If the file cannot be read or decoded
        """
        kind = self._kind(file)
        logger.info(f"Extracting text from {file.name} ({file.type or 'unknown type'}) as {kind}")

        try:
            if kind == "pdf":
                data = await self._read(file, binary=True)
                return self.pdf_extractor.extract_text(data, file.name)
            if kind == "docx":
                data = await self._read(file, binary=True)
                return self.word_extractor.extract_text(data, file.name)
            return await self._read(file, binary=False)
        except ExtractionError:
            raise
        except UnicodeDecodeError as e:
            raise ExtractionError(
                file.name,
                f"Failed to extract text from {file.name}: file is not valid UTF-8 text",
                details={"error": str(e)},
            ) from e
        except OSError as e:
            raise ExtractionError(
                file.name,
                f"Failed to extract text from {file.name}: {e}",
                details={"error": str(e)},
            ) from e
