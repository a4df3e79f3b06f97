"""
PDF utility functions for extracting text and metadata.
"""

import io
import logging
from typing import Any, Dict

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..exceptions import ExtractionError

logger = logging.getLogger(__name__)


class PDFExtractor:
    """
    Extracts text from PDF documents held in memory.

    This class is responsible for:
    1. Opening the PDF with pypdf
    2. Refusing password protected and image-only documents
    3. Extracting basic metadata from PDFs
    """

    def _open(self, data: bytes, filename: str) -> PdfReader:
        try:
            reader = PdfReader(io.BytesIO(data))
        except Exception as e:
            raise ExtractionError(
                filename,
                "The uploaded file does not appear to be a valid PDF.",
                details={"error": str(e)},
            ) from e

        if reader.is_encrypted:
            # Some PDFs are encrypted with an empty user password
            try:
                decrypted = reader.decrypt("")
            except Exception as e:
                decrypted = 0
                logger.debug(f"Decrypting {filename} with an empty password failed: {e}")
            if not decrypted:
                raise ExtractionError(
                    filename,
                    "This PDF is password protected and cannot be processed.",
                )
        return reader

    def extract_text(self, data: bytes, filename: str = "document.pdf") -> str:
        """
        Extract the text of every page.

        Args:
            data: Raw PDF bytes
            filename: Name used in error messages and logs

        Returns:
            Text of all pages joined by newlines

        Raises:
            ExtractionError: If the PDF is invalid, encrypted or has no text layer
        """
        reader = self._open(data, filename)

        try:
            pages = [page.extract_text() or "" for page in reader.pages]
        except PdfReadError as e:
            raise ExtractionError(
                filename, f"PDF parsing failed: {e}", details={"error": str(e)}
            ) from e

        text = "\n".join(pages).strip()
        if not text:
            raise ExtractionError(
                filename,
                "This PDF appears to contain no readable text. "
                "It may be a scanned image or require OCR processing.",
            )

        logger.info(f"PDF text extracted: {len(text)} characters from {len(pages)} pages")
        return text

    def get_metadata(self, data: bytes, filename: str = "document.pdf") -> Dict[str, Any]:
        """
        Extract metadata from a PDF document.

        Args:
            data: Raw PDF bytes
            filename: Name used in error messages and logs

        Returns:
            Dictionary of metadata
        """
        reader = self._open(data, filename)
        info = reader.metadata

        metadata = {
            "title": info.title if info and info.title else None,
            "author": info.author if info and info.author else None,
            "subject": info.subject if info and info.subject else None,
            "creator": info.creator if info and info.creator else None,
            "producer": info.producer if info and info.producer else None,
            "page_count": len(reader.pages),
        }
        logger.info(f"Extracted PDF metadata: {metadata}")
        return metadata
