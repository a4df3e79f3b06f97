"""
Word (.docx) text extraction.
"""

import io
import logging
import zipfile

import docx
from docx.opc.exceptions import PackageNotFoundError

from ..exceptions import ExtractionError

logger = logging.getLogger(__name__)


class WordExtractor:
    """Extracts paragraph and table text from .docx documents held in memory."""

    def extract_text(self, data: bytes, filename: str = "document.docx") -> str:
        """
        Extract the text of a Word document.

        Args:
            data: Raw .docx bytes
            filename: Name used in error messages and logs

        Returns:
            Non-empty paragraphs, then table cells, one per line

        Raises:
            ExtractionError: If the bytes are not a readable .docx package
        """
        try:
            document = docx.Document(io.BytesIO(data))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
            raise ExtractionError(
                filename,
                "The uploaded file does not appear to be a valid Word document.",
                details={"error": str(e)},
            ) from e

        parts = [p.text for p in document.paragraphs if p.text and p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    parts.append(" | ".join(cells))

        text = "\n".join(parts).strip()
        logger.info(f"Word text extracted: {len(text)} characters from {len(parts)} blocks")
        return text
