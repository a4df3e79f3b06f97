"""
Test suite for text extraction.
"""

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from doc_context.config import DOCX_TYPE
from doc_context.exceptions import ExtractionError
from doc_context.extraction import DefaultTextExtractor
from doc_context.files import InMemoryFile
from doc_context.utils.pdf import PDFExtractor


class TestDefaultTextExtractor(unittest.IsolatedAsyncioTestCase):
    """Tests for the DefaultTextExtractor class."""

    def setUp(self):
        self.extractor = DefaultTextExtractor()

    def test_dispatch(self):
        cases = [
            (InMemoryFile("a.pdf", b"", "application/pdf"), "pdf"),
            (InMemoryFile("a.bin", b"", "application/pdf"), "pdf"),
            (InMemoryFile("a.pdf", b"", ""), "pdf"),
            (InMemoryFile("a.docx", b"", DOCX_TYPE), "docx"),
            (InMemoryFile("a.docx", b"", "application/octet-stream"), "docx"),
            (InMemoryFile("a.txt", b"", "text/plain"), "text"),
            (InMemoryFile("a.md", b"", "text/markdown"), "text"),
            (InMemoryFile("a.csv", b"", "text/csv"), "text"),
        ]
        for file, kind in cases:
            with self.subTest(name=file.name, type=file.type):
                self.assertEqual(self.extractor._kind(file), kind)

    async def test_markdown_is_read_verbatim(self):
        text = "# Title\n\n* item one\n* item two\n"
        self.assertEqual(await self.extractor.extract(InMemoryFile("a.md", text)), text)

    async def test_extraction_error_names_file(self):
        with self.assertRaises(ExtractionError) as ctx:
            await self.extractor.extract(InMemoryFile("broken.pdf", b"garbage"))

        self.assertEqual(ctx.exception.filename, "broken.pdf")


class TestPDFExtractor(unittest.TestCase):
    """Tests for the PDFExtractor class."""

    def test_get_metadata(self):
        reader = MagicMock()
        reader.is_encrypted = False
        reader.metadata.title = "Annual Report"
        reader.metadata.author = "Finance"
        reader.metadata.subject = None
        reader.metadata.creator = None
        reader.metadata.producer = "pdfTeX"
        reader.pages = [MagicMock(), MagicMock(), MagicMock()]

        with patch("doc_context.utils.pdf.PdfReader", return_value=reader):
            metadata = PDFExtractor().get_metadata(b"%PDF-1.7", "report.pdf")

        self.assertEqual(metadata["title"], "Annual Report")
        self.assertEqual(metadata["author"], "Finance")
        self.assertIsNone(metadata["subject"])
        self.assertEqual(metadata["page_count"], 3)

    def test_empty_password_decrypts(self):
        reader = MagicMock()
        reader.is_encrypted = True
        reader.decrypt.return_value = 1
        page = MagicMock()
        page.extract_text.return_value = "Unlocked text"
        reader.pages = [page]

        with patch("doc_context.utils.pdf.PdfReader", return_value=reader):
            text = PDFExtractor().extract_text(b"%PDF-1.7", "open.pdf")

        reader.decrypt.assert_called_once_with("")
        self.assertEqual(text, "Unlocked text")


if __name__ == "__main__":
    unittest.main()
