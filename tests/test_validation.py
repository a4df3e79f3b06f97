"""
Test suite for upload batch validation.
"""

import sys
import unittest
from dataclasses import dataclass
from pathlib import Path

# Add the project root to the Python path
sys.path.append(str(Path(__file__).parent.parent))

from doc_context.config import DOCX_TYPE, MB, PipelineConfig
from doc_context.files import InMemoryFile
from doc_context.validation import validate_files


@dataclass
class StubFile:
    """File handle with a declared size and no content."""

    name: str
    type: str
    size: int = 100


class TestValidateFiles(unittest.TestCase):
    """Tests for the validate_files function."""

    def test_accepts_valid_file_types(self):
        files = [
            InMemoryFile("doc.pdf", b"%PDF-1.4", "application/pdf"),
            InMemoryFile("doc.txt", "mock content", "text/plain"),
            InMemoryFile("doc.md", "# mock content", "text/markdown"),
            InMemoryFile("doc.docx", b"PK", DOCX_TYPE),
        ]

        result = validate_files(files)

        self.assertTrue(result.is_valid)
        self.assertEqual(len(result.errors), 0)

    def test_rejects_invalid_file_types(self):
        files = [
            StubFile("image.jpg", "image/jpeg"),
            StubFile("script.exe", "application/exe"),
        ]

        result = validate_files(files)

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 2)
        self.assertIn("Unsupported file type", result.errors[0])
        self.assertIn("image.jpg", result.errors[0])
        self.assertIn("script.exe", result.errors[1])

    def test_rejects_files_that_are_too_large(self):
        result = validate_files([StubFile("large.pdf", "application/pdf", 6 * MB)])

        self.assertFalse(result.is_valid)
        self.assertIn("too large", result.errors[0])
        self.assertIn("large.pdf", result.errors[0])
        self.assertIn("5MB", result.errors[0])

    def test_size_at_ceiling_is_accepted(self):
        result = validate_files([StubFile("edge.pdf", "application/pdf", 5 * MB)])
        self.assertTrue(result.is_valid)

    def test_rejects_too_many_files(self):
        files = [StubFile(f"doc{i}.txt", "text/plain") for i in range(6)]

        result = validate_files(files)

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 1)
        self.assertIn("maximum of 5 files", result.errors[0])

    def test_five_files_are_accepted(self):
        files = [StubFile(f"doc{i}.txt", "text/plain") for i in range(5)]
        self.assertTrue(validate_files(files).is_valid)

    def test_errors_accumulate_in_order(self):
        """Test that every violated rule is reported, count first then per file."""
        files = [StubFile(f"doc{i}.txt", "text/plain") for i in range(4)] + [
            StubFile("huge.exe", "application/exe", 8 * MB),
            StubFile("photo.png", "image/png"),
        ]

        result = validate_files(files)

        self.assertFalse(result.is_valid)
        self.assertEqual(len(result.errors), 4)
        self.assertIn("maximum of 5 files", result.errors[0])
        self.assertIn("huge.exe is too large", result.errors[1])
        self.assertIn("Unsupported file type for huge.exe", result.errors[2])
        self.assertIn("Unsupported file type for photo.png", result.errors[3])

    def test_empty_batch(self):
        result = validate_files([])

        self.assertFalse(result.is_valid)
        self.assertEqual(result.errors, ("No files selected",))

    def test_extension_fallback(self):
        """Test that a known extension is enough when the browser sends a generic type."""
        files = [
            StubFile("notes.md", ""),
            StubFile("report.DOCX", "application/octet-stream"),
        ]
        self.assertTrue(validate_files(files).is_valid)

    def test_custom_limits(self):
        config = PipelineConfig(max_files=2, max_file_size=1000)
        files = [
            StubFile("a.txt", "text/plain", 999),
            StubFile("b.txt", "text/plain", 1001),
            StubFile("c.txt", "text/plain", 10),
        ]

        result = validate_files(files, config)

        self.assertEqual(len(result.errors), 2)
        self.assertIn("maximum of 2 files", result.errors[0])
        self.assertEqual(result.errors[1], "b.txt is too large (max 1000 bytes)")


if __name__ == "__main__":
    unittest.main()
