from .pdf import PDFExtractor
from .word import WordExtractor

__all__ = ["PDFExtractor", "WordExtractor"]
