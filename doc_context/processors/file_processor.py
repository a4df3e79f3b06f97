"""
File processor that turns a validated batch of files into Document records.
"""

import logging
from typing import Optional, Sequence

from tqdm.asyncio import tqdm_asyncio

from ..chunker import chunk_text
from ..config import DEFAULT_CONFIG, PipelineConfig
from ..extraction import DefaultTextExtractor, TextExtractor
from ..files import FileHandle
from ..models import Document, ProcessingResult

logger = logging.getLogger(__name__)


class FileProcessor:
    """
    Extracts, counts and chunks every file of a batch.

    This component:
    1. Extracts each file's text through the extraction boundary
    2. Chunks the text and tags every chunk with the filename
    3. Recovers extraction failures per file as empty documents

    Files are processed concurrently; results keep the input order.
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        extractor: Optional[TextExtractor] = None,
        show_progress: bool = False,
    ):
        """
        Initialize the file processor.

        Args:
            config: Chunk size and overlap to use (defaults to DEFAULT_CONFIG)
            extractor: Text extraction boundary (defaults to DefaultTextExtractor)
            show_progress: Whether to display a progress bar over the batch
        """
        self.config = config or DEFAULT_CONFIG
        self.extractor = extractor or DefaultTextExtractor(self.config)
        self.show_progress = show_progress

    async def process_file(self, file: FileHandle) -> Document:
        """
        Process a single file.

        Args:
            file: File to process

        Returns:
            Document with chunks, or an empty Document carrying the error
        """
        try:
            text = await self.extractor.extract(file)
        except Exception as e:
            logger.error(f"Error extracting text from {file.name}: {e}")
            return Document.failed(file.name, str(e))

        chunks = chunk_text(
            text,
            chunk_size=self.config.chunk_size,
            overlap=self.config.chunk_overlap,
            source=file.name,
        )
        word_count = len(text.split())

        if not chunks:
            logger.warning(f"No text content found in file: {file.name}")
        logger.info(f"Processed {file.name}: {len(text)} characters, {word_count} words, {len(chunks)} chunks")

        return Document(
            filename=file.name,
            content=text,
            chunks=tuple(chunks),
            word_count=word_count,
        )

    async def process_files(self, files: Sequence[FileHandle]) -> ProcessingResult:
        """
        Process a batch of files.

        Never raises for a file that cannot be extracted: such files appear
        in the result as empty documents with `error` set.

        Args:
            files: Files to process, typically already validated

        Returns:
            ProcessingResult with one document per input file, in input order
        """
        logger.info(f"Processing {len(files)} files")

        documents = await tqdm_asyncio.gather(
            *(self.process_file(file) for file in files),
            desc="Processing files",
            disable=not self.show_progress,
        )

        result = ProcessingResult(
            documents=tuple(documents),
            total_words=sum(doc.word_count for doc in documents),
        )
        if result.failed:
            logger.warning(f"Text extraction failed for {len(result.failed)} file(s): {result.failed}")
        logger.info(f"Processed {len(files)} files: {result.total_words} words, {result.total_chunks} chunks")
        return result


async def process_files(
    files: Sequence[FileHandle],
    config: Optional[PipelineConfig] = None,
    extractor: Optional[TextExtractor] = None,
) -> ProcessingResult:
    """Process a batch of files with a one-off FileProcessor."""
    return await FileProcessor(config=config, extractor=extractor).process_files(files)
