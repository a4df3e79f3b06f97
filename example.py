"""
Example script demonstrating how to prepare uploaded documents for a prompt.
"""

import asyncio
import logging

from doc_context import (
    FileProcessor,
    InMemoryFile,
    PipelineConfig,
    create_context_from_documents,
    validate_files,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

FAQ = """Our support desk is open Monday to Friday from 9am to 6pm.
Orders ship within two business days. Returns are accepted for 30 days after delivery.
Premium customers get a dedicated account manager and priority phone support."""

PRICING = """# Pricing

The starter plan costs 29 dollars per month and includes five seats.
The business plan costs 99 dollars per month and includes unlimited seats and SSO."""


async def run() -> None:
    """Run the example."""
    config = PipelineConfig(chunk_size=120, chunk_overlap=30, max_context_length=600)

    files = [
        InMemoryFile("faq.txt", FAQ),
        InMemoryFile("pricing.md", PRICING),
    ]

    validation = validate_files(files, config)
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(error)
        return

    result = await FileProcessor(config=config).process_files(files)
    logger.info(f"Created {result.total_chunks} chunks from {result.total_words} words")

    for doc in result.documents:
        logger.info(f"{doc.filename}: {doc.word_count} words, {len(doc.chunks)} chunks")
        for chunk in doc.chunks:
            logger.info(f"  [{chunk.index}] {chunk.content}")

    context = create_context_from_documents(result.documents, config.max_context_length)
    print(context)


if __name__ == "__main__":
    asyncio.run(run())
