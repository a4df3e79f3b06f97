#!/usr/bin/env python3
import argparse
import asyncio
import json
import logging
import os
import sys
from dataclasses import replace

from doc_context import (
    InvalidArgumentError,
    FileProcessor,
    LocalFile,
    PipelineConfig,
    create_context_from_documents,
    validate_files,
)

logger = logging.getLogger(__name__)


def configure_logging(log_file: str = "doc_context.log") -> None:
    """Log to stderr and to a file, for command line runs only."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    defaults = PipelineConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Prepare uploaded documents as chunks and a prompt context string"
    )
    parser.add_argument("files", nargs="+", help="Documents to process (PDF, TXT, MD or DOCX)")
    parser.add_argument(
        "-o", "--output",
        help="Path to save the documents and context as JSON"
    )
    parser.add_argument(
        "--chunk-size", type=int, default=defaults.chunk_size,
        help=f"Maximum characters per chunk (default: {defaults.chunk_size})"
    )
    parser.add_argument(
        "--overlap", type=int, default=defaults.chunk_overlap,
        help=f"Characters carried into the next chunk (default: {defaults.chunk_overlap})"
    )
    parser.add_argument(
        "--max-context", type=int, default=defaults.max_context_length,
        help=f"Maximum length of the context string (default: {defaults.max_context_length})"
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar while processing"
    )
    return parser


def main(argv=None) -> int:
    """
    Main entry point: validate, process and assemble context for a set of files.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = replace(
            PipelineConfig.from_env(),
            chunk_size=args.chunk_size,
            chunk_overlap=args.overlap,
            max_context_length=args.max_context,
        )
    except InvalidArgumentError as e:
        parser.error(str(e))

    missing = [path for path in args.files if not os.path.isfile(path)]
    if missing:
        for path in missing:
            logger.error(f"Input file not found: {path}")
        return 1

    files = [LocalFile.from_path(path) for path in args.files]

    validation = validate_files(files, config)
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(error)
        return 1

    processor = FileProcessor(config=config, show_progress=args.progress)
    result = asyncio.run(processor.process_files(files))
    context = create_context_from_documents(result.documents, config.max_context_length)

    logger.info(
        f"Processed {len(result.documents)} documents: "
        f"{result.total_words} words, {result.total_chunks} chunks"
    )

    if args.output:
        output_path = os.path.abspath(args.output)
        os.makedirs(os.path.dirname(output_path), exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump({**result.to_dict(), "context": context}, f, indent=2, ensure_ascii=False)
        logger.info(f"Results saved to {output_path}")

    print(context)
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
