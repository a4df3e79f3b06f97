"""
Upload policy checks run on a file batch before any processing.
"""

import os
import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_CONFIG, PipelineConfig
from .files import FileHandle
from .models import ValidationResult

logger = logging.getLogger(__name__)


def _has_allowed_type(file: FileHandle, config: PipelineConfig) -> bool:
    if file.type in config.allowed_types:
        return True
    # Browsers often send an empty or generic type for .md and .docx
    extension = os.path.splitext(file.name)[1].lower()
    return extension in config.allowed_extensions


def validate_files(
    files: Sequence[FileHandle],
    config: Optional[PipelineConfig] = None,
) -> ValidationResult:
    """
    Check a batch of files against the count, size and type limits.

    All rules run so that one call reports every problem in the batch.
    Errors are ordered by rule (count first) and then by file.

    Args:
        files: Candidate files
        config: Limits to apply (defaults to DEFAULT_CONFIG)

    Returns:
        ValidationResult listing every violation found
    """
    config = config or DEFAULT_CONFIG
    errors: List[str] = []

    if not files:
        errors.append("No files selected")
        return ValidationResult(errors=tuple(errors))

    if len(files) > config.max_files:
        errors.append(
            f"You can upload a maximum of {config.max_files} files at once. "
            "Please select fewer files and try again."
        )

    for file in files:
        if file.size > config.max_file_size:
            errors.append(f"{file.name} is too large (max {config.max_file_size_label})")

        if not _has_allowed_type(file, config):
            errors.append(
                f"Unsupported file type for {file.name}. "
                "Please upload PDF, TXT, MD, or DOCX files."
            )

    if errors:
        logger.warning(f"File validation failed with {len(errors)} error(s): {errors}")
    return ValidationResult(errors=tuple(errors))
