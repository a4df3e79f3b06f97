"""
File handles accepted by the pipeline.

A handle exposes a name, a MIME type, a size in bytes and asynchronous reads.
InMemoryFile wraps an upload already held in memory, LocalFile a file on disk.
"""

import asyncio
import mimetypes
import os
from pathlib import Path
from typing import Optional, Protocol, Union

from .config import DOCX_TYPE, MARKDOWN_TYPE, PDF_TYPE, TEXT_TYPE

_EXTENSION_TYPES = {
    ".pdf": PDF_TYPE,
    ".txt": TEXT_TYPE,
    ".md": MARKDOWN_TYPE,
    ".markdown": MARKDOWN_TYPE,
    ".docx": DOCX_TYPE,
}


def guess_type(filename: str) -> str:
    """
    Guess the MIME type of a file from its extension.

    Args:
        filename: Name or path of the file

    Returns:
        MIME type, or an empty string when unknown
    """
    extension = os.path.splitext(filename)[1].lower()
    if extension in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[extension]
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or ""


class FileHandle(Protocol):
    """The capabilities the pipeline needs from an uploaded file."""

    name: str
    type: str
    size: int

    async def read_text(self) -> str:
        ...

    async def read_bytes(self) -> bytes:
        ...


class InMemoryFile:
    """An uploaded file whose bytes are already in memory."""

    def __init__(self, name: str, data: Union[str, bytes], type: Optional[str] = None):
        """
        Args:
            name: Original filename
            data: File content; text is stored UTF-8 encoded
            type: MIME type, guessed from the name when omitted
        """
        self.name = name
        self.type = guess_type(name) if type is None else type
        self._data = data.encode("utf-8") if isinstance(data, str) else data

    @property
    def size(self) -> int:
        return len(self._data)

    async def read_text(self) -> str:
        return self._data.decode("utf-8")

    async def read_bytes(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"InMemoryFile(name={self.name!r}, type={self.type!r}, size={self.size})"


class LocalFile:
    """A file on disk, read in a worker thread."""

    def __init__(self, path: Union[str, Path], name: str, type: str, size: int):
        self.path = Path(path)
        self.name = name
        self.type = type
        self.size = size

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "LocalFile":
        """
        Create a handle for an existing file.

        Args:
            path: Path to the file

        Returns:
            LocalFile with name, type and size filled in
        """
        path = Path(path)
        return cls(
            path=path,
            name=path.name,
            type=guess_type(path.name),
            size=path.stat().st_size,
        )

    async def read_text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")

    async def read_bytes(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)

    def __repr__(self) -> str:
        return f"LocalFile(path={str(self.path)!r}, type={self.type!r}, size={self.size})"
