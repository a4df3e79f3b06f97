from .file_processor import FileProcessor, process_files

__all__ = ["FileProcessor", "process_files"]
