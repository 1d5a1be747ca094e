from .base import DirectoryEntry, FileSystem
from .local import LocalFileSystem

__all__ = [
    "DirectoryEntry",
    "FileSystem",
    "LocalFileSystem",
]
