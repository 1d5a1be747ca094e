from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    is_directory: bool
    is_file: bool


class FileSystem(Protocol):
    """Read-only view of the collection on disk.

    A missing file is not an error: `read_text` returns None for it.
    """

    async def read_text(self, path: str | Path) -> str | None: ...

    async def list_directory(self, path: str | Path) -> list[DirectoryEntry]: ...

    async def exists(self, path: str | Path) -> bool: ...
