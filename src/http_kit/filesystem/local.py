import asyncio
import logging
from pathlib import Path

from .base import DirectoryEntry, FileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk.

    Blocking calls run in a worker thread so the event loop stays free.
    Directory listings are sorted by name for deterministic scans.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def read_text(self, path: str | Path) -> str | None:
        def _read() -> str | None:
            file_path = Path(path)
            if not file_path.is_file():
                return None
            return file_path.read_text(encoding=self._encoding)

        content = await asyncio.to_thread(_read)
        if content is None:
            logger.debug("File not found: %s", path)
        return content

    async def list_directory(self, path: str | Path) -> list[DirectoryEntry]:
        def _list() -> list[DirectoryEntry]:
            dir_path = Path(path)
            if not dir_path.is_dir():
                return []
            return [
                DirectoryEntry(
                    name=entry.name,
                    is_directory=entry.is_dir(),
                    is_file=entry.is_file(),
                )
                for entry in sorted(dir_path.iterdir(), key=lambda p: p.name)
            ]

        return await asyncio.to_thread(_list)

    async def exists(self, path: str | Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)
