# src/http_kit/workspace/scanner.py

import logging
from pathlib import Path
from time import monotonic

from http_kit.environments.models import (
    ENV_FILE_NAMES,
    PRIVATE_ENV_FILE,
    PUBLIC_ENV_FILE,
)
from http_kit.filesystem.base import DirectoryEntry, FileSystem
from http_kit.observability import names
from http_kit.observability.base import MetricsHook, NoOpMetricsHook
from http_kit.parsers.http_parser import parse_http_file
from http_kit.parsers.models import Section

from .models import (
    HTTP_FILE_SUFFIX,
    README_SUFFIX,
    ROOT_TITLE,
    CollectionItem,
    EnvironmentConfig,
)

logger = logging.getLogger(__name__)


async def scan_collection(
    root: str | Path,
    filesystem: FileSystem,
    *,
    include_sections: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> CollectionItem:
    """Build the folder/file tree of a collection.

    Folders are visited with an explicit work stack, so deep trees do not
    hit the recursion limit. Hidden entries and environment files are left
    out. Items keep the order of the directory listing.

    Args:
        root: Collection root folder.
        filesystem: Where to read from.
        include_sections: Also parse every `.http` file into sections.
        metrics_hook: Optional metrics hook.

    Returns:
        The root item, titled "root".
    """
    start = monotonic()
    root_item = CollectionItem(title=ROOT_TITLE, folder_path=str(root))
    stack: list[tuple[str, CollectionItem]] = [(str(root), root_item)]
    folders = 0

    while stack:
        folder_path, folder_item = stack.pop()
        folders += 1

        entries = await filesystem.list_directory(folder_path)
        _describe_folder(folder_item, folder_path, entries)

        children: dict[str, CollectionItem] = {}
        for entry in entries:
            if entry.name.startswith(".") or entry.name in ENV_FILE_NAMES:
                continue

            full_path = str(Path(folder_path) / entry.name)

            if entry.is_directory:
                item = children.setdefault(entry.name, CollectionItem(title=entry.name))
                item.folder_path = full_path
                stack.append((full_path, item))
                continue

            if entry.is_file and entry.name.endswith(HTTP_FILE_SUFFIX):
                title = entry.name[: -len(HTTP_FILE_SUFFIX)]
                item = children.setdefault(title, CollectionItem(title=title))
                item.file_path = full_path
                if include_sections:
                    item.sections = await _read_sections(
                        filesystem, full_path, metrics_hook
                    )

        folder_item.items = list(children.values())

    elapsed_ms = round(1000 * (monotonic() - start))
    metrics_hook.record_latency(names.COLLECTION_SCAN_DURATION, elapsed_ms)
    logger.debug("Scanned %d folders under %s in %dms", folders, root, elapsed_ms)
    return root_item


def _describe_folder(
    item: CollectionItem, folder_path: str, entries: list[DirectoryEntry]
) -> None:
    file_names = {entry.name for entry in entries if entry.is_file}
    item.has_readme = any(name.endswith(README_SUFFIX) for name in file_names)

    has_public_env = PUBLIC_ENV_FILE in file_names
    has_private_env = PRIVATE_ENV_FILE in file_names
    if has_public_env or has_private_env:
        item.environments = EnvironmentConfig(
            folder_path=folder_path,
            has_public_env=has_public_env,
            has_private_env=has_private_env,
        )


async def _read_sections(
    filesystem: FileSystem, path: str, metrics_hook: MetricsHook
) -> list[Section] | None:
    try:
        content = await filesystem.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read request file %s: %s", path, exc)
        return None

    if content is None:
        logger.warning("Request file disappeared during scan: %s", path)
        return None
    return parse_http_file(content, metrics_hook=metrics_hook).sections
