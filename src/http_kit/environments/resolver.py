# src/http_kit/environments/resolver.py

import json
import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, replace
from pathlib import Path
from time import monotonic
from typing import Any

from pydantic import TypeAdapter, ValidationError

from http_kit.filesystem.base import FileSystem
from http_kit.observability import names
from http_kit.observability.base import MetricsHook, NoOpMetricsHook

from .models import (
    PRIVATE_ENV_FILE,
    PUBLIC_ENV_FILE,
    ROOT_SOURCE,
    AvailableEnvironment,
    EnvironmentVariable,
)

logger = logging.getLogger(__name__)

# {environment name: {variable name: value}}
_ENV_FILE_ADAPTER: TypeAdapter[dict[str, dict[str, Any]]] = TypeAdapter(
    dict[str, dict[str, Any]]
)


@dataclass(frozen=True)
class _EnvironmentFile:
    depth: int
    source: str
    is_private: bool
    environments: dict[str, dict[str, Any]]


class EnvironmentResolver:
    """Resolves environment variables through the collection's folder hierarchy.

    Design principles:
    - Nearest wins: the folder closest to the request file claims a name
    - Sequential: folders are read one at a time, closest first
    - Forgiving: a missing or malformed environment file contributes nothing
    - Fresh: every call re-reads the files, nothing is cached
    """

    def __init__(
        self,
        filesystem: FileSystem,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._filesystem = filesystem
        self.metrics_hook = metrics_hook

    async def get_environment_variables(
        self,
        environment: str,
        folder: str | Path,
        collection_root: str | Path,
    ) -> list[EnvironmentVariable]:
        """Resolve every variable of `environment` visible from `folder`.

        Args:
            environment: Name of the environment, e.g. "dev".
            folder: Folder holding the request file; the walk starts here.
            collection_root: Collection root; the walk never goes above it.

        Returns:
            Variables in first-claimed order. A name claimed by a closer folder
            and also defined farther up is marked overridden, with the parent
            value taken from the nearest farther definition only.
        """
        start = monotonic()
        resolved: dict[str, EnvironmentVariable] = {}
        claimed_at: dict[str, int] = {}

        async for env_file in self._walk(folder, collection_root):
            values = env_file.environments.get(environment)
            if not values:
                continue

            for name, raw_value in values.items():
                value = _stringify(raw_value)
                existing = resolved.get(name)

                if existing is None:
                    resolved[name] = EnvironmentVariable(
                        name=name,
                        value=value,
                        is_private=env_file.is_private,
                        source=env_file.source,
                        is_inherited=env_file.depth > 0,
                        is_overridden=False,
                        is_editable=env_file.depth == 0,
                    )
                    claimed_at[name] = env_file.depth
                    continue

                if claimed_at[name] < env_file.depth and not existing.is_overridden:
                    resolved[name] = replace(
                        existing,
                        is_overridden=True,
                        parent_value=value,
                        parent_source=env_file.source,
                        parent_is_private=env_file.is_private,
                    )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.ENVIRONMENT_RESOLVE_DURATION, elapsed_ms)
        logger.debug(
            "Resolved %d variables for environment=%s from %s",
            len(resolved),
            environment,
            folder,
        )
        return list(resolved.values())

    async def get_environment_variables_map(
        self,
        environment: str,
        folder: str | Path,
        collection_root: str | Path,
    ) -> dict[str, str]:
        variables = await self.get_environment_variables(
            environment, folder, collection_root
        )
        return {variable.name: variable.value for variable in variables}

    async def list_available_environments(
        self,
        folder: str | Path,
        collection_root: str | Path,
    ) -> list[AvailableEnvironment]:
        environments: list[AvailableEnvironment] = []
        seen: set[str] = set()

        async for env_file in self._walk(folder, collection_root):
            for name in env_file.environments:
                if name in seen:
                    continue
                seen.add(name)
                environments.append(
                    AvailableEnvironment(
                        name=name,
                        source=env_file.source,
                        is_from_current_folder=env_file.depth == 0,
                    )
                )

        return environments

    async def _walk(
        self, folder: str | Path, collection_root: str | Path
    ) -> AsyncIterator[_EnvironmentFile]:
        root = Path(collection_root)

        for depth, current in enumerate(folder_chain(folder, root)):
            source = ROOT_SOURCE if current == root else current.name
            for file_name, is_private in (
                (PRIVATE_ENV_FILE, True),
                (PUBLIC_ENV_FILE, False),
            ):
                environments = await self._load(current / file_name)
                if environments:
                    yield _EnvironmentFile(
                        depth=depth,
                        source=source,
                        is_private=is_private,
                        environments=environments,
                    )

    async def _load(self, path: Path) -> dict[str, dict[str, Any]]:
        try:
            content = await self._filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read environment file %s: %s", path, exc)
            self.metrics_hook.increment(names.ENVIRONMENT_FILE_ERRORS_TOTAL)
            return {}

        if not content:
            return {}

        self.metrics_hook.increment(names.ENVIRONMENT_FILES_READ)
        try:
            return _ENV_FILE_ADAPTER.validate_json(content)
        except ValidationError as exc:
            logger.warning(
                "Ignoring malformed environment file %s: %d errors",
                path,
                exc.error_count(),
            )
            self.metrics_hook.increment(names.ENVIRONMENT_FILE_ERRORS_TOTAL)
            return {}


def folder_chain(folder: str | Path, collection_root: str | Path) -> list[Path]:
    """Folders from `folder` up to `collection_root`, closest first.

    The chain stops at the root, or right after the first folder that lies
    outside the root's subtree.
    """
    root = Path(collection_root)
    current = Path(folder)
    chain = [current]

    while current != root and root in current.parents:
        current = current.parent
        chain.append(current)

    return chain


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, bool)) or value is None:
        return json.dumps(value, separators=(",", ":"))
    return str(value)
