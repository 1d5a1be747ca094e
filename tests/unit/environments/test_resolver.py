# tests/unit/environments/test_resolver.py

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from http_kit.environments import EnvironmentResolver, folder_chain
from http_kit.filesystem import LocalFileSystem
from http_kit.observability import names


def _write_env(folder: Path, content: dict | str, *, private: bool = False) -> None:
    folder.mkdir(parents=True, exist_ok=True)
    name = "http-client.private.env.json" if private else "http-client.env.json"
    text = content if isinstance(content, str) else json.dumps(content)
    (folder / name).write_text(text, encoding="utf-8")


@pytest.fixture
def collection(tmp_path: Path) -> Path:
    """root -> mid -> leaf, with overlapping and disjoint keys."""
    root = tmp_path / "api"
    mid = root / "mid"
    leaf = mid / "leaf"

    _write_env(
        root,
        {
            "dev": {"shared": "root", "root_only": "r", "deep_and_root": "r2"},
            "staging": {"shared": "s"},
        },
    )
    _write_env(mid, {"dev": {"shared": "mid", "mid_only": "m"}})
    _write_env(
        leaf,
        {"dev": {"shared": "leaf", "leaf_only": "l", "deep_and_root": "leaf2"}},
    )
    _write_env(
        leaf,
        {"dev": {"token": "secret", "shared": "private"}, "prod": {}},
        private=True,
    )
    return root


@pytest.fixture
def resolver() -> EnvironmentResolver:
    return EnvironmentResolver(LocalFileSystem())


class TestGetEnvironmentVariables:
    @pytest.mark.asyncio
    async def test_nearest_folder_wins(
        self, resolver: EnvironmentResolver, collection: Path
    ) -> None:
        variables = await resolver.get_environment_variables_map(
            "dev", collection / "mid" / "leaf", collection
        )

        assert variables == {
            "token": "secret",
            "shared": "private",
            "leaf_only": "l",
            "deep_and_root": "leaf2",
            "mid_only": "m",
            "root_only": "r",
        }

    @pytest.mark.asyncio
    async def test_provenance_flags(
        self, resolver: EnvironmentResolver, collection: Path
    ) -> None:
        variables = await resolver.get_environment_variables(
            "dev", collection / "mid" / "leaf", collection
        )
        by_name = {variable.name: variable for variable in variables}

        leaf_only = by_name["leaf_only"]
        assert leaf_only.is_editable
        assert not leaf_only.is_inherited
        assert not leaf_only.is_overridden
        assert leaf_only.source == "leaf"

        mid_only = by_name["mid_only"]
        assert mid_only.is_inherited
        assert not mid_only.is_editable
        assert mid_only.source == "mid"

        assert by_name["root_only"].source == "root"
        assert by_name["token"].is_private

    @pytest.mark.asyncio
    async def test_override_points_at_nearest_ancestor(
        self, resolver: EnvironmentResolver, collection: Path
    ) -> None:
        variables = await resolver.get_environment_variables(
            "dev", collection / "mid" / "leaf", collection
        )
        by_name = {variable.name: variable for variable in variables}

        shared = by_name["shared"]
        assert shared.value == "private"
        assert shared.is_overridden
        assert shared.parent_source == "mid"
        assert shared.parent_value == "mid"
        assert shared.parent_is_private is False

        skipping_mid = by_name["deep_and_root"]
        assert skipping_mid.is_overridden
        assert skipping_mid.parent_source == "root"
        assert skipping_mid.parent_value == "r2"

    @pytest.mark.asyncio
    async def test_walk_stops_at_collection_root(
        self, resolver: EnvironmentResolver, collection: Path
    ) -> None:
        _write_env(collection.parent, {"dev": {"outside": "x"}})

        variables = await resolver.get_environment_variables_map(
            "dev", collection / "mid", collection
        )

        assert "outside" not in variables
        assert variables["shared"] == "mid"

    @pytest.mark.asyncio
    async def test_unknown_environment_is_empty(
        self, resolver: EnvironmentResolver, collection: Path
    ) -> None:
        variables = await resolver.get_environment_variables("qa", collection, collection)

        assert variables == []

    @pytest.mark.asyncio
    async def test_malformed_files_contribute_nothing(self, tmp_path: Path) -> None:
        root = tmp_path / "api"
        _write_env(root, {"dev": {"host": "example.com"}})
        _write_env(root / "broken", "{not json")
        _write_env(root / "broken" / "wrong", '["dev"]')
        hook = MagicMock()
        resolver = EnvironmentResolver(LocalFileSystem(), metrics_hook=hook)

        variables = await resolver.get_environment_variables_map(
            "dev", root / "broken" / "wrong", root
        )

        assert variables == {"host": "example.com"}
        hook.increment.assert_any_call(names.ENVIRONMENT_FILE_ERRORS_TOTAL)

    @pytest.mark.asyncio
    async def test_non_string_values_become_json_text(self, tmp_path: Path) -> None:
        _write_env(tmp_path, {"dev": {"port": 8080, "debug": True, "tags": ["a"]}})
        resolver = EnvironmentResolver(LocalFileSystem())

        variables = await resolver.get_environment_variables_map(
            "dev", tmp_path, tmp_path
        )

        assert variables == {"port": "8080", "debug": "true", "tags": '["a"]'}


class TestListAvailableEnvironments:
    @pytest.mark.asyncio
    async def test_names_with_nearest_source(
        self, resolver: EnvironmentResolver, collection: Path
    ) -> None:
        environments = await resolver.list_available_environments(
            collection / "mid" / "leaf", collection
        )

        assert [(e.name, e.source, e.is_from_current_folder) for e in environments] == [
            ("dev", "leaf", True),
            ("prod", "leaf", True),
            ("staging", "root", False),
        ]


def test_folder_chain() -> None:
    assert folder_chain("/r/a/b", "/r") == [Path("/r/a/b"), Path("/r/a"), Path("/r")]
    assert folder_chain("/r", "/r") == [Path("/r")]
    assert folder_chain("/elsewhere/x", "/r") == [Path("/elsewhere/x")]
