# tests/unit/workspace/test_scanner.py

from pathlib import Path

import pytest

from http_kit.filesystem import LocalFileSystem
from http_kit.workspace import scan_collection


@pytest.fixture
def collection(tmp_path: Path) -> Path:
    root = tmp_path / "api"
    (root / "users").mkdir(parents=True)
    (root / "orders").mkdir()
    (root / ".git").mkdir()

    (root / "http-client.env.json").write_text("{}", encoding="utf-8")
    (root / "README.md").write_text("# API", encoding="utf-8")
    (root / "notes.txt").write_text("", encoding="utf-8")
    (root / "users.http").write_text(
        "### List\nGET /users\n### Get\nGET /users/1", encoding="utf-8"
    )
    (root / "users" / "create.http").write_text("###\nPOST /users", encoding="utf-8")
    (root / "users" / "http-client.private.env.json").write_text("{}", encoding="utf-8")
    return root


@pytest.mark.asyncio
async def test_scan_builds_tree(collection: Path) -> None:
    root = await scan_collection(collection, LocalFileSystem())

    assert root.title == "root"
    assert root.folder_path == str(collection)
    assert root.has_readme
    assert root.environments is not None
    assert root.environments.has_public_env
    assert not root.environments.has_private_env

    assert root.items is not None
    assert [item.title for item in root.items] == ["orders", "users"]


@pytest.mark.asyncio
async def test_folder_and_file_with_same_name_merge(collection: Path) -> None:
    root = await scan_collection(collection, LocalFileSystem())
    users = root.items[1]

    assert users.folder_path == str(collection / "users")
    assert users.file_path == str(collection / "users.http")
    assert users.sections is None
    assert not users.has_readme
    assert users.environments is not None
    assert users.environments.has_private_env
    assert not users.environments.has_public_env

    [create] = users.items
    assert create.title == "create"
    assert create.folder_path is None
    assert create.file_path == str(collection / "users" / "create.http")


@pytest.mark.asyncio
async def test_empty_folder_has_no_environments(collection: Path) -> None:
    root = await scan_collection(collection, LocalFileSystem())
    orders = root.items[0]

    assert orders.items == []
    assert orders.environments is None


@pytest.mark.asyncio
async def test_include_sections(collection: Path) -> None:
    root = await scan_collection(collection, LocalFileSystem(), include_sections=True)
    users = root.items[1]

    assert [section.name for section in users.sections] == ["List", "Get"]
    assert users.items[0].sections[0].verb == "POST"


@pytest.mark.asyncio
async def test_deep_nesting(tmp_path: Path) -> None:
    folder = tmp_path
    for depth in range(200):
        folder = folder / f"d{depth}"
    folder.mkdir(parents=True)
    (folder / "leaf.http").write_text("###\nGET /deep", encoding="utf-8")

    item = await scan_collection(tmp_path, LocalFileSystem())
    for _ in range(200):
        [item] = item.items

    [leaf] = item.items
    assert leaf.title == "leaf"


@pytest.mark.asyncio
async def test_unreadable_file_keeps_scanning(tmp_path: Path) -> None:
    (tmp_path / "bad.http").write_bytes(b"### a\nGET http://x/\xff\n")
    (tmp_path / "good.http").write_text("### ok\nGET /ok", encoding="utf-8")

    root = await scan_collection(tmp_path, LocalFileSystem(), include_sections=True)

    bad, good = root.items
    assert (bad.title, good.title) == ("bad", "good")
    assert bad.sections is None
    assert good.sections[0].verb == "GET"
