import pytest

from http_kit.parsers import Section
from http_kit.workspace import (
    CollectionItem,
    EnvironmentConfig,
    flatten_collection,
    format_verb,
)


@pytest.fixture
def root() -> CollectionItem:
    create = CollectionItem(title="create", file_path="/c/users/create.http", sections=[])
    users = CollectionItem(
        title="users",
        folder_path="/c/users",
        file_path="/c/users.http",
        items=[create],
        sections=[
            Section("List", 1, 3, is_divider=False, verb="GET", url="/users"),
            Section("", 3, 5, is_divider=False, verb="GET", url="/users/1"),
            Section(name="Notes", start_line=5, end_line=7, is_divider=True),
        ],
        environments=EnvironmentConfig("/c/users", False, True),
    )
    return CollectionItem(title="root", folder_path="/c", items=[users])


def test_flatten_expanded(root: CollectionItem) -> None:
    rows = flatten_collection(root, lambda key: False)

    assert [(row.item.title, row.indent) for row in rows] == [
        ("Environments", 0),
        ("users", 0),
        ("List", 0),
        ("/users/1", 0),
        ("Notes", 0),
        ("", 0),
        ("Environments", 1),
        ("create", 1),
    ]

    root_env = rows[0]
    assert root_env.is_environment
    assert root_env.environment_config == EnvironmentConfig("/c", False, False)

    users = rows[1]
    assert users.is_folder and users.is_file and users.has_children
    assert users.file_key == "/c/users.http"

    assert rows[2].item.file_path == "/c/users.http"
    assert rows[4].item.file_path is None
    assert rows[5].section is not None and rows[5].section.is_divider
    assert rows[6].environment_config == EnvironmentConfig("/c/users", False, True)
    assert not rows[7].has_children


def test_flatten_collapsed(root: CollectionItem) -> None:
    rows = flatten_collection(root, lambda key: key == "/c/users")

    assert [row.item.title for row in rows] == ["Environments", "users"]


def test_scanned_tree_is_not_modified(root: CollectionItem) -> None:
    flatten_collection(root, lambda key: False)

    assert [item.title for item in root.items] == ["users"]
    assert len(root.items[0].sections) == 3


def test_deeply_nested_folders() -> None:
    leaf = CollectionItem(title="level-1499", folder_path="/c/1499")
    for level in range(1498, -1, -1):
        leaf = CollectionItem(
            title=f"level-{level}", folder_path=f"/c/{level}", items=[leaf]
        )
    root = CollectionItem(title="root", folder_path="/c", items=[leaf])

    rows = flatten_collection(root, lambda key: False)

    assert len(rows) == 1501
    assert rows[1].item.title == "level-0"
    assert rows[-1].item.title == "level-1499"
    assert rows[-1].indent == 1499

@pytest.mark.parametrize(
    ("verb", "expected"),
    [
        ("GET", "GET"),
        ("post", "POST"),
        ("PATCH", "PTCH"),
        ("DELETE", "DEL"),
        ("OPTIONS", "OPT"),
        ("CONNECT", "CONN"),
    ],
)
def test_format_verb(verb: str, expected: str) -> None:
    assert format_verb(verb) == expected
