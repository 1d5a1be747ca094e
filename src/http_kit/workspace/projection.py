# src/http_kit/workspace/projection.py

"""Flat, indented rows for showing a collection tree.

Environment rows and spacer dividers are display artifacts. They are added
here and never appear in scanner or parser output.
"""

from collections.abc import Callable
from dataclasses import dataclass

from http_kit.parsers.models import Section

from .models import CollectionItem, EnvironmentConfig

ENVIRONMENTS_TITLE = "Environments"

_SHORT_VERBS = {"PATCH": "PTCH", "DELETE": "DEL", "OPTIONS": "OPT"}


@dataclass(frozen=True)
class DisplayItem:
    item: CollectionItem
    indent: int
    is_section: bool = False
    is_folder: bool = False
    is_file: bool = False
    has_children: bool = False
    is_environment: bool = False
    section: Section | None = None
    folder_path: str | None = None
    file_key: str | None = None
    environment_config: EnvironmentConfig | None = None


def format_verb(verb: str) -> str:
    """Shorten a verb to at most four letters for a fixed-width column."""
    upper = verb.upper()
    return _SHORT_VERBS.get(upper, upper[:4])


def flatten_collection(
    root: CollectionItem, is_collapsed: Callable[[str], bool]
) -> list[DisplayItem]:
    """Flatten a scanned collection into display rows.

    The first row is always the collection's own "Environments" row, even
    when the root carries no environment files.

    Args:
        root: Output of `scan_collection`.
        is_collapsed: Given a folder or file path, whether its children are hidden.
    """
    environments = root.environments or EnvironmentConfig(
        folder_path=root.folder_path or "",
        has_public_env=False,
        has_private_env=False,
    )
    rows = [_environment_row(environments, indent=0)]
    rows.extend(_flatten_items(root.items or [], 0, is_collapsed))
    return rows


def _flatten_items(
    items: list[CollectionItem], depth: int, is_collapsed: Callable[[str], bool]
) -> list[DisplayItem]:
    rows: list[DisplayItem] = []
    # (siblings, next index, depth); children are pushed above their siblings
    stack: list[tuple[list[CollectionItem], int, int]] = [(items, 0, depth)]

    while stack:
        siblings, index, depth = stack.pop()
        if index >= len(siblings):
            continue
        stack.append((siblings, index + 1, depth))
        item = siblings[index]

        has_sections = item.is_file and bool(item.sections)
        has_sub_items = item.is_folder and bool(item.items)
        has_environments = item.environments is not None

        rows.append(
            DisplayItem(
                item=item,
                indent=depth,
                is_folder=item.is_folder,
                is_file=item.is_file,
                has_children=(item.is_folder and (has_sub_items or has_environments))
                or has_sections,
                folder_path=item.folder_path,
                file_key=item.file_path,
                environment_config=item.environments,
            )
        )

        if is_collapsed(item.folder_path or item.file_path or ""):
            continue

        if has_sections:
            rows.extend(
                _section_row(item, section, depth) for section in item.sections or []
            )
            if has_environments or has_sub_items:
                rows.append(_spacer_row(depth))

        if item.environments is not None:
            rows.append(_environment_row(item.environments, indent=depth + 1))

        if has_sub_items:
            stack.append((item.items or [], 0, depth + 1))

    return rows


def _section_row(item: CollectionItem, section: Section, depth: int) -> DisplayItem:
    # Untitled sections fall back to their URL for display
    title = section.name or section.url or ""
    return DisplayItem(
        item=CollectionItem(
            title=title,
            file_path=None if section.is_divider else item.file_path,
        ),
        indent=depth,
        is_section=True,
        section=section,
    )


def _spacer_row(depth: int) -> DisplayItem:
    return DisplayItem(
        item=CollectionItem(title=""),
        indent=depth,
        is_section=True,
        section=Section(name="", start_line=0, end_line=0, is_divider=True),
    )


def _environment_row(environments: EnvironmentConfig, *, indent: int) -> DisplayItem:
    return DisplayItem(
        item=CollectionItem(title=ENVIRONMENTS_TITLE, environments=environments),
        indent=indent,
        is_environment=True,
        environment_config=environments,
    )
