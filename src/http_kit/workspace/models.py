# src/http_kit/workspace/models.py

from dataclasses import dataclass, field

from http_kit.parsers.models import Section

ROOT_TITLE = "root"
HTTP_FILE_SUFFIX = ".http"
README_SUFFIX = ".md"


@dataclass(frozen=True)
class EnvironmentConfig:
    """Which environment files a folder carries."""

    folder_path: str
    has_public_env: bool
    has_private_env: bool


@dataclass
class CollectionItem:
    """One node of a scanned collection.

    A node can be a folder, a request file, or both when `users/` and
    `users.http` sit side by side.
    """

    title: str
    folder_path: str | None = None
    file_path: str | None = None
    items: list["CollectionItem"] | None = None
    sections: list[Section] | None = None
    environments: EnvironmentConfig | None = None
    has_readme: bool = False

    @property
    def is_folder(self) -> bool:
        return self.folder_path is not None

    @property
    def is_file(self) -> bool:
        return self.file_path is not None
