from dataclasses import dataclass

PUBLIC_ENV_FILE = "http-client.env.json"
PRIVATE_ENV_FILE = "http-client.private.env.json"
ENV_FILE_NAMES = (PUBLIC_ENV_FILE, PRIVATE_ENV_FILE)

ROOT_SOURCE = "root"


@dataclass(frozen=True)
class EnvironmentVariable:
    """A resolved environment variable with its provenance.

    `parent_*` fields describe the nearest farther folder that also defines
    the name, and are only set when `is_overridden` is true.
    """

    name: str
    value: str
    is_private: bool
    source: str
    is_inherited: bool
    is_overridden: bool
    is_editable: bool
    parent_value: str | None = None
    parent_source: str | None = None
    parent_is_private: bool | None = None


@dataclass(frozen=True)
class AvailableEnvironment:
    name: str
    source: str
    is_from_current_folder: bool
