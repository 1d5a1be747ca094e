from .models import (
    PRIVATE_ENV_FILE,
    PUBLIC_ENV_FILE,
    AvailableEnvironment,
    EnvironmentVariable,
)
from .resolver import EnvironmentResolver, folder_chain

__all__ = [
    "AvailableEnvironment",
    "EnvironmentResolver",
    "EnvironmentVariable",
    "PRIVATE_ENV_FILE",
    "PUBLIC_ENV_FILE",
    "folder_chain",
]
