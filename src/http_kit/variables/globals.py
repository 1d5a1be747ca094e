import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class GlobalVariables:
    """Runtime variables set by post-scripts, scoped to one collection.

    Create one per active collection and pass it to the executor; call
    `clear()` (or drop the object) when the collection is closed. Values
    outrank every other variable scope during merging.
    """

    def __init__(self, collection_path: str) -> None:
        self.collection_path = collection_path
        self._values: dict[str, str] = {}

    def get(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"Global variable '{name}' not set") from None

    def set(self, name: str, value: str) -> None:
        self._values[name] = value
        logger.debug("Set global variable %s for %s", name, self.collection_path)

    def update(self, changes: Mapping[str, str]) -> None:
        for name, value in changes.items():
            self.set(name, value)

    def delete(self, name: str) -> None:
        try:
            del self._values[name]
            logger.debug("Deleted global variable %s", name)
        except KeyError:
            raise KeyError(f"Global variable '{name}' not set") from None

    def clear(self) -> None:
        self._values.clear()
        logger.debug("Cleared global variables for %s", self.collection_path)

    def as_dict(self) -> dict[str, str]:
        # return a shallow copy to avoid mutation
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
