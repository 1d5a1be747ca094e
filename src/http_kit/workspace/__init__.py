from .models import CollectionItem, EnvironmentConfig
from .projection import DisplayItem, flatten_collection, format_verb
from .scanner import scan_collection

__all__ = [
    "CollectionItem",
    "DisplayItem",
    "EnvironmentConfig",
    "flatten_collection",
    "format_verb",
    "scan_collection",
]
