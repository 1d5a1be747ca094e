from .globals import GlobalVariables
from .merger import merge_variables
from .substitution import (
    PLACEHOLDER_PATTERN,
    SubstitutionCycleError,
    substitute_variables,
)

__all__ = [
    "GlobalVariables",
    "PLACEHOLDER_PATTERN",
    "SubstitutionCycleError",
    "merge_variables",
    "substitute_variables",
]
