import re
from collections.abc import Mapping

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^}]+?)\s*\}\}")


class SubstitutionCycleError(ValueError):
    """A variable refers back to itself, directly or through other variables."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"Variable substitution loop detected for: {variable}")
        self.variable = variable


def substitute_variables(text: str, variables: Mapping[str, str]) -> str:
    """Replace every `{{ name }}` in `text` with its fully expanded value.

    Undefined names are left as they are. Values may themselves contain
    placeholders and are expanded before being inserted.

    Raises:
        SubstitutionCycleError: If expanding a name requires that same name.
    """
    expanded: dict[str, str] = {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1).strip()
        if name not in variables:
            return match.group(0)
        return _expand(name, variables, expanded)

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def _references(value: str) -> list[str]:
    return [match.group(1).strip() for match in PLACEHOLDER_PATTERN.finditer(value)]


def _expand(name: str, variables: Mapping[str, str], expanded: dict[str, str]) -> str:
    # Depth-first over an explicit stack so long chains never hit the recursion limit.
    stack = [name]
    active = {name}

    while stack:
        current = stack[-1]
        pending = next(
            (
                ref
                for ref in _references(variables[current])
                if ref in variables and ref not in expanded
            ),
            None,
        )

        if pending is not None:
            if pending in active:
                raise SubstitutionCycleError(pending)
            stack.append(pending)
            active.add(pending)
            continue

        expanded[current] = PLACEHOLDER_PATTERN.sub(
            lambda m: expanded.get(m.group(1).strip(), m.group(0)),
            variables[current],
        )
        stack.pop()
        active.discard(current)

    return expanded[name]
