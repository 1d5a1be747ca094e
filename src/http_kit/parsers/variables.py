import re

_WHITESPACE = re.compile(r"\s+")


def extract_variables(
    lines: list[str],
    start_line: int,
    end_line: int,
    *,
    options: bool = False,
) -> dict[str, str]:
    """Collect `@name=value` declarations (or `#@name=value` options).

    Scans the 1-indexed range [start_line, end_line). A declaration is split on
    the first `=`, else on the first whitespace run, else the whole remainder
    is a name with an empty value. Empty names are dropped.
    """
    variables: dict[str, str] = {}

    for line in lines[max(start_line - 1, 0) : max(end_line - 1, 0)]:
        stripped = line.strip()
        remainder = _option_remainder(stripped) if options else _variable_remainder(stripped)
        if remainder is None:
            continue

        name, value = _split_declaration(remainder)
        if name:
            variables[name] = value

    return variables


def _variable_remainder(stripped: str) -> str | None:
    if not stripped.startswith("@"):
        return None
    return stripped[1:]


def _option_remainder(stripped: str) -> str | None:
    # "# @name" is an option too, whitespace between the markers is ignored
    if not stripped.startswith("#"):
        return None
    after_hash = stripped[1:].lstrip()
    if not after_hash.startswith("@"):
        return None
    return after_hash[1:]


def _split_declaration(remainder: str) -> tuple[str, str]:
    if "=" in remainder:
        name, _, value = remainder.partition("=")
        return name.strip(), value.strip()

    remainder = remainder.strip()
    parts = _WHITESPACE.split(remainder, maxsplit=1)
    if len(parts) == 2:
        return parts[0], parts[1].strip()

    return remainder, ""
