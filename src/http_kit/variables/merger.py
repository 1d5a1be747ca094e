from collections.abc import Mapping

from http_kit.parsers.models import ParsedFile, Section


def merge_variables(
    parsed_file: ParsedFile,
    section: Section,
    environment_variables: Mapping[str, str],
    global_variables: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Flatten every variable scope visible to `section` into one map.

    Precedence, highest first: runtime globals, the section's own preamble,
    the file preamble, the first sibling section defining the name, the
    environment.
    """
    merged = dict(environment_variables)

    for other in parsed_file.sections:
        if other is section or other.preamble is None:
            continue
        for name, value in other.preamble.variables.items():
            merged.setdefault(name, value)

    merged.update(parsed_file.preamble.variables)

    if section.preamble is not None:
        merged.update(section.preamble.variables)

    if global_variables:
        merged.update(global_variables)

    return merged
