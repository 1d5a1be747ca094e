"""Lexical rules shared by the request-file parsers."""

import re

SECTION_MARKER = "###"

HTTP_VERBS = (
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    "HEAD",
    "OPTIONS",
    "TRACE",
    "CONNECT",
)

REQUEST_LINE_PATTERN = re.compile(rf"^({'|'.join(HTTP_VERBS)})\s+(.*)$")

POST_SCRIPT_PREFIX = ">"
SCRIPT_OPEN = "{%"
SCRIPT_CLOSE = "%}"


def is_section_marker(line: str) -> bool:
    return line.startswith(SECTION_MARKER)


def is_comment(stripped: str) -> bool:
    return stripped.startswith("#") or stripped.startswith("//")


def is_indented(line: str) -> bool:
    return line[:1] in (" ", "\t")
