import re

from .models import BodySection, HeaderSection, ParsedResponse

STATUS_LINE_PATTERN = re.compile(r"^HTTP/[\d.]+\s+(\d{3})")


def parse_http_response(content: str) -> ParsedResponse | None:
    """Parse a rendered response (`HTTP/1.1 200 OK`, headers, blank line, body).

    Returns None when the first line is not a status line.
    """
    lines = content.split("\n")
    status_line = lines[0].strip()
    match = STATUS_LINE_PATTERN.match(status_line)
    if match is None:
        return None

    header_map: dict[str, str] = {}
    header_start = 2
    header_end = header_start
    body_start: int | None = None

    for index in range(1, len(lines)):
        stripped = lines[index].strip()

        if not stripped:
            header_end = index + 1
            body_start = index + 2
            break

        key, separator, value = stripped.partition(":")
        if separator and key.strip():
            header_map[key.strip()] = value.strip()
            header_end = index + 2

    headers = None
    if header_map:
        headers = HeaderSection(
            start_line=header_start, end_line=header_end, headers=header_map
        )

    body = None
    if body_start is not None:
        body_end = body_start
        for index in range(len(lines) - 1, body_start - 2, -1):
            if lines[index].strip():
                body_end = index + 2
                break
        if body_start < body_end:
            body = BodySection(start_line=body_start, end_line=body_end)

    return ParsedResponse(
        code_line=status_line,
        code=int(match.group(1)),
        lines=lines,
        headers=headers,
        body=body,
    )
