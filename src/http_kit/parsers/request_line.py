from .models import RequestLine
from .syntax import REQUEST_LINE_PATTERN, is_comment, is_indented


def parse_request_line(
    lines: list[str], start_index: int, end_index: int
) -> RequestLine | None:
    """Find the verb + URL of a section.

    `start_index`/`end_index` are 0-based list positions bounding the section
    body (marker excluded). Leading blank, comment and `@` lines are skipped;
    the first other line either is a request line or the section has none.

    The URL may continue on following lines that are indented or are comments.
    Comment lines extend the request range but contribute nothing to the URL.
    """
    for index in range(start_index, end_index):
        stripped = lines[index].strip()

        if not stripped or is_comment(stripped) or stripped.startswith("@"):
            continue

        match = REQUEST_LINE_PATTERN.match(stripped)
        if match is None:
            return None

        verb, first_part = match.group(1), match.group(2).strip()
        url_parts = [first_part]
        end_line = index + 2

        for next_index in range(index + 1, end_index):
            line = lines[next_index]
            next_stripped = line.strip()

            if not next_stripped:
                break

            comment = is_comment(next_stripped)
            if not (comment or is_indented(line)):
                break

            end_line = next_index + 2
            if not comment:
                url_parts.append(next_stripped)

        return RequestLine(
            verb=verb,
            url="".join(url_parts),
            start_line=index + 1,
            end_line=end_line,
        )

    return None
