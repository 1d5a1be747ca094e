from dataclasses import dataclass, field

from .models import BodySection, HeaderSection, PostScript
from .syntax import POST_SCRIPT_PREFIX, SCRIPT_CLOSE, SCRIPT_OPEN, is_comment


@dataclass(frozen=True)
class RequestParts:
    headers: HeaderSection | None = None
    body: BodySection | None = None
    post_scripts: list[PostScript] = field(default_factory=list)


def parse_headers_and_body(
    lines: list[str], start_index: int, end_index: int
) -> RequestParts:
    """Split what follows a request line into headers, body and post-scripts.

    Everything up to the first blank line is the header block. After it, lines
    opening with `>` are post-scripts and the remaining non-blank, non-comment
    lines before the first post-script make up the body.
    """
    header_map: dict[str, str] = {}
    header_start: int | None = None
    header_end: int | None = None
    body_start: int | None = None
    body_end: int | None = None
    post_scripts: list[PostScript] = []

    index = start_index
    in_headers = True

    while index < end_index:
        stripped = lines[index].strip()

        if in_headers:
            if not stripped:
                in_headers = False
                index += 1
                continue

            if header_start is None:
                header_start = index + 1
            header_end = index + 2

            if not is_comment(stripped):
                key, separator, value = stripped.partition(":")
                if separator and key.strip():
                    header_map[key.strip()] = value.strip()

            index += 1
            continue

        if stripped.startswith(POST_SCRIPT_PREFIX):
            post_script, index = _read_post_script(lines, index, end_index)
            post_scripts.append(post_script)
            index += 1
            continue

        if post_scripts or not stripped or is_comment(stripped):
            index += 1
            continue

        if body_start is None:
            body_start = index + 1
        body_end = index + 2
        index += 1

    headers = None
    if header_map and header_start is not None and header_end is not None:
        headers = HeaderSection(
            start_line=header_start, end_line=header_end, headers=header_map
        )

    body = None
    if body_start is not None and body_end is not None and body_start < body_end:
        body = BodySection(start_line=body_start, end_line=body_end)

    return RequestParts(headers=headers, body=body, post_scripts=post_scripts)


def _read_post_script(
    lines: list[str], index: int, end_index: int
) -> tuple[PostScript, int]:
    """Return the post-script opening at `index` and the last index it covers."""
    payload = lines[index].strip()[len(POST_SCRIPT_PREFIX) :].strip()

    if not payload.startswith(SCRIPT_OPEN):
        return PostScript(start_line=index + 1, end_line=index + 2, kind="file"), index

    if SCRIPT_CLOSE in payload[len(SCRIPT_OPEN) :]:
        return PostScript(start_line=index + 1, end_line=index + 2, kind="script"), index

    for close_index in range(index + 1, end_index):
        if SCRIPT_CLOSE in lines[close_index]:
            script = PostScript(
                start_line=index + 1, end_line=close_index + 2, kind="script"
            )
            return script, close_index

    # unclosed: runs to the end of the section
    last_index = max(end_index - 1, index)
    script = PostScript(start_line=index + 1, end_line=last_index + 2, kind="script")
    return script, last_index
