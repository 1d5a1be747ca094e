# parsers/http_parser.py

import logging
from time import monotonic

from http_kit.observability import names
from http_kit.observability.base import MetricsHook, NoOpMetricsHook

from .headers_body import RequestParts, parse_headers_and_body
from .models import ParsedFile, Preamble, Section
from .request_line import parse_request_line
from .syntax import SECTION_MARKER, is_section_marker
from .variables import extract_variables

logger = logging.getLogger(__name__)


def parse_http_file(
    content: str,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedFile:
    """
    Parse a request file into its preamble and `###`-delimited sections.

    Requirements:
    - Deterministic output for same input
    - Line numbers are 1-indexed and file-global
    - Nothing is cached between calls
    """
    start = monotonic()
    lines = content.split("\n")
    marker_indices = [i for i, line in enumerate(lines) if is_section_marker(line)]

    preamble_end = marker_indices[0] + 1 if marker_indices else len(lines) + 1
    preamble = _build_preamble(lines, 1, preamble_end)

    sections: list[Section] = []
    dropped = 0

    for position, marker_index in enumerate(marker_indices):
        is_last = position == len(marker_indices) - 1
        end_index = len(lines) if is_last else marker_indices[position + 1]

        section = _parse_section(lines, marker_index, end_index)

        if section.is_divider and (position == 0 or is_last):
            # banners at the top or bottom of a file are not requests
            dropped += 1
            continue

        sections.append(section)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
    metrics_hook.increment(names.SECTIONS_PARSED, len(sections))
    if dropped:
        metrics_hook.increment(names.DIVIDERS_DROPPED, dropped)

    logger.debug(
        "Parsed %d lines into %d sections (%d dividers dropped)",
        len(lines),
        len(sections),
        dropped,
    )
    return ParsedFile(preamble=preamble, sections=sections, lines=lines)


def _parse_section(lines: list[str], marker_index: int, end_index: int) -> Section:
    name = lines[marker_index][len(SECTION_MARKER) :].strip()
    request = parse_request_line(lines, marker_index + 1, end_index)

    if request is None:
        return Section(
            name=name,
            start_line=marker_index + 1,
            end_line=end_index + 1,
            is_divider=True,
        )

    preamble = None
    preamble_start = marker_index + 2
    if preamble_start < request.start_line:
        preamble = _build_preamble(lines, preamble_start, request.start_line)

    parts: RequestParts = parse_headers_and_body(
        lines, request.end_line - 1, end_index
    )

    return Section(
        name=name,
        start_line=marker_index + 1,
        end_line=end_index + 1,
        is_divider=False,
        preamble=preamble,
        verb=request.verb,
        url=request.url,
        request_start_line=request.start_line,
        request_end_line=request.end_line,
        headers=parts.headers,
        body=parts.body,
        post_scripts=parts.post_scripts,
    )


def _build_preamble(lines: list[str], start_line: int, end_line: int) -> Preamble:
    return Preamble(
        start_line=start_line,
        end_line=end_line,
        variables=extract_variables(lines, start_line, end_line),
        options=extract_variables(lines, start_line, end_line, options=True),
    )
