"""Parsers for request files and rendered responses.

All parsers are pure functions of their input text: no I/O, no caching,
safe to call concurrently for independent files.
"""

from .headers_body import RequestParts, parse_headers_and_body
from .http_parser import parse_http_file
from .models import (
    BodySection,
    HeaderSection,
    ParsedFile,
    ParsedResponse,
    PostScript,
    PostScriptKind,
    Preamble,
    RequestLine,
    Section,
)
from .request_line import parse_request_line
from .response_parser import parse_http_response
from .syntax import HTTP_VERBS, SECTION_MARKER
from .variables import extract_variables

__all__ = [
    # Entry points
    "parse_http_file",
    "parse_http_response",
    "parse_request_line",
    "parse_headers_and_body",
    "extract_variables",
    # Models
    "BodySection",
    "HeaderSection",
    "ParsedFile",
    "ParsedResponse",
    "PostScript",
    "PostScriptKind",
    "Preamble",
    "RequestLine",
    "RequestParts",
    "Section",
    # Syntax
    "HTTP_VERBS",
    "SECTION_MARKER",
]
