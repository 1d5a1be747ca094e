# parsers/models.py

from dataclasses import dataclass, field
from typing import Literal

# Line numbers are 1-indexed, end lines are exclusive.

PostScriptKind = Literal["file", "script"]


@dataclass(frozen=True)
class Preamble:
    start_line: int
    end_line: int
    variables: dict[str, str] = field(default_factory=dict)
    options: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HeaderSection:
    start_line: int
    end_line: int
    headers: dict[str, str]


@dataclass(frozen=True)
class BodySection:
    start_line: int
    end_line: int


@dataclass(frozen=True)
class PostScript:
    start_line: int
    end_line: int
    kind: PostScriptKind


@dataclass(frozen=True)
class RequestLine:
    verb: str
    url: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class Section:
    name: str
    start_line: int
    end_line: int
    is_divider: bool
    preamble: Preamble | None = None
    verb: str | None = None
    url: str | None = None
    request_start_line: int | None = None
    request_end_line: int | None = None
    headers: HeaderSection | None = None
    body: BodySection | None = None
    post_scripts: list[PostScript] = field(default_factory=list)

    def contains(self, line_number: int) -> bool:
        return self.start_line <= line_number < self.end_line


@dataclass(frozen=True)
class ParsedFile:
    preamble: Preamble
    sections: list[Section]
    lines: list[str]

    def section_at(self, line_number: int) -> Section | None:
        for section in self.sections:
            if section.contains(line_number):
                return section
        return None

    def text(self, start_line: int, end_line: int) -> str:
        return "\n".join(self.lines[start_line - 1 : end_line - 1])


@dataclass(frozen=True)
class ParsedResponse:
    code_line: str
    code: int
    lines: list[str]
    headers: HeaderSection | None = None
    body: BodySection | None = None
