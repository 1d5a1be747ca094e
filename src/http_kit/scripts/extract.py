import re
import textwrap

from http_kit.parsers.models import PostScript

_CLOSED_SCRIPT = re.compile(r">\s*\{%([\s\S]*?)%\}")
_OPEN_SCRIPT = re.compile(r">\s*\{%([\s\S]*)")


def extract_script_code(lines: list[str], post_script: PostScript) -> str:
    """Return the code a post-script should run, or "" when it has none.

    Script blocks are dedented as a whole so indented multi-line code keeps
    its relative structure.
    """
    script_lines = lines[post_script.start_line - 1 : post_script.end_line - 1]
    if not script_lines:
        return ""

    if post_script.kind == "script":
        joined = "\n".join(script_lines)
        match = _CLOSED_SCRIPT.search(joined) or _OPEN_SCRIPT.search(joined)
        return textwrap.dedent(match.group(1)).strip() if match else ""

    first_line = script_lines[0]
    return first_line[first_line.index(">") + 1 :].strip()
