from http_kit.parsers import PostScript
from http_kit.scripts import extract_script_code


def test_single_line_script() -> None:
    lines = ['> {% console.log("hi") %}']

    code = extract_script_code(lines, PostScript(1, 2, "script"))

    assert code == 'console.log("hi")'


def test_multi_line_script_is_dedented() -> None:
    lines = [
        "> {%",
        "    if response.body:",
        '        console.log("ok")',
        "%}",
    ]

    code = extract_script_code(lines, PostScript(1, 5, "script"))

    assert code == 'if response.body:\n    console.log("ok")'


def test_unclosed_script_takes_the_rest() -> None:
    lines = ["> {%", "  a = 1", "  b = 2"]

    assert extract_script_code(lines, PostScript(1, 4, "script")) == "a = 1\nb = 2"


def test_empty_script() -> None:
    assert extract_script_code(["> {% %}"], PostScript(1, 2, "script")) == ""


def test_file_post_script_returns_payload() -> None:
    lines = ["GET /x", ">  ./scripts/check.py"]

    code = extract_script_code(lines, PostScript(2, 3, "file"))

    assert code == "./scripts/check.py"
