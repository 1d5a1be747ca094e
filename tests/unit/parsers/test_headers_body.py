from http_kit.parsers import parse_headers_and_body, parse_request_line


def test_request_line_skips_leading_declarations() -> None:
    lines = ["### A", "", "# comment", "@id=1", "GET /users/{{id}}"]

    request = parse_request_line(lines, 1, len(lines))

    assert request is not None
    assert request.verb == "GET"
    assert request.url == "/users/{{id}}"
    assert (request.start_line, request.end_line) == (5, 6)


def test_request_line_missing() -> None:
    assert parse_request_line(["### A", "get /lowercase"], 1, 2) is None
    assert parse_request_line(["### A", ""], 1, 2) is None


def test_header_value_keeps_later_colons() -> None:
    lines = ["Host: example.com:8080", "Authorization: Basic a:b", ""]

    parts = parse_headers_and_body(lines, 0, len(lines))

    assert parts.headers is not None
    assert parts.headers.headers == {
        "Host": "example.com:8080",
        "Authorization": "Basic a:b",
    }
    assert parts.body is None


def test_body_ends_at_last_content_line() -> None:
    lines = ["", "line one", "// not body", "line two", "", "", "# trailing"]

    parts = parse_headers_and_body(lines, 0, len(lines))

    assert parts.headers is None
    assert parts.body is not None
    assert (parts.body.start_line, parts.body.end_line) == (2, 5)


def test_body_ends_before_first_post_script() -> None:
    lines = ["", "payload", "> {% a = 1 %}", "not body either"]

    parts = parse_headers_and_body(lines, 0, len(lines))

    assert parts.body is not None
    assert (parts.body.start_line, parts.body.end_line) == (2, 3)
    assert len(parts.post_scripts) == 1


def test_file_post_script_spans_one_line() -> None:
    lines = ["", ">   scripts/check.py"]

    parts = parse_headers_and_body(lines, 0, len(lines))

    [script] = parts.post_scripts
    assert (script.start_line, script.end_line, script.kind) == (2, 3, "file")
