from http_kit.parsers import parse_http_response


def test_parses_status_headers_and_body() -> None:
    content = 'HTTP/1.1 200 OK\nContent-Type: application/json\nX-Id: 7\n\n{"ok": true}\n\n'

    response = parse_http_response(content)

    assert response is not None
    assert response.code == 200
    assert response.code_line == "HTTP/1.1 200 OK"
    assert response.headers is not None
    assert response.headers.headers == {"Content-Type": "application/json", "X-Id": "7"}
    assert (response.headers.start_line, response.headers.end_line) == (2, 4)
    assert response.body is not None
    assert (response.body.start_line, response.body.end_line) == (5, 6)


def test_status_only() -> None:
    response = parse_http_response("HTTP/2 204")

    assert response is not None
    assert response.code == 204
    assert response.headers is None
    assert response.body is None


def test_non_status_line_returns_none() -> None:
    assert parse_http_response("Error\nconnection refused") is None
