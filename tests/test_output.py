from client.models import RawResponse
from client.output import format_output

OK = RawResponse(
    header_bytes=b"HTTP/1.1 200 OK\r\nContent-Length: 5\r\n\r\n",
    body_bytes=b"hello",
    declared_length=5,
)


def test_body_only():
    assert format_output(OK, include_headers=False) == "hello"


def test_include_headers():
    assert format_output(OK, include_headers=True) == "HTTP/1.1 200 OK\r\nContent-Length: 5\r\n\r\nhello"


def test_no_terminator_emits_everything():
    partial = RawResponse(header_bytes=b"HTTP/1.1 200 OK\r\nServer")
    assert format_output(partial, include_headers=False) == "HTTP/1.1 200 OK\r\nServer"


def test_invalid_utf8_is_replaced():
    response = RawResponse(header_bytes=b"HTTP/1.1 200 OK\r\n\r\n", body_bytes=b"caf\xff")
    assert format_output(response, include_headers=False) == "caf�"


def test_body_containing_blank_line():
    response = RawResponse(header_bytes=b"HTTP/1.1 200 OK\r\n\r\n", body_bytes=b"a\r\n\r\nb")
    assert format_output(response, include_headers=False) == "a\r\n\r\nb"
