import sys
from typing import Optional, Tuple

from .config import Config
from .errors import TransmissionError
from .models import TERMINATOR, RawResponse, Stream

CONTENT_LENGTH = "content-length:"


def is_unsigned(text: str) -> bool:
    digits = text[1:] if text.startswith("+") else text
    return digits.isascii() and digits.isdigit()


def parse_content_length(header_bytes: bytes) -> Optional[int]:
    """
    Return the value of the first usable Content-Length line, if any.
    Names match case-insensitively; the value ends at the next colon and
    lines with a non-numeric value are skipped.
    """
    text = header_bytes.decode("iso-8859-1")
    for line in text.split("\n"):
        if not line.lower().startswith(CONTENT_LENGTH):
            continue
        value = line[len(CONTENT_LENGTH):].split(":", 1)[0].strip()
        if is_unsigned(value):
            return int(value)
    return None


class ResponseReader:
    STATE_READ_HEADERS = 1
    STATE_READ_BODY = 2
    STATE_END = 3

    def __init__(self, config: Config) -> None:
        self.config = config
        self.state = ResponseReader.STATE_READ_HEADERS

    def read(self, conn: Stream) -> RawResponse:
        self.state = ResponseReader.STATE_READ_HEADERS
        header_bytes, surplus = self._read_headers(conn)

        response = RawResponse(header_bytes=header_bytes)
        if not response.complete:
            # Peer closed before the blank line: keep what arrived.
            self._debug(f"Stream ended inside headers after {len(header_bytes)} bytes")
            self.state = ResponseReader.STATE_END
            return response

        self._debug(f"Received response headers, {len(header_bytes)} bytes")
        self.state = ResponseReader.STATE_READ_BODY

        declared = parse_content_length(header_bytes)
        self._debug(f"Content-Length: {declared}")
        if declared is not None:
            body = self._read_exact(conn, declared, surplus)
        else:
            self._debug("No Content-Length, reading until the connection closes")
            body = self._read_to_end(conn, surplus)

        self.state = ResponseReader.STATE_END
        response.body_bytes = body
        response.declared_length = declared
        self._debug(f"Received response body, {len(body)} bytes")
        if response.truncated:
            self._debug(f"Connection closed {declared - len(body)} bytes short of Content-Length")
        return response

    def _read_headers(self, conn: Stream) -> Tuple[bytes, bytes]:
        buf = bytearray()
        scanned = 0
        while True:
            # Back up so a terminator split across two reads is still found.
            pos = buf.find(TERMINATOR, max(0, scanned - len(TERMINATOR) + 1))
            if pos != -1:
                end = pos + len(TERMINATOR)
                return bytes(buf[:end]), bytes(buf[end:])
            scanned = len(buf)

            chunk = self._recv(conn, self.config.chunk_size)
            if chunk == b"":
                return bytes(buf), b""
            buf.extend(chunk)

    def _read_exact(self, conn: Stream, length: int, surplus: bytes) -> bytes:
        buf = bytearray(surplus[:length])
        while len(buf) < length:
            chunk = self._recv(conn, min(self.config.chunk_size, length - len(buf)))
            if chunk == b"":
                break
            buf.extend(chunk)
        return bytes(buf)

    def _read_to_end(self, conn: Stream, surplus: bytes) -> bytes:
        buf = bytearray(surplus)
        while True:
            chunk = self._recv(conn, self.config.chunk_size)
            if chunk == b"":
                return bytes(buf)
            buf.extend(chunk)

    @staticmethod
    def _recv(conn: Stream, size: int) -> bytes:
        try:
            return conn.recv(size)
        except OSError as e:
            raise TransmissionError(f"failed to read response: {e}") from e

    def _debug(self, message: str) -> None:
        if self.config.debug:
            print(message, file=sys.stderr)
