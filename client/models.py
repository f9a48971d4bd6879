from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple

TERMINATOR = b"\r\n\r\n"


class Stream(Protocol):
    def recv(self, size: int) -> bytes: ...

    def sendall(self, data: bytes) -> None: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class RequestSpec:
    method: str
    host: str
    port: int
    path_query: str
    headers: Tuple[str, ...] = field(default_factory=tuple)
    body: bytes = b""


@dataclass
class RawResponse:
    header_bytes: bytes = b""
    body_bytes: bytes = b""
    declared_length: Optional[int] = None

    @property
    def raw(self) -> bytes:
        return self.header_bytes + self.body_bytes

    @property
    def complete(self) -> bool:
        return self.header_bytes.endswith(TERMINATOR)

    @property
    def truncated(self) -> bool:
        # Informational only; a short body is still a usable response.
        if self.declared_length is None:
            return False
        return len(self.body_bytes) < self.declared_length
