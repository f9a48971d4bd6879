import sys
from typing import Callable, List, Optional

from .config import Config
from .errors import ResolutionError, TransmissionError
from .models import RawResponse, RequestSpec, Stream
from .net import connect, resolve
from .reader import ResponseReader
from .request import build_request


class HTTPClient:
    def __init__(
        self,
        config: Config,
        resolver: Optional[Callable[[str], List[str]]] = None,
        connector: Optional[Callable[[str, int], Stream]] = None,
    ) -> None:
        self.config = config
        self.resolver = resolver or resolve
        self.connector = connector or connect

    def fetch(self, spec: RequestSpec) -> RawResponse:
        address = self._resolve(spec.host)

        if self.config.debug:
            print(f"Connecting to {address} port {spec.port}", file=sys.stderr)
        conn = self.connector(address, spec.port)
        if self.config.debug:
            print(f"Connected to {address} port {spec.port}", file=sys.stderr)

        try:
            return self.exchange(conn, spec)
        finally:
            try:
                conn.close()
            except OSError:
                pass

    def exchange(self, conn: Stream, spec: RequestSpec) -> RawResponse:
        payload = build_request(spec, self.config)
        if self.config.debug:
            print("Sending request:", file=sys.stderr)
            print(payload.decode("utf-8", errors="replace"), file=sys.stderr)

        try:
            conn.sendall(payload)
        except OSError as e:
            raise TransmissionError(f"failed to send request: {e}") from e

        if self.config.debug:
            print(f"Request sent, {len(payload)} bytes", file=sys.stderr)

        return ResponseReader(self.config).read(conn)

    def _resolve(self, host: str) -> str:
        addresses = self.resolver(host)
        if not addresses:
            raise ResolutionError(f"no address found for {host!r}")
        if self.config.debug:
            print(f"Resolved {host} to {', '.join(addresses)}", file=sys.stderr)
        # Only the first address is tried.
        return addresses[0]
