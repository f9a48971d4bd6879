from typing import List, Optional

from .config import Config
from .models import RequestSpec

IMPLIED_PORTS = (80, 443)


def effective_method(explicit_method: Optional[str], body: bytes) -> str:
    if explicit_method is not None:
        return explicit_method
    return "POST" if body else "GET"


def host_header(host: str, port: int) -> str:
    # 80 and 443 are treated as implied whatever the scheme was.
    if port in IMPLIED_PORTS:
        return f"Host: {host}"
    return f"Host: {host}:{port}"


def build_head(spec: RequestSpec, config: Config) -> List[str]:
    lines = [
        f"{spec.method} {spec.path_query} {config.http_version}",
        host_header(spec.host, spec.port),
        f"User-Agent: {config.user_agent}",
        "Accept: */*",
    ]
    lines.extend(spec.headers)
    if spec.body:
        lines.append(f"Content-Length: {len(spec.body)}")
    return lines


def build_request(spec: RequestSpec, config: Optional[Config] = None) -> bytes:
    if config is None:
        config = Config()

    buf = bytearray()
    for line in build_head(spec, config):
        buf.extend(_encode_line(line))
        buf.extend(b"\r\n")
    buf.extend(b"\r\n")
    buf.extend(spec.body)
    return bytes(buf)


def _encode_line(line: str) -> bytes:
    try:
        return line.encode("iso-8859-1")
    except UnicodeEncodeError:
        return line.encode("utf-8")
