import socket
from typing import List

from .errors import ConnectError, ResolutionError


def resolve(host: str) -> List[str]:
    try:
        infos = socket.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(f"cannot resolve {host!r}: {e}") from e

    addresses: List[str] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        address = sockaddr[0]
        if address not in addresses:
            addresses.append(address)
    return addresses


def connect(address: str, port: int) -> socket.socket:
    try:
        conn = socket.create_connection((address, port))
    except OSError as e:
        raise ConnectError(f"cannot connect to {_display(address, port)}: {e}") from e

    try:
        conn.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
    except OSError:
        pass
    return conn


def _display(address: str, port: int) -> str:
    if ":" in address:
        return f"[{address}]:{port}"
    return f"{address}:{port}"
