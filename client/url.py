from typing import Tuple

from .errors import InvalidPort, InvalidScheme

SCHEMES = (("http://", 80), ("https://", 443))


def parse_url(url: str) -> Tuple[str, int, str]:
    """
    Split an http(s) URL into (host, port, path_query).
    The fragment is dropped; IPv6 literals and percent-encoding are not handled.
    """
    for prefix, default_port in SCHEMES:
        if url.startswith(prefix):
            rest = url[len(prefix):]
            break
    else:
        raise InvalidScheme(f"URL must start with http:// or https://: {url!r}")

    rest = rest.split("#", 1)[0]

    host_port, slash, path = rest.partition("/")
    path_query = slash + path if slash else "/"

    if ":" in host_port:
        host, _, port_text = host_port.partition(":")
        port = _parse_port(port_text)
    else:
        host, port = host_port, default_port

    return host, port, path_query


def _parse_port(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidPort(f"port must be a number: {text!r}")
    port = int(text)
    if port > 0xFFFF:
        raise InvalidPort(f"port out of range: {port}")
    return port
