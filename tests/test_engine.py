import pytest

from client.config import Config
from client.engine import HTTPClient
from client.errors import ConnectError, ResolutionError, TransmissionError
from client.models import RequestSpec
from tests.fakes import FakeConn

SPEC = RequestSpec(method="GET", host="example.com", port=8080, path_query="/x")
REPLY = b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\n\r\nok"


class Recorder:
    def __init__(self, conn, addresses=("10.0.0.1", "10.0.0.2")):
        self.conn = conn
        self.addresses = list(addresses)
        self.resolved = []
        self.connected = []

    def resolve(self, host):
        self.resolved.append(host)
        return self.addresses

    def connect(self, address, port):
        self.connected.append((address, port))
        return self.conn


def make_client(recorder, debug=False):
    return HTTPClient(Config(debug=debug), resolver=recorder.resolve, connector=recorder.connect)


def test_fetch_uses_first_address_and_closes():
    conn = FakeConn([REPLY])
    recorder = Recorder(conn)
    response = make_client(recorder).fetch(SPEC)

    assert recorder.resolved == ["example.com"]
    assert recorder.connected == [("10.0.0.1", 8080)]
    assert conn.sent.startswith(b"GET /x HTTP/1.1\r\nHost: example.com:8080\r\n")
    assert response.body_bytes == b"ok"
    assert conn.closed


def test_fetch_no_addresses():
    recorder = Recorder(FakeConn(), addresses=())
    with pytest.raises(ResolutionError):
        make_client(recorder).fetch(SPEC)
    assert recorder.connected == []


def test_fetch_connect_failure():
    def refuse(address, port):
        raise ConnectError(f"cannot connect to {address}:{port}")

    client = HTTPClient(Config(debug=False), resolver=lambda host: ["127.0.0.1"], connector=refuse)
    with pytest.raises(ConnectError):
        client.fetch(SPEC)


def test_send_failure_closes_connection():
    conn = FakeConn(fail_on_send=True)
    with pytest.raises(TransmissionError):
        make_client(Recorder(conn)).fetch(SPEC)
    assert conn.closed


def test_read_failure_closes_connection():
    conn = FakeConn(fail_on_recv=True)
    with pytest.raises(TransmissionError):
        make_client(Recorder(conn)).fetch(SPEC)
    assert conn.closed


def test_debug_messages(capsys):
    make_client(Recorder(FakeConn([REPLY])), debug=True).fetch(SPEC)
    err = capsys.readouterr().err
    assert "Connecting to 10.0.0.1 port 8080" in err
    assert "GET /x HTTP/1.1" in err
