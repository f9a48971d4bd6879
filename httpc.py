import argparse
import sys
from typing import List, Optional

from client.config import Config
from client.engine import HTTPClient
from client.errors import ClientError, InvalidArgument
from client.models import RequestSpec
from client.output import format_output
from client.request import effective_method
from client.url import parse_url

URL_FORMAT = "URL format: http://host[:port]/path[?query][#fragment]"


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise InvalidArgument(message)


def make_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="httpc", description="A minimal HTTP/1.1 client", epilog=URL_FORMAT)
    parser.add_argument("-H", dest="headers", metavar="<header>", action="append", default=[], help="add a raw request header line")
    parser.add_argument("-X", dest="method", metavar="<method>", default=None, help="request method (default: GET, or POST with -d)")
    parser.add_argument("-d", dest="data", metavar="<data>", default="", help="send data as the request body")
    parser.add_argument("-i", dest="include", action="store_true", help="include response headers in the output")
    parser.add_argument("-s", dest="silent", action="store_true", help="do not print diagnostics to stderr")
    parser.add_argument("url", help="target URL")
    return parser


def build_spec(args: argparse.Namespace) -> RequestSpec:
    host, port, path_query = parse_url(args.url)
    body = args.data.encode("utf-8")
    return RequestSpec(
        method=effective_method(args.method, body),
        host=host,
        port=port,
        path_query=path_query,
        headers=tuple(args.headers),
        body=body,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = make_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # -h prints usage and asks argparse to exit.
        return e.code or 0
    except InvalidArgument as e:
        print(f"error: {e.message}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    config = Config(debug=not args.silent)
    try:
        spec = build_spec(args)
        response = HTTPClient(config).fetch(spec)
    except ClientError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    sys.stdout.flush()
    sys.stdout.buffer.write(format_output(response, args.include).encode("utf-8"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
