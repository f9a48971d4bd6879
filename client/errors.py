class ClientError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(ClientError):
    pass


class UrlParseError(ClientError):
    pass


class InvalidScheme(UrlParseError):
    pass


class InvalidPort(UrlParseError):
    pass


class ResolutionError(ClientError):
    pass


class ConnectError(ClientError):
    pass


class TransmissionError(ClientError):
    pass
