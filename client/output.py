from .models import RawResponse

TEXT_TERMINATOR = "\r\n\r\n"


def format_output(response: RawResponse, include_headers: bool) -> str:
    text = response.raw.decode("utf-8", errors="replace")
    if include_headers:
        return text

    pos = text.find(TEXT_TERMINATOR)
    if pos == -1:
        return text
    return text[pos + len(TEXT_TERMINATOR):]
