from dataclasses import dataclass

@dataclass(frozen=True)
class Config:
    user_agent: str = "curl/1.0"
    http_version: str = "HTTP/1.1"
    chunk_size: int = 64 * 1024
    debug: bool = True
