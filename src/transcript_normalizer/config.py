"""Configuration via environment variables."""

from enum import Enum
from pydantic_settings import BaseSettings


class Transport(str, Enum):
    STDIO = "stdio"
    STREAMABLE_HTTP = "streamable-http"


class Settings(BaseSettings):
    model_config = {"env_prefix": "TRANSCRIPT_NORMALIZER_"}

    cache_max_size: int = 100
    cache_ttl_seconds: int = 3600
    rate_limit_per_minute: int = 60
    max_content_chars: int = 2_000_000
    log_level: str = "INFO"
    transport: Transport = Transport.STDIO
    http_host: str = "0.0.0.0"
    http_port: int = 8401
