from functools import lru_cache
from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the telereq output transport.
    - TELEGRAM_API_TOKEN --- Telegram bot API token
    - API_URL            --- Bot API base URL
    - TIMEOUT            --- HTTP timeout, seconds
    - OUTPUT_WORKERS     --- concurrent output workers
    - OUTPUT_QUEUE_SIZE  --- pending requests kept before callers block
    env_prefix: TELEREQ_
    """

    telegram_api_token: str = Field(..., description="Telegram bot API token")
    api_url: AnyHttpUrl = Field(
        "https://api.telegram.org", description="Bot API base URL"
    )
    timeout: float = Field(10.0, description="HTTP timeout in seconds")
    output_workers: int = Field(1, description="Number of output workers")
    output_queue_size: int = Field(512, description="Output queue capacity")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TELEREQ_",
        extra="ignore",
    )


# mimic lazy evaluation to avoid initializing settings on import
# needed for tests (import -> init -> test -> clear cache (deinit))
@lru_cache(maxsize=1)
def get_settings():
    return Settings()
