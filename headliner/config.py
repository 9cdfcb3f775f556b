from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    base_url: str = "https://newsapi.org/v2"
    request_timeout: float | None = None
    news_api_key: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
