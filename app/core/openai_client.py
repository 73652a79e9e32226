"""OpenAI client dependency. None when no API key is configured."""

from functools import lru_cache

from fastapi import Depends
from openai import AsyncOpenAI

from app.core.config import Settings, get_settings


@lru_cache
def _build_client(api_key: str, timeout: float) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=1)


def get_openai_client(settings: Settings = Depends(get_settings)) -> AsyncOpenAI | None:
    if not settings.openai_api_key:
        return None
    return _build_client(settings.openai_api_key, settings.openai_timeout_seconds)
