"""Single-turn fitness chat backed by the OpenAI chat API."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from openai import AsyncOpenAI, AuthenticationError, OpenAIError, RateLimitError

from app.core.config import Settings, get_settings
from app.core.constants import CHAT_MAX_TOKENS, CHAT_TEMPERATURE
from app.core.openai_client import get_openai_client
from app.core.security import CurrentUser, get_current_user
from app.schemas.generation import ChatReply, ChatRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=ChatReply)
async def chat(
    payload: ChatRequest,
    user: CurrentUser = Depends(get_current_user),
    client: AsyncOpenAI | None = Depends(get_openai_client),
    settings: Settings = Depends(get_settings),
):
    """Send one user message, return the assistant reply."""
    if client is None:
        logger.error("OpenAI API key is not configured")
        raise HTTPException(status_code=500, detail="OpenAI API key is not configured")
    try:
        response = await client.chat.completions.create(
            model=settings.openai_chat_model,
            messages=[{"role": "user", "content": payload.message}],
            temperature=CHAT_TEMPERATURE,
            max_tokens=CHAT_MAX_TOKENS,
        )
    except AuthenticationError as e:
        logger.error("OpenAI rejected the API key: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or missing API key") from e
    except RateLimitError as e:
        logger.warning("OpenAI rate limit for user %s: %s", user.id, e)
        raise HTTPException(status_code=429, detail="Rate limit exceeded. Please try again later.") from e
    except OpenAIError as e:
        logger.exception("Chat completion failed")
        raise HTTPException(status_code=502, detail="Failed to generate AI response") from e

    if not response.choices:
        logger.error("Chat completion returned no choices")
        raise HTTPException(status_code=502, detail="Failed to generate AI response")
    message = response.choices[0].message
    return ChatReply(role=message.role or "assistant", content=message.content or "")
