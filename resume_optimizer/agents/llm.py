"""
Chat model construction.

The model is built once by the caller and handed to ResumeTasks, never kept
as module state, so tests can pass a fake in its place.
"""

from typing import Any, Protocol

from langchain_deepseek import ChatDeepSeek

from resume_optimizer.config import Settings
from resume_optimizer.errors import ConfigurationError


class ChatModel(Protocol):
    """The part of a LangChain chat model the task collaborators use."""

    async def ainvoke(self, input: Any, **kwargs: Any) -> Any: ...


def create_chat_model(settings: Settings) -> ChatDeepSeek:
    """Create the DeepSeek chat model used for keyword extraction and rewriting."""
    if not settings.deepseek_api_key:
        raise ConfigurationError("DEEPSEEK_API_KEY not set")

    return ChatDeepSeek(
        model=settings.llm_model,
        api_key=settings.deepseek_api_key,
        temperature=settings.llm_temperature,
    )


def response_text(response: Any) -> str:
    """Pull the text out of a chat model response."""
    content = getattr(response, "content", response)
    if isinstance(content, list):
        # Content blocks: keep the text parts only
        return "".join(
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        )
    return str(content)
