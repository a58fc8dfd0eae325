"""
AI client configuration.

Maps a caller's plan tier (and optional per-request overrides) to a chat
model. Pro callers may pick their own model; free callers always get the
free-tier model.
"""

from typing import Any

from langchain_deepseek import ChatDeepSeek
from pydantic import BaseModel

from resumelm.config import settings


class AIConfig(BaseModel):
    """Per-request model overrides supplied by the caller."""

    model: str | None = None
    api_key: str | None = None
    temperature: float | None = None


# (model, api_key, temperature) -> client
_clients: dict[tuple[str, str, float], ChatDeepSeek] = {}


def resolve_model(config: AIConfig | None, is_pro: bool) -> str:
    if not is_pro:
        return settings.free_model
    if config and config.model:
        return config.model
    return settings.pro_model


def get_llm(config: AIConfig | None = None, is_pro: bool = False) -> Any:
    """Get or create a chat model for the given tier."""
    api_key = (config.api_key if config and config.api_key else None) or settings.deepseek_api_key
    if not api_key:
        raise ValueError("DEEPSEEK_API_KEY not set")

    model = resolve_model(config, is_pro)
    temperature = config.temperature if config and config.temperature is not None else settings.ai_temperature

    key = (model, api_key, temperature)
    if key not in _clients:
        _clients[key] = ChatDeepSeek(model=model, api_key=api_key, temperature=temperature)
    return _clients[key]


def generate_object(llm: Any, schema: type[BaseModel], system: str, prompt: str) -> BaseModel:
    """Run one structured-output completion and return the validated object."""
    structured = llm.with_structured_output(schema)
    return structured.invoke([("system", system), ("human", prompt)])
