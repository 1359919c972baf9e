import logging
from typing import Any, Dict
from healthchat.core import config
from healthchat.core.errors import ApiError
from healthchat.providers.base import ProviderError
from healthchat.providers.factory import get_generate
from healthchat.services.prompt import build_prompt, format_reply

logger = logging.getLogger(__name__)

async def generate_reply(message: Any) -> str:
    """
    Validate -> build prompt -> one provider call -> format.
    Raises ApiError for every failure; nothing is retried.
    """
    if not message:
        raise ApiError(400, "Message is required")
    if not isinstance(message, str):
        raise ApiError(400, "Message is required", details="message must be a string")

    api_key = config.GOOGLE_GEMINI_API_KEY
    if not api_key:
        raise ApiError(500, "API key not configured")

    prompt = build_prompt(message)
    options: Dict[str, Any] = {
        "temperature": config.TEMPERATURE,
        "topK": config.TOP_K,
        "topP": config.TOP_P,
        "maxOutputTokens": config.MAX_OUTPUT_TOKENS,
    }

    generate = get_generate()
    try:
        text = await generate(prompt, model=config.GEMINI_MODEL, api_key=api_key, options=options)
    except ProviderError as e:
        logger.error("chat error: %s", e)
        raise ApiError(500, "Failed to process request", details=str(e)) from e
    return format_reply(text)
