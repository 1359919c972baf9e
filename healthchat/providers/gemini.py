import httpx
from typing import Optional, Dict, Any
from healthchat.providers.base import ProviderError
from healthchat.core import config

def _apply_defaults(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    opts: Dict[str, Any] = dict(options or {})
    opts.setdefault("temperature", config.TEMPERATURE)
    opts.setdefault("topK", config.TOP_K)
    opts.setdefault("topP", config.TOP_P)
    opts.setdefault("maxOutputTokens", config.MAX_OUTPUT_TOKENS)
    return opts

def _extract_text(data: Any) -> Optional[str]:
    # candidates[0].content.parts[0].text, any link may be missing
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None

async def generate(
    prompt: str,
    *,
    model: str,
    api_key: str,
    options: Optional[Dict[str, Any]] = None,
) -> str:
    payload = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": _apply_defaults(options),
    }
    url = f"{config.GEMINI_API_BASE}/models/{model}:generateContent"
    try:
        timeout = httpx.Timeout(config.PROVIDER_TIMEOUT, connect=10.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            r = await client.post(url, json=payload, params={"key": api_key})
            r.raise_for_status()
            data = r.json()
    except httpx.HTTPStatusError as e:
        raise ProviderError(f"Gemini HTTP error: {e.response.status_code} {e.response.reason_phrase}") from e
    except httpx.HTTPError as e:
        raise ProviderError(f"Gemini HTTP error: {e}") from e
    except ValueError as e:
        raise ProviderError("Gemini returned a non-JSON body.") from e

    reply = _extract_text(data)
    if not reply:
        raise ProviderError("Invalid response from Gemini API")
    return reply
