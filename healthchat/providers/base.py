# lets us swap providers without touching the chat handler
# declares the provider contract: send a prompt, get text back

from typing import Any, Dict, Optional, Protocol

class ProviderError(Exception):
    pass

class GenerateFn(Protocol):
    async def __call__(
        self,
        prompt: str,
        *,
        model: str,
        api_key: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> str: ...
