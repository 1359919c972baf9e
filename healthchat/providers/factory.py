from healthchat.core import config
from healthchat.providers.base import GenerateFn, ProviderError

async def _not_implemented(*args, **kwargs) -> str:
    raise ProviderError(f"Unknown provider: {config.PROVIDER}")

def get_generate() -> GenerateFn:
    if config.PROVIDER == "gemini":
        from healthchat.providers.gemini import generate
        return generate
    return _not_implemented
