"""External API clients."""

from .gemini_client import GeminiImageClient, GeminiRequestError

__all__ = ["GeminiImageClient", "GeminiRequestError"]
