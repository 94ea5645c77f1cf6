"""LLM adapters — generative-language backends."""

from cobrowse.adapters.llm.gemini_adapter import GeminiAdapter

__all__ = [
    "GeminiAdapter",
]
