"""Outbound ports — interfaces for external system adapters."""

from typing import List, Optional, Protocol, runtime_checkable

from cobrowse.domain.models import ContextTurn


class CommunicationError(Exception):
    """Raised when the language model call fails (network, auth, quota...)."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


@runtime_checkable
class LLMPort(Protocol):
    """Interface for generative-language backends."""

    async def send_prompt(self, prompt: str, history: List[ContextTurn]) -> str: ...
