"""Port interfaces (Hexagonal Architecture)."""

from cobrowse.ports.outbound import CommunicationError, LLMPort

__all__ = [
    "CommunicationError",
    "LLMPort",
]
