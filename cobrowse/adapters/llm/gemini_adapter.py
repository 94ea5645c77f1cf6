"""Gemini adapter — implements LLMPort with the google-genai SDK."""

import sys
from datetime import datetime
from typing import Any, List, Optional

from google import genai
from google.genai import errors, types

from cobrowse.config import DEFAULT_MODEL, ConfigurationError
from cobrowse.domain.models import ContextTurn
from cobrowse.ports.outbound import CommunicationError


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] [gemini] {msg}", file=sys.stderr)


def to_contents(history: List[ContextTurn]) -> List[types.Content]:
    """Convert normalized turns into SDK chat history."""
    return [
        types.Content(role=turn.role, parts=[types.Part(text=turn.content)])
        for turn in history
    ]


class GeminiAdapter:
    """Sends one prompt per call on a fresh chat seeded with history.

    Implements LLMPort protocol. The SDK client is built once, at
    construction, so a missing key fails at startup instead of per request.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Optional[Any] = None,
    ):
        if not api_key and client is None:
            raise ConfigurationError(
                "Gemini API key is not configured. Please set GEMINI_API_KEY in your .env file"
            )
        self.model = model
        self._client = client if client is not None else genai.Client(api_key=api_key)

    async def send_prompt(self, prompt: str, history: List[ContextTurn]) -> str:
        _log(f"Executing with {self.model}")
        try:
            chat = self._client.aio.chats.create(
                model=self.model,
                history=to_contents(history),
            )
            response = await chat.send_message(prompt)
        except errors.APIError as e:
            raise CommunicationError(e.message or str(e), code=e.code) from e
        except Exception as e:
            raise CommunicationError(str(e) or type(e).__name__) from e

        _log("Completed")
        return response.text or ""
