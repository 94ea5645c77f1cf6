"""ChatRelay — one user message in, one ChatResult out.

No framework dependencies: the model backend is any LLMPort, so the
whole flow is testable with a mock port.
"""

import sys
from datetime import datetime
from typing import Optional, Sequence

from cobrowse.domain.action_parser import count_dropped, parse_actions
from cobrowse.domain.history import normalize_history
from cobrowse.domain.intent_extractor import extract_fill_intents
from cobrowse.domain.models import ChatResult, ConversationTurn, PageSnapshot
from cobrowse.domain.prompt import compose_prompt
from cobrowse.domain.reconciler import reconcile
from cobrowse.ports.outbound import CommunicationError, LLMPort

ERROR_PREFIX = "Error: "


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] [relay] {msg}", file=sys.stderr)


def describe_error(error: BaseException) -> str:
    """Turn a failed call into user-facing text, always ``Error: ...``."""
    message = str(getattr(error, "message", None) or error)
    code = getattr(error, "code", None)
    lowered = message.lower()

    if code == 401 or "api_key" in lowered or "api key" in lowered:
        detail = "API key configuration issue."
    elif code == 429 or "quota" in lowered or "429" in message:
        detail = "API quota exceeded. Please try again later."
    elif code == 403 or "403" in message or "permission" in lowered:
        detail = "API access denied. Please verify API permissions."
    elif any(k in lowered for k in ("network", "fetch", "connect", "timed out")):
        detail = "Network error. Please check your internet connection."
    else:
        detail = f"{message or 'Unknown error'}."
    return ERROR_PREFIX + detail


class ChatRelay:
    """Forwards chat messages to the model and reconciles its reply.

    Holds only the injected port, so concurrent calls share no state.
    """

    def __init__(self, llm: LLMPort):
        self.llm = llm

    async def process_message(
        self,
        user_message: str,
        conversation_history: Optional[Sequence[ConversationTurn]] = None,
        page_snapshot: Optional[PageSnapshot] = None,
    ) -> ChatResult:
        try:
            prompt = compose_prompt(user_message, page_snapshot)
            history = normalize_history(conversation_history or [])

            _log(f"sending prompt ({len(history)} history turns)")
            raw_text = await self.llm.send_prompt(prompt, history) or ""
            _log(f"model returned {len(raw_text)} chars")

            model_actions = parse_actions(raw_text)
            dropped = count_dropped(raw_text, model_actions)
            if dropped:
                _log(f"dropped {dropped} invalid action tag(s)")

            intents = extract_fill_intents(user_message)
            if intents:
                _log(f"fill intents: {', '.join(i.field for i in intents)}")

            return reconcile(raw_text, model_actions, intents)
        except CommunicationError as e:
            _log(f"model call failed: {e.message} (code={e.code})")
            return ChatResult(text=describe_error(e), actions=[])
        except Exception as e:
            _log(f"unexpected error: {e!r}")
            return ChatResult(text=describe_error(e), actions=[])
