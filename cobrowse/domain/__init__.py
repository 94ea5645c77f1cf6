"""Domain layer — pure Python, no framework dependencies."""

from cobrowse.domain.models import (
    Action,
    ChatResult,
    ContextTurn,
    ConversationTurn,
    FillIntent,
    PageSnapshot,
)
from cobrowse.domain.action_parser import parse_actions, scan_tags, strip_actions
from cobrowse.domain.history import normalize_history
from cobrowse.domain.intent_extractor import extract_fill_intents
from cobrowse.domain.prompt import compose_prompt
from cobrowse.domain.reconciler import reconcile
from cobrowse.domain.relay import ChatRelay

__all__ = [
    "Action",
    "ChatResult",
    "ContextTurn",
    "ConversationTurn",
    "FillIntent",
    "PageSnapshot",
    "parse_actions",
    "scan_tags",
    "strip_actions",
    "normalize_history",
    "extract_fill_intents",
    "compose_prompt",
    "reconcile",
    "ChatRelay",
]
