"""Trailing conversation window for the stateful chat call."""

from typing import List, Sequence

from cobrowse.domain.models import ContextTurn, ConversationTurn

HISTORY_WINDOW = 6

_ROLE_MAP = {"assistant": "model"}


def normalize_history(turns: Sequence[ConversationTurn]) -> List[ContextTurn]:
    """Return the last turns as a strictly alternating, user-first window.

    Leading model turns are dropped, and in a run of same-role turns only
    the first one is kept. An empty list is a valid (fresh) context.
    """
    window = [
        ContextTurn(role=_ROLE_MAP.get(t.role, "user"), content=t.content)
        for t in list(turns)[-HISTORY_WINDOW:]
    ]

    start = 0
    while start < len(window) and window[start].role == "model":
        start += 1

    cleaned: List[ContextTurn] = []
    for turn in window[start:]:
        if cleaned and cleaned[-1].role == turn.role:
            continue
        cleaned.append(turn)
    return cleaned
