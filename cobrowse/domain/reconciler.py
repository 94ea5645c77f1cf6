"""Merge model actions with deterministic fill intents."""

from typing import List, Sequence

from cobrowse.domain.action_parser import strip_actions
from cobrowse.domain.models import (
    FILL_FIELDS,
    FILL_INPUT,
    Action,
    ChatResult,
    FillIntent,
)


def filled_confirmation(intents: Sequence[FillIntent]) -> str:
    return f"Done. Filled: {', '.join(i.field for i in intents)}."


def merge_actions(model_actions: Sequence[Action], intents: Sequence[FillIntent]) -> List[Action]:
    """Append a fill_input per intent unless the model already fills that field.

    Selector-based fills from the model occupy their own slot and never
    block a field-based intent.
    """
    merged = list(model_actions)
    taken = {a.fill_field for a in model_actions if a.fill_field}
    for intent in intents:
        if intent.field not in FILL_FIELDS or intent.field in taken:
            continue
        merged.append(Action(type=FILL_INPUT, data={"field": intent.field, "value": intent.value}))
        taken.add(intent.field)
    return merged


def reconcile(
    raw_text: str,
    model_actions: Sequence[Action],
    intents: Sequence[FillIntent],
) -> ChatResult:
    """Build the final result for one chat turn.

    When the user asked for explicit fills, the model's prose is replaced
    by a fixed confirmation so the reply can't contradict the form.
    """
    allowed = [i for i in intents if i.field in FILL_FIELDS]
    actions = merge_actions(model_actions, allowed)
    if allowed:
        return ChatResult(text=filled_confirmation(allowed), actions=actions)
    return ChatResult(text=strip_actions(raw_text), actions=actions)
