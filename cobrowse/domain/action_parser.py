"""Action tag parsing for model output.

Pure Python, no framework dependencies.

Tags look like ``[ACTION:<name>:<payload>]``. The text is scanned once
into raw tags; each tag is then handed to the validator registered for
its name. Tags that fail validation are dropped, never raised.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from cobrowse.domain.models import (
    FILL_FIELDS,
    FILL_INPUT,
    SCROLL_DIRECTIONS,
    SCROLL_PAGE,
    SCROLL_TO_SECTION,
    SECTION_IDS,
    Action,
)

TAG_PREFIX = "[ACTION:"
_NAME_RE = re.compile(r"(\w+):?")
_JSON = json.JSONDecoder()


@dataclass(frozen=True)
class RawTag:
    """One ``[ACTION:...]`` occurrence, unvalidated."""

    name: str
    payload: str
    start: int
    end: int  # exclusive, just past the closing bracket


def _skip_spaces(text: str, index: int) -> int:
    while index < len(text) and text[index].isspace():
        index += 1
    return index


def _closing_bracket(text: str, index: int) -> int:
    """Index of the ``]`` closing a tag whose payload starts at ``index``.

    JSON object payloads may contain brackets inside strings, so they are
    measured with the JSON decoder first. Returns -1 if the tag never
    closes before the next tag starts.
    """
    j = _skip_spaces(text, index)
    if text.startswith("{", j):
        try:
            _, obj_end = _JSON.raw_decode(text, j)
        except ValueError:
            obj_end = -1
        if obj_end >= 0:
            close = _skip_spaces(text, obj_end)
            if text.startswith("]", close):
                return close
    close = text.find("]", index)
    following = text.find(TAG_PREFIX, index)
    if following >= 0 and (close < 0 or following < close):
        return -1
    return close


def scan_tags(text: str) -> List[RawTag]:
    """Split model output into raw action tags, left to right."""
    tags: List[RawTag] = []
    pos = 0
    while True:
        start = text.find(TAG_PREFIX, pos)
        if start < 0:
            break
        cursor = start + len(TAG_PREFIX)
        match = _NAME_RE.match(text, cursor)
        name = match.group(1) if match else ""
        payload_start = match.end() if match else cursor
        close = _closing_bracket(text, payload_start)
        if close < 0:
            # broken tag: left in the text, scanning resumes at the next one
            pos = cursor
            continue
        if close == cursor:
            # "[ACTION:]" carries nothing
            pos = cursor
            continue
        tags.append(
            RawTag(
                name=name,
                payload=text[payload_start:close].strip(),
                start=start,
                end=close + 1,
            )
        )
        pos = close + 1
    return tags


# -- Validators: payload -> Action, or None to drop the tag --


def _parse_scroll_to_section(payload: str) -> Optional[Action]:
    section_id = payload.strip().lower()
    if section_id not in SECTION_IDS:
        return None
    return Action(type=SCROLL_TO_SECTION, data={"sectionId": section_id})


def _parse_scroll_page(payload: str) -> Optional[Action]:
    direction = payload.strip().lower()
    if direction not in SCROLL_DIRECTIONS:
        return None
    return Action(type=SCROLL_PAGE, data={"direction": direction})


def _load_object(payload: str) -> Optional[Dict[str, Any]]:
    try:
        obj = json.loads(payload)
    except ValueError:
        return None
    return obj if isinstance(obj, dict) else None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else json.dumps(value)


def _parse_fill_input(payload: str) -> Optional[Action]:
    obj = _load_object(payload)
    if obj is None:
        return None
    value = _as_text(obj.get("value"))

    selector = obj.get("selector")
    if isinstance(selector, str) and selector.strip():
        return Action(type=FILL_INPUT, data={"selector": selector.strip(), "value": value})

    field = obj.get("field")
    if not isinstance(field, str):
        return None
    field = field.strip().lower()
    if field not in FILL_FIELDS:
        return None
    return Action(type=FILL_INPUT, data={"field": field, "value": value})


# Tag name -> validator. Dict order is the scan order used by parse_actions.
TAG_VALIDATORS: Dict[str, Callable[[str], Optional[Action]]] = {
    SCROLL_TO_SECTION: _parse_scroll_to_section,
    SCROLL_PAGE: _parse_scroll_page,
    FILL_INPUT: _parse_fill_input,
}


def parse_actions(text: str) -> List[Action]:
    """Extract validated actions from model output.

    Actions are grouped by tag type in TAG_VALIDATORS order; within one
    type they follow their position in the text.
    """
    tags = scan_tags(text or "")
    actions: List[Action] = []
    for name, validate in TAG_VALIDATORS.items():
        for tag in tags:
            if tag.name != name:
                continue
            action = validate(tag.payload)
            if action is not None:
                actions.append(action)
    return actions


def count_dropped(text: str, actions: List[Action]) -> int:
    """Number of tags in ``text`` that did not become an action."""
    return len(scan_tags(text or "")) - len(actions)


def strip_actions(text: str) -> str:
    """Remove all action tags from text."""
    if not text:
        return ""
    pieces = []
    pos = 0
    for tag in scan_tags(text):
        pieces.append(text[pos:tag.start])
        pos = tag.end
    pieces.append(text[pos:])
    return "".join(pieces).strip()
