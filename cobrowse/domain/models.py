"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Allow-lists
FILL_FIELDS = ("name", "email", "message", "search")
SECTION_IDS = ("home", "about", "projects", "contact")
SCROLL_DIRECTIONS = ("up", "down", "top", "bottom")

# Action types
SCROLL_TO_SECTION = "scroll_to_section"
SCROLL_PAGE = "scroll_page"
FILL_INPUT = "fill_input"


@dataclass(frozen=True)
class FillIntent:
    """Form-fill request detected directly in the user's message."""

    field: str  # one of FILL_FIELDS
    value: str


@dataclass(frozen=True)
class Action:
    """UI directive for the browser side."""

    type: str  # e.g. "scroll_to_section", "fill_input"
    data: Dict[str, str]

    @property
    def fill_field(self) -> Optional[str]:
        if self.type != FILL_INPUT:
            return None
        return self.data.get("field")

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "data": dict(self.data)}


@dataclass(frozen=True)
class ConversationTurn:
    role: str  # "user" | "assistant"
    content: str


@dataclass(frozen=True)
class ContextTurn:
    """History entry in the model's role vocabulary ("user" | "model")."""

    role: str
    content: str


@dataclass(frozen=True)
class SectionInfo:
    id: str
    title: str = ""

    @property
    def display_title(self) -> str:
        return self.title or self.id[:1].upper() + self.id[1:]


@dataclass(frozen=True)
class ProjectInfo:
    title: str = ""
    date: str = ""
    description: str = ""


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


@dataclass(frozen=True)
class PageSnapshot:
    """Read-only description of the page the user is looking at."""

    sections: List[SectionInfo] = field(default_factory=list)
    projects: List[ProjectInfo] = field(default_factory=list)
    search_exists: bool = False

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> Optional["PageSnapshot"]:
        """Build a snapshot from the browser's ``pageContent`` JSON.

        Unknown keys are ignored and sections without an id are skipped.
        """
        if not isinstance(raw, dict):
            return None

        sections = []
        for item in _as_list(raw.get("sections")):
            if isinstance(item, dict) and item.get("id"):
                sections.append(
                    SectionInfo(id=str(item["id"]), title=str(item.get("title") or ""))
                )

        projects = []
        for item in _as_list(raw.get("projects")):
            if isinstance(item, dict):
                projects.append(
                    ProjectInfo(
                        title=str(item.get("title") or ""),
                        date=str(item.get("date") or ""),
                        description=str(item.get("description") or ""),
                    )
                )

        search = raw.get("search")
        search_exists = isinstance(search, dict) and _is_truthy(search.get("exists"))
        return cls(sections=sections, projects=projects, search_exists=search_exists)


@dataclass(frozen=True)
class ChatResult:
    """What one call hands back to the HTTP layer."""

    text: str
    actions: List[Action] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "actions": [a.to_dict() for a in self.actions],
        }
