"""Prompt text sent to the model on every chat call."""

from typing import List, Optional

from cobrowse.domain.models import PageSnapshot

PERSONA = (
    "You are a helpful co-browsing assistant for a portfolio website.\n"
    "You can help users explore the website by answering questions and "
    "performing actions on the page."
)

ACTION_GRAMMAR = """AVAILABLE ACTIONS (put each tag on its own line, outside your sentences):
- Scroll to a section: [ACTION:scroll_to_section:sectionId] (sectionId: home, about, projects, contact)
- Scroll the page: [ACTION:scroll_page:direction] (direction: up, down, top, bottom)
- Fill a form input: [ACTION:fill_input:{"field":"<field>","value":"<value>"}] (field: name, email, message, search)

FILL EXAMPLES:
[ACTION:fill_input:{"field":"name","value":"Jane Doe"}]
[ACTION:fill_input:{"field":"email","value":"jane@example.com"}]
[ACTION:fill_input:{"field":"message","value":"Hi, I'd love to chat about your work."}]
[ACTION:fill_input:{"field":"search","value":"machine learning"}]"""

INSTRUCTIONS = """INSTRUCTIONS:
1. Answer questions naturally and conversationally.
2. When the user asks to navigate or fill something in, include the matching ACTION tag.
3. Keep your narrative text separate from ACTION tags; never describe a tag in place of emitting it.
4. Never wrap ACTION tags or their JSON payloads in code fences or backticks.
5. Only use the sections, directions and fields listed above.
6. Be proactive: if the user asks about projects, consider scrolling to the projects section."""

_DESCRIPTION_PREVIEW = 100


def _search_status(snapshot: Optional[PageSnapshot]) -> str:
    if snapshot is not None and snapshot.search_exists:
        return "AVAILABLE (field: search)"
    return "UNKNOWN/NOT FOUND"


def _page_summary(snapshot: Optional[PageSnapshot]) -> str:
    section_ids = ", ".join(s.id for s in snapshot.sections) if snapshot else ""
    project_count = len(snapshot.projects) if snapshot else 0
    lines = [
        "Current page structure:",
        f"- Sections: {section_ids or 'N/A'}",
        f"- Projects: {project_count} projects available",
        f"- Search: {_search_status(snapshot)}",
        "- Contact form fields: name, email, message",
    ]
    return "\n".join(lines)


def _page_details(snapshot: PageSnapshot) -> List[str]:
    blocks = []
    if snapshot.projects:
        rows = [
            f"- {p.title} ({p.date}): {p.description[:_DESCRIPTION_PREVIEW]}..."
            for p in snapshot.projects
        ]
        blocks.append("AVAILABLE PROJECTS:\n" + "\n".join(rows))
    if snapshot.sections:
        rows = [f"- {s.id}: {s.display_title}" for s in snapshot.sections]
        blocks.append("AVAILABLE SECTIONS:\n" + "\n".join(rows))
    return blocks


def compose_prompt(user_message: str, snapshot: Optional[PageSnapshot] = None) -> str:
    """Build the full instruction text for one model call."""
    parts = [PERSONA, _page_summary(snapshot)]
    if snapshot is not None:
        parts.extend(_page_details(snapshot))
    parts.append(ACTION_GRAMMAR)
    parts.append(INSTRUCTIONS)
    parts.append(f'User message: "{user_message}"')
    parts.append("Respond naturally, and if an action is needed, include the ACTION tag.")
    return "\n\n".join(parts)
