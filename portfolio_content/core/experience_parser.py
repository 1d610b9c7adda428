"""
Experience document parser.

Document convention:

    ## 인턴 및 활동
    - **Backend Intern, Example Corp** | 2024.07 - 2024.08
      - Built the billing export job
      - Cut report latency in half

    ## 수상 경력
    - **Hackathon Grand Prize** | 2023.11
      - Team of four

    ## 자격 및 교육
    - AWS Certified Developer
    - SQLD

The two multi-item sections also accept English headers ("## Internships",
"## Awards"), and the flat section "## Certifications".
"""

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

from portfolio_content.core.line_scanner import (
    BOLD_ITEM_PREFIX,
    DETAIL_PREFIX,
    LIST_ITEM_PREFIX,
    match_bold_pipe,
    split_lines,
    starts_with_any,
)
from portfolio_content.core.schemas import ExperienceEntry, ExperienceRecord


ExperienceSection = Literal["none", "internships", "awards", "certifications"]

SECTION_HEADERS: Dict[str, Tuple[str, ...]] = {
    "internships": ("## 인턴 및 활동", "## Internships"),
    "awards": ("## 수상 경력", "## Awards"),
    "certifications": ("## 자격 및 교육", "## Certifications"),
}

ITEM_SECTIONS = ("internships", "awards")


@dataclass
class _EntryDraft:
    title: str
    period: str
    details: List[str] = field(default_factory=list)

    def build(self) -> ExperienceEntry:
        return ExperienceEntry(title=self.title, period=self.period, details=list(self.details))


def _detect_section(line: str) -> Optional[ExperienceSection]:
    for section, headers in SECTION_HEADERS.items():
        if starts_with_any(line, headers):
            return section
    return None


def _flush(
    items: Dict[str, List[ExperienceEntry]],
    owner: ExperienceSection,
    draft: Optional[_EntryDraft],
) -> None:
    """Commit draft into the list of the section that owns it."""
    if draft and owner in items:
        items[owner].append(draft.build())


def parse_experience(text: str) -> ExperienceRecord:
    """
    Parse an experience document into an ExperienceRecord.

    An open entry is flushed into the section it was opened in before any
    section switch, so the last item of a section never leaks into the next one.
    Lines matching nothing (blank lines included) are skipped.
    """
    items: Dict[str, List[ExperienceEntry]] = {"internships": [], "awards": []}
    certifications: List[str] = []

    section: ExperienceSection = "none"
    open_entry: Optional[_EntryDraft] = None

    for line in split_lines(text):
        new_section = _detect_section(line)
        if new_section:
            _flush(items, section, open_entry)
            open_entry = None
            section = new_section
        elif line.startswith(BOLD_ITEM_PREFIX) and section in ITEM_SECTIONS:
            _flush(items, section, open_entry)
            open_entry = None
            parsed = match_bold_pipe(line)
            if parsed:
                title, period = parsed
                open_entry = _EntryDraft(title=title, period=period)
        elif line.startswith(DETAIL_PREFIX) and open_entry:
            open_entry.details.append(line[len(DETAIL_PREFIX):].strip())
        elif line.startswith(LIST_ITEM_PREFIX) and section == "certifications":
            certifications.append(line[len(LIST_ITEM_PREFIX):].strip())

    _flush(items, section, open_entry)

    return ExperienceRecord(
        internship_items=items["internships"],
        award_items=items["awards"],
        certifications=certifications,
    )
