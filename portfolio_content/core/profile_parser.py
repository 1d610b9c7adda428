"""
Profile document parser.

Document convention:

    name: Jane Doe
    title: Backend Engineer
    affiliation: Example University
    period: 2021 - 2025

    ## Bio
    Free text, any number of lines.

    ## Philosophy
    ### Point title
    One line describing the point.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from portfolio_content.core.line_scanner import (
    SUBITEM_PREFIX,
    heading_text,
    is_heading,
    join_text,
    scalar_value,
    split_lines,
)
from portfolio_content.core.schemas import PhilosophyItem, ProfileRecord


ProfileSection = Literal["none", "biography", "philosophy"]

BIO_HEADER = "## Bio"
PHILOSOPHY_HEADER = "## Philosophy"

# marker -> field; "university:" and "year:" are the older spellings
SCALAR_MARKERS = (
    ("name:", "name"),
    ("title:", "title"),
    ("affiliation:", "affiliation"),
    ("university:", "affiliation"),
    ("period:", "period"),
    ("year:", "period"),
)


@dataclass
class _PhilosophyDraft:
    title: str
    description: str = ""

    def build(self) -> PhilosophyItem:
        return PhilosophyItem(title=self.title, description=self.description)


def _scalar_field(line: str) -> Optional[Tuple[str, str]]:
    for marker, field_name in SCALAR_MARKERS:
        if line.startswith(marker):
            return field_name, scalar_value(line, marker)
    return None


def parse_profile(text: str) -> ProfileRecord:
    """
    Parse a profile document into a ProfileRecord.

    Biography lines accumulate (space-joined). A philosophy item's description is
    the LAST non-heading line seen while the item is open: each new line replaces
    the previous one instead of appending to it.
    """
    scalars = {"name": "", "title": "", "affiliation": "", "period": ""}
    biography = ""
    philosophy: List[PhilosophyItem] = []

    section: ProfileSection = "none"
    open_item: Optional[_PhilosophyDraft] = None

    for line in split_lines(text, keep_blank=False):
        scalar = _scalar_field(line)
        if scalar:
            field_name, value = scalar
            scalars[field_name] = value
        elif line.startswith(BIO_HEADER):
            section = "biography"
        elif line.startswith(PHILOSOPHY_HEADER):
            section = "philosophy"
        elif line.startswith(SUBITEM_PREFIX) and section == "philosophy":
            if open_item:
                philosophy.append(open_item.build())
            open_item = _PhilosophyDraft(title=heading_text(line))
        elif section == "biography" and not is_heading(line):
            biography = join_text(biography, line.strip())
        elif open_item and not is_heading(line):
            open_item.description = line.strip()

    if open_item:
        philosophy.append(open_item.build())

    return ProfileRecord(biography=biography, philosophy_items=philosophy, **scalars)
