"""
Project catalog parser.

Document convention: blocks separated by "---", one project per block.

    ---
    ### Ledger Sync
    category: Backend
    year: 2024
    description: Double-entry ledger replicated across regions.
    tags: Python, PostgreSQL, Kafka
    color: blue
    link: https://example.com/ledger
    ---
"""

from typing import List

from portfolio_content.core.line_scanner import (
    SUBITEM_PREFIX,
    heading_text,
    scalar_value,
    split_csv,
    split_lines,
)
from portfolio_content.core.schemas import ProjectRecord


BLOCK_DELIMITER = "---"
HEADER_MARKER = "###"

SCALAR_MARKERS = (
    ("category:", "category"),
    ("year:", "year"),
    ("description:", "description"),
    ("color:", "color"),
    ("link:", "link"),
)
TAGS_MARKER = "tags:"


def _parse_block(block: str) -> ProjectRecord:
    fields = {
        "title": "",
        "category": "",
        "year": "",
        "description": "",
        "color": "",
        "link": "",
    }
    tags: List[str] = []

    for line in split_lines(block, keep_blank=False):
        if line.startswith(SUBITEM_PREFIX):
            fields["title"] = heading_text(line)
        elif line.startswith(TAGS_MARKER):
            tags = split_csv(scalar_value(line, TAGS_MARKER))
        else:
            for marker, field_name in SCALAR_MARKERS:
                if line.startswith(marker):
                    fields[field_name] = scalar_value(line, marker)
                    break

    return ProjectRecord(tags=tags, **fields)


def parse_catalog(text: str) -> List[ProjectRecord]:
    """
    Parse a project catalog into records, in document order.

    Blocks without any "###" marker are separators or preamble and are skipped.
    A block whose scan yields no title (e.g. "###Title" without the space) is
    dropped as well.
    """
    projects: List[ProjectRecord] = []
    for block in (text or "").split(BLOCK_DELIMITER):
        if not block.strip() or HEADER_MARKER not in block:
            continue
        project = _parse_block(block)
        if project.title:
            projects.append(project)
    return projects
