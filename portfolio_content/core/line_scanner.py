"""
Line classification helpers shared by the content parsers.

Each parser owns its own state machine and accumulation rules; this module only
answers "what kind of line is this" and "what value does it carry".

Line kinds (all prefix based, case-sensitive):
- scalar field:      "email: me@example.com"
- section header:    "## Bio"
- sub-item header:   "### Title"  or  "- **Title** | Period"
- detail line:       "  - detail text"
- flat list item:    "- value"
"""

import re
from typing import List, Optional, Tuple


SECTION_PREFIX = "## "
SUBITEM_PREFIX = "### "
BOLD_ITEM_PREFIX = "- **"
DETAIL_PREFIX = "  - "
LIST_ITEM_PREFIX = "- "

# "- **Title** | Period"  /  "- **Platform** | url"
BOLD_PIPE_RE = re.compile(r"- \*\*(.+?)\*\* \| (.+)")

# Only LF and CRLF end a line; other Unicode separators stay inside it
LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str, keep_blank: bool = True) -> List[str]:
    """
    Split a document into lines without stripping them.

    Indentation is meaningful (detail lines), so lines are returned as authored.
    With keep_blank=False whitespace-only lines are dropped.
    """
    if not text:
        return []
    lines = LINE_BREAK_RE.split(text)
    if keep_blank:
        return lines
    return [line for line in lines if line.strip()]


def starts_with_any(line: str, prefixes: Tuple[str, ...]) -> bool:
    return any(line.startswith(p) for p in prefixes)


def scalar_value(line: str, marker: str) -> str:
    """
    Value of a "marker: value" line. Caller has already checked the prefix.

    Examples:
        scalar_value("email: a@b.c", "email:") -> "a@b.c"
        scalar_value("email:", "email:")       -> ""
    """
    return line[len(marker):].strip()


def match_bold_pipe(line: str) -> Optional[Tuple[str, str]]:
    """Return (title, trailing) for a "- **Title** | trailing" line, else None."""
    m = BOLD_PIPE_RE.match(line)
    if not m:
        return None
    return m.group(1).strip(), m.group(2).strip()


def heading_text(line: str, prefix: str = SUBITEM_PREFIX) -> str:
    return line[len(prefix):].strip()


def is_heading(line: str) -> bool:
    """Any markdown-style heading line ("#", "##", "###"...)."""
    return line.startswith("#")


def join_text(existing: str, addition: str) -> str:
    """Append to free text with a single space separator."""
    if not addition:
        return existing
    return f"{existing} {addition}" if existing else addition


def split_csv(value: str) -> List[str]:
    """
    Split a comma separated value, trimming each piece.

    Order is preserved, duplicates and empty pieces are kept. A blank value
    has no pieces at all.
        split_csv("a, b ,c") -> ["a", "b", "c"]
        split_csv("a, ,b")   -> ["a", "", "b"]
        split_csv("")        -> []
    """
    if not value.strip():
        return []
    return [piece.strip() for piece in value.split(",")]
