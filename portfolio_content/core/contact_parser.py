"""
Contact document parser.

Document convention:

    email: jane@example.com
    phone: 010-0000-0000
    availability: Open to backend roles from 2025

    ## Social
    - **GitHub** | github.com/jane
    - **Twitter** | twitter.com/jane

    ## 협업 문의
    Free text, any number of lines.
"""

from typing import List, Literal

from portfolio_content.core.line_scanner import (
    BOLD_ITEM_PREFIX,
    is_heading,
    join_text,
    match_bold_pipe,
    scalar_value,
    split_lines,
    starts_with_any,
)
from portfolio_content.core.schemas import ContactRecord, SocialLink


ContactSection = Literal["none", "social", "message"]

SOCIAL_HEADER = "## Social"
MESSAGE_HEADERS = ("## 협업 문의", "## Message")

SCALAR_MARKERS = (
    ("email:", "email"),
    ("phone:", "phone"),
    ("availability:", "availability"),
)


def parse_contact(text: str) -> ContactRecord:
    """Parse a contact document into a ContactRecord."""
    scalars = {"email": "", "phone": "", "availability": ""}
    social: List[SocialLink] = []
    message = ""

    section: ContactSection = "none"

    for line in split_lines(text):
        scalar = next(((m, f) for m, f in SCALAR_MARKERS if line.startswith(m)), None)
        if scalar:
            marker, field_name = scalar
            scalars[field_name] = scalar_value(line, marker)
        elif line.startswith(SOCIAL_HEADER):
            section = "social"
        elif starts_with_any(line, MESSAGE_HEADERS):
            section = "message"
        elif line.startswith(BOLD_ITEM_PREFIX) and section == "social":
            parsed = match_bold_pipe(line)
            if parsed:
                platform, url = parsed
                social.append(SocialLink(platform=platform, url=url))
        elif section == "message" and not is_heading(line) and line.strip():
            message = join_text(message, line.strip())

    return ContactRecord(social_links=social, message=message, **scalars)
