"""Tests for the contact document parser."""

from portfolio_content.core.contact_parser import parse_contact
from portfolio_content.core.schemas import ContactRecord, SocialLink


CONTACT_DOC = """email: jane@example.com
phone: 010-1234-5678
availability: From March

## Social
- **GitHub** | github.com/jane
- **Twitter** | twitter.com/x
not a link line

## 협업 문의
Have a data problem?
  Send a short note.

# Heading inside message is skipped
"""


def test_empty_document_yields_empty_record():
    record = parse_contact("")
    assert record == ContactRecord()
    assert record.social_links == []
    assert record.message == ""


def test_full_document():
    record = parse_contact(CONTACT_DOC)

    assert record.email == "jane@example.com"
    assert record.phone == "010-1234-5678"
    assert record.availability == "From March"
    assert record.social_links == [
        SocialLink(platform="GitHub", url="github.com/jane"),
        SocialLink(platform="Twitter", url="twitter.com/x"),
    ]
    assert record.message == "Have a data problem? Send a short note."


def test_social_link_line():
    record = parse_contact("## Social\n- **Twitter** | twitter.com/x\n")
    assert record.social_links == [SocialLink(platform="Twitter", url="twitter.com/x")]


def test_duplicate_social_links_are_kept():
    doc = "## Social\n- **GitHub** | a\n- **GitHub** | a\n"
    assert len(parse_contact(doc).social_links) == 2


def test_social_lines_outside_social_section_are_ignored():
    doc = "- **GitHub** | github.com/jane\n## 협업 문의\nhello\n"
    record = parse_contact(doc)
    assert record.social_links == []
    assert record.message == "hello"


def test_message_lines_join_with_single_space():
    record = parse_contact("## 협업 문의\nfirst\nsecond\n")
    assert record.message == "first second"


def test_unicode_line_separator_stays_inside_message_line():
    record = parse_contact("## 협업 문의\nhello\u2028## Social\n- **X** | y\n")
    assert record.message == "hello\u2028## Social - **X** | y"
    assert record.social_links == []


def test_english_message_header():
    record = parse_contact("## Message\nhi there\n")
    assert record.message == "hi there"


def test_scalar_marker_without_value():
    record = parse_contact("email:\nphone: 1\n")
    assert record.email == ""
    assert record.phone == "1"


def test_parsing_is_deterministic():
    assert parse_contact(CONTACT_DOC) == parse_contact(CONTACT_DOC)
