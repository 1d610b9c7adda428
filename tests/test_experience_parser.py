"""Tests for the experience document parser."""

from portfolio_content.core.experience_parser import parse_experience
from portfolio_content.core.schemas import ExperienceEntry, ExperienceRecord


EXPERIENCE_DOC = """## 인턴 및 활동
- **Backend Intern** | 2024.07 - 2024.08
  - Built the billing export
  - Cut report latency

- **Study Group Lead** | 2023.03 - 2023.12
  - Weekly code reading

## 수상 경력
- **Hackathon Grand Prize** | 2023.11
  - Library seat finder

## 자격 및 교육
- AWS Certified Developer
- SQLD
"""


def test_empty_document_yields_empty_record():
    record = parse_experience("")
    assert record == ExperienceRecord()
    assert record.internship_items == []
    assert record.award_items == []
    assert record.certifications == []


def test_full_document():
    record = parse_experience(EXPERIENCE_DOC)

    assert record.internship_items == [
        ExperienceEntry(
            title="Backend Intern",
            period="2024.07 - 2024.08",
            details=["Built the billing export", "Cut report latency"],
        ),
        ExperienceEntry(
            title="Study Group Lead",
            period="2023.03 - 2023.12",
            details=["Weekly code reading"],
        ),
    ]
    assert record.award_items == [
        ExperienceEntry(title="Hackathon Grand Prize", period="2023.11", details=["Library seat finder"]),
    ]
    assert record.certifications == ["AWS Certified Developer", "SQLD"]


def test_entry_is_flushed_into_its_own_section_before_switch():
    doc = """## 인턴 및 활동
- **Intern** | 2024
  - first
  - second
## 수상 경력
"""
    record = parse_experience(doc)

    assert record.internship_items == [
        ExperienceEntry(title="Intern", period="2024", details=["first", "second"])
    ]
    assert record.award_items == []


def test_open_entry_flushed_at_end_of_input():
    doc = "## 수상 경력\n- **Prize** | 2022\n  - detail"
    record = parse_experience(doc)
    assert record.award_items == [ExperienceEntry(title="Prize", period="2022", details=["detail"])]


def test_malformed_item_header_drops_following_details():
    doc = """## 인턴 및 활동
- **Good** | 2024
  - kept
- **Missing pipe** 2023
  - dropped
"""
    record = parse_experience(doc)
    assert record.internship_items == [ExperienceEntry(title="Good", period="2024", details=["kept"])]


def test_items_before_any_section_are_ignored():
    doc = """- **Orphan** | 2020
  - orphan detail
## 인턴 및 활동
- **Real** | 2021
"""
    record = parse_experience(doc)
    assert record.internship_items == [ExperienceEntry(title="Real", period="2021", details=[])]
    assert record.award_items == []


def test_certification_lines_are_flat_strings():
    doc = "## 자격 및 교육\n- **Bold cert** | 2020\n-   Padded cert  \n"
    record = parse_experience(doc)
    assert record.certifications == ["**Bold cert** | 2020", "Padded cert"]
    assert record.internship_items == []


def test_english_section_headers():
    doc = """## Internships
- **Intern** | 2024
## Awards
- **Prize** | 2023
## Certifications
- Cert
"""
    record = parse_experience(doc)
    assert [e.title for e in record.internship_items] == ["Intern"]
    assert [e.title for e in record.award_items] == ["Prize"]
    assert record.certifications == ["Cert"]


def test_crlf_line_endings():
    doc = "## 수상 경력\r\n- **Prize** | 2023\r\n  - detail\r\n"
    record = parse_experience(doc)
    assert record.award_items == [ExperienceEntry(title="Prize", period="2023", details=["detail"])]


def test_unicode_line_separator_does_not_start_a_section():
    doc = "## 수상 경력\n- **Prize** | 2023\u2028## 자격 및 교육\n  - detail\n"
    record = parse_experience(doc)
    assert record.award_items == [
        ExperienceEntry(title="Prize", period="2023\u2028## 자격 및 교육", details=["detail"])
    ]
    assert record.certifications == []


def test_parsing_is_deterministic():
    assert parse_experience(EXPERIENCE_DOC) == parse_experience(EXPERIENCE_DOC)
