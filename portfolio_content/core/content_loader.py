"""
Reads the four portfolio documents from the content directory and hands the
text to the matching parser.

Read failures (missing file, permissions, bad encoding) are not handled here:
they propagate to the caller unchanged.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from portfolio_content.config import CONTENT_DEFAULTS
from portfolio_content.core.catalog_parser import parse_catalog
from portfolio_content.core.contact_parser import parse_contact
from portfolio_content.core.experience_parser import parse_experience
from portfolio_content.core.profile_parser import parse_profile
from portfolio_content.core.schemas import (
    ContactRecord,
    ExperienceRecord,
    ProfileRecord,
    ProjectRecord,
)

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    profile = "profile"
    experience = "experience"
    catalog = "catalog"
    contact = "contact"


DOCUMENT_FILES: Dict[DocumentKind, str] = {
    DocumentKind.profile: "about.md",
    DocumentKind.experience: "experience.md",
    DocumentKind.catalog: "portfolio.md",
    DocumentKind.contact: "contact.md",
}

ParsedContent = Union[ProfileRecord, ExperienceRecord, List[ProjectRecord], ContactRecord]

PARSERS: Dict[DocumentKind, Callable[[str], ParsedContent]] = {
    DocumentKind.profile: parse_profile,
    DocumentKind.experience: parse_experience,
    DocumentKind.catalog: parse_catalog,
    DocumentKind.contact: parse_contact,
}


def document_path(kind: DocumentKind, content_dir: Optional[Union[str, Path]] = None) -> Path:
    base = Path(content_dir if content_dir is not None else CONTENT_DEFAULTS.CONTENT_DIR)
    return base / DOCUMENT_FILES[kind]


def read_document(kind: DocumentKind, content_dir: Optional[Union[str, Path]] = None) -> str:
    """
    Return the decoded text of one content document.

    Raises:
        FileNotFoundError / OSError: the document cannot be read
        UnicodeDecodeError: the document is not valid UTF-8
    """
    path = document_path(kind, content_dir)
    logger.debug(f"Reading {kind.value} document from {path}")
    return path.read_text(encoding="utf-8")


def parse_document(kind: DocumentKind, text: str) -> ParsedContent:
    return PARSERS[kind](text)


def load_document(kind: DocumentKind, content_dir: Optional[Union[str, Path]] = None) -> ParsedContent:
    """Read and parse one content document. A fresh record is built on every call."""
    return parse_document(kind, read_document(kind, content_dir))


def load_profile(content_dir: Optional[Union[str, Path]] = None) -> ProfileRecord:
    return parse_profile(read_document(DocumentKind.profile, content_dir))


def load_experience(content_dir: Optional[Union[str, Path]] = None) -> ExperienceRecord:
    return parse_experience(read_document(DocumentKind.experience, content_dir))


def load_catalog(content_dir: Optional[Union[str, Path]] = None) -> List[ProjectRecord]:
    return parse_catalog(read_document(DocumentKind.catalog, content_dir))


def load_contact(content_dir: Optional[Union[str, Path]] = None) -> ContactRecord:
    return parse_contact(read_document(DocumentKind.contact, content_dir))
