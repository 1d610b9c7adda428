"""
Serves the parsed content documents from the configured content directory.

Documents are re-read and re-parsed on every request.
"""

import logging
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from portfolio_content.config import CONTENT_DEFAULTS
from portfolio_content.core.content_loader import (
    DocumentKind,
    load_catalog,
    load_contact,
    load_experience,
    load_profile,
)
from portfolio_content.core.schemas import (
    ContactRecord,
    ExperienceRecord,
    ProfileRecord,
    ProjectRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])

NOT_FOUND = {404: {"description": "Document missing from the content directory"}}


def get_content_dir() -> Path:
    return Path(CONTENT_DEFAULTS.CONTENT_DIR)


def _missing(kind: DocumentKind, err: FileNotFoundError) -> HTTPException:
    logger.warning(f"{kind.value} document not found: {err.filename}")
    return HTTPException(status_code=404, detail=f"No {kind.value} document in the content directory.")


@router.get("/profile", response_model=ProfileRecord, summary="Profile", responses=NOT_FOUND)
def get_profile(content_dir: Path = Depends(get_content_dir)):
    try:
        return load_profile(content_dir)
    except FileNotFoundError as e:
        raise _missing(DocumentKind.profile, e) from e


@router.get("/experience", response_model=ExperienceRecord, summary="Experience", responses=NOT_FOUND)
def get_experience(content_dir: Path = Depends(get_content_dir)):
    try:
        return load_experience(content_dir)
    except FileNotFoundError as e:
        raise _missing(DocumentKind.experience, e) from e


@router.get("/catalog", response_model=List[ProjectRecord], summary="Project catalog", responses=NOT_FOUND)
def get_catalog(content_dir: Path = Depends(get_content_dir)):
    try:
        return load_catalog(content_dir)
    except FileNotFoundError as e:
        raise _missing(DocumentKind.catalog, e) from e


@router.get("/contact", response_model=ContactRecord, summary="Contact", responses=NOT_FOUND)
def get_contact(content_dir: Path = Depends(get_content_dir)):
    try:
        return load_contact(content_dir)
    except FileNotFoundError as e:
        raise _missing(DocumentKind.contact, e) from e
