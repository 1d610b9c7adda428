import logging
from typing import List

from fastapi import APIRouter, File, HTTPException, UploadFile

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

router = APIRouter(prefix="/parse", tags=["parse"])

TEXT_CONTENT_TYPES = {"text/plain", "text/markdown", "text/x-markdown"}
TEXT_SUFFIXES = (".md", ".markdown", ".txt")

UPLOAD_ERRORS = {
    400: {"description": "Empty file uploaded"},
    413: {"description": "File larger than the configured upload limit"},
    415: {"description": "Not a text/markdown document"},
}


async def _read_text_upload(file: UploadFile) -> str:
    """Validate an uploaded document and decode it to text."""
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    if len(raw) > CONTENT_DEFAULTS.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max allowed size is {CONTENT_DEFAULTS.MAX_UPLOAD_BYTES} bytes.",
        )

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower().split(";")[0].strip()
    if content_type not in TEXT_CONTENT_TYPES and not filename.endswith(TEXT_SUFFIXES):
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")

    logger.debug(f"Parsing upload '{file.filename}' ({len(raw)} bytes, {content_type or 'no content type'})")
    return raw.decode("utf-8", errors="replace")


@router.post(
    "/profile",
    response_model=ProfileRecord,
    summary="Parse Profile Document",
    description="Extract name, title, affiliation, period, biography and philosophy items from an uploaded profile document.",
    responses=UPLOAD_ERRORS,
)
async def parse_profile_upload(file: UploadFile = File(..., description="Profile document (.md or .txt)")):
    return parse_profile(await _read_text_upload(file))


@router.post(
    "/experience",
    response_model=ExperienceRecord,
    summary="Parse Experience Document",
    description="Extract internship and award entries (with detail bullets) and the certification list.",
    responses=UPLOAD_ERRORS,
)
async def parse_experience_upload(file: UploadFile = File(..., description="Experience document (.md or .txt)")):
    return parse_experience(await _read_text_upload(file))


@router.post(
    "/catalog",
    response_model=List[ProjectRecord],
    summary="Parse Project Catalog",
    description="Split a '---' delimited catalog into project records, in document order.",
    responses=UPLOAD_ERRORS,
)
async def parse_catalog_upload(file: UploadFile = File(..., description="Catalog document (.md or .txt)")):
    return parse_catalog(await _read_text_upload(file))


@router.post(
    "/contact",
    response_model=ContactRecord,
    summary="Parse Contact Document",
    description="Extract email, phone, availability, social links and the free-text message.",
    responses=UPLOAD_ERRORS,
)
async def parse_contact_upload(file: UploadFile = File(..., description="Contact document (.md or .txt)")):
    return parse_contact(await _read_text_upload(file))
