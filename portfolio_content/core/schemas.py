from pydantic import BaseModel, ConfigDict, Field
from typing import List


class _Record(BaseModel):
    """Records are read-only once a parser hands them out."""
    model_config = ConfigDict(frozen=True)


class PhilosophyItem(_Record):
    title: str = ""
    description: str = ""


class ProfileRecord(_Record):
    name: str = ""
    title: str = ""
    affiliation: str = ""  # university, company, lab...
    period: str = ""  # year or range, free text
    biography: str = Field(default="", description="Biography lines joined with single spaces")
    philosophy_items: List[PhilosophyItem] = Field(default_factory=list)


class ExperienceEntry(_Record):
    title: str = ""
    period: str = ""
    details: List[str] = Field(default_factory=list)


class ExperienceRecord(_Record):
    internship_items: List[ExperienceEntry] = Field(default_factory=list)
    award_items: List[ExperienceEntry] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)


class ProjectRecord(_Record):
    title: str = ""
    category: str = ""
    year: str = ""
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    color: str = Field(default="", description="Semantic color key used by the presentation layer")
    link: str = ""


class SocialLink(_Record):
    platform: str = ""
    url: str = ""


class ContactRecord(_Record):
    email: str = ""
    phone: str = ""
    availability: str = ""
    social_links: List[SocialLink] = Field(default_factory=list)
    message: str = Field(default="", description="Message section lines joined with single spaces")
