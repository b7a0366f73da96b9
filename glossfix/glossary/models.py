"""Glossary data models."""

from pydantic import BaseModel, Field, field_validator

from glossfix.utils.constants import Constants


class SourceLocator(BaseModel):
    """Where in the course material a term was found."""

    book_number: str
    page_number: int = Field(ge=1)
    course_code: str | None = None


class IndexedTerm(BaseModel):
    """A term as returned by the completion service."""

    word: str
    definition: str
    notes: str | None = None

    @field_validator("word", "definition")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class IndexResponse(BaseModel):
    """Expected JSON shape of a page-indexing completion."""

    terms: list[IndexedTerm] = Field(default_factory=list)


class GlossaryEntry(BaseModel):
    """A finished glossary entry ready for the persistence layer."""

    word: str
    definition: str
    notes: str | None = None
    source: SourceLocator
    color_tag: str = Constants.DEFAULT_COLOR_TAG
    enrichment: str | None = None  # "ai" for model-generated entries
