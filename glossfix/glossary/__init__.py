"""Glossary models and AI-assisted indexing."""

from glossfix.glossary.enrichment import (
    EnrichmentError,
    build_index_prompt,
    build_messages,
    index_page,
    index_pages,
    parse_index_response,
)
from glossfix.glossary.models import GlossaryEntry, IndexedTerm, IndexResponse, SourceLocator

__all__ = [
    "EnrichmentError",
    "GlossaryEntry",
    "IndexResponse",
    "IndexedTerm",
    "SourceLocator",
    "build_index_prompt",
    "build_messages",
    "index_page",
    "index_pages",
    "parse_index_response",
]
