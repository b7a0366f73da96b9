"""AI indexing: turn a page of course text into glossary entries.

The completion service itself is a black box: callers inject a
``complete(messages, model) -> str`` callable that sends the chat messages
wherever they like and returns the model's raw text reply.
"""

import json
import re
from collections.abc import Callable, Iterable

from loguru import logger
from pydantic import ValidationError

from glossfix.core.pipeline import clean_selected_text
from glossfix.glossary.models import GlossaryEntry, IndexResponse, SourceLocator
from glossfix.utils.constants import Constants

CompletionFn = Callable[[list[dict[str, str]], str], str]

SYSTEM_PROMPT = (
    "You are an AI assistant that helps students prepare for cybersecurity exams. "
    "You must return only valid JSON responses with no additional text."
)

_PROMPT_TEMPLATE = """You are an AI assistant that helps students prepare for cybersecurity exams \
by identifying and defining key terms from textbook pages.

Your task is to:
1. Analyze the provided text from a cybersecurity textbook page
2. Identify the most important terms that would likely appear on an exam
3. Provide concise definitions (maximum 2 sentences each)
4. Return the results in valid JSON format

Rules:
- Focus on technical terms, concepts, acronyms, and methodologies
- Prioritize terms that are likely to be tested
- Keep definitions to 2 sentences maximum
- Return ONLY valid JSON, no additional text
- Include 5-15 terms per page (depending on content density)

Page text to analyze:
{page_text}

Return format:
{{
  "terms": [
    {{
      "word": "term name",
      "definition": "Brief definition in 1-2 sentences.",
      "notes": "Optional additional context or examples"
    }}
  ]
}}"""

_CODE_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


class EnrichmentError(ValueError):
    """Raised when a completion reply cannot be turned into glossary terms."""


def build_index_prompt(page_text: str) -> str:
    """Return the term-extraction prompt for one page of text."""
    return _PROMPT_TEMPLATE.format(page_text=page_text)


def build_messages(page_text: str) -> list[dict[str, str]]:
    """Return the system and user chat messages for one page."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_index_prompt(page_text)},
    ]


def parse_index_response(raw: str) -> IndexResponse:
    """Parse a completion reply into an IndexResponse.

    Markdown code fences around the JSON are tolerated.

    Raises:
        EnrichmentError: If the reply is not JSON or does not match the schema
    """
    fenced = _CODE_FENCE_RE.match(raw)
    payload = fenced.group(1) if fenced else raw.strip()
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise EnrichmentError("AI response was not valid JSON format") from e
    try:
        return IndexResponse.model_validate(data)
    except ValidationError as e:
        raise EnrichmentError(f"AI response did not match the expected schema: {e}") from e


def _to_entries(response: IndexResponse, locator: SourceLocator) -> list[GlossaryEntry]:
    entries = []
    seen = set()
    for term in response.terms:
        key = term.word.lower()
        if not term.word or key in seen:
            continue
        seen.add(key)
        entries.append(
            GlossaryEntry(
                word=term.word,
                definition=term.definition,
                notes=term.notes,
                source=locator,
                enrichment=Constants.ENRICHMENT_SOURCE,
            )
        )
    return entries


def index_page(
    page_text: str,
    locator: SourceLocator,
    complete: CompletionFn,
    model: str = Constants.DEFAULT_MODEL,
) -> list[GlossaryEntry]:
    """Extract glossary entries from one page with the completion service.

    The page text is repaired first so the model sees real words. Terms
    with an empty word are dropped; repeated words keep their first
    definition.

    Args:
        page_text: Raw text of the page
        locator: Where the page lives in the course material
        complete: Completion callable taking (messages, model)
        model: Model name passed through to the callable

    Returns:
        Glossary entries tagged with the locator

    Raises:
        EnrichmentError: If the reply cannot be parsed
    """
    cleaned = clean_selected_text(page_text)
    raw = complete(build_messages(cleaned), model)
    entries = _to_entries(parse_index_response(raw), locator)
    logger.info(f"Indexed {len(entries)} terms from page {locator.page_number}")
    return entries


def index_pages(
    pages: Iterable[tuple[SourceLocator, str]],
    complete: CompletionFn,
    model: str = Constants.DEFAULT_MODEL,
) -> list[GlossaryEntry]:
    """Index several pages, skipping (and logging) any page that fails."""
    entries: list[GlossaryEntry] = []
    for locator, page_text in pages:
        try:
            entries.extend(index_page(page_text, locator, complete, model))
        except EnrichmentError as e:
            logger.warning(f"Skipping page {locator.page_number}: {e}")
    return entries
