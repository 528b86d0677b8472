# /app/services/content_service.py

"""
The content generation pipeline: gather past examples and saved results as
prompt context, ask the AI endpoint for SEO metadata, validate the answer and
persist it as a Generation row.

Context reads and the final insert are best-effort. Their failures are logged
and surfaced as flags on the returned GenerationResult instead of aborting.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from pydantic import ValidationError

from ..models.content_model import GeneratedContent, GenerationResult
from . import ai_service, prompt_library
from .database_service import DatabaseService
from .service_errors import InvalidInputError, UpstreamFormatError

TRAINING_CONTEXT_LIMIT = 20
SAVED_RESULT_CONTEXT_LIMIT = 10


# --- Context Helpers ---

def _reset_session(db: DatabaseService) -> None:
    # A failed SELECT leaves PostgreSQL in an aborted transaction; the next
    # statement on the session only works after a rollback.
    try:
        db.rollback()
    except Exception as e:
        print(f"ERROR rolling back after a failed context read: {e}")


def _read_context(db: DatabaseService) -> Tuple[List[Any], List[Any], bool]:
    """
    Reads the newest training examples and saved results. Each read fails
    independently; a failed read contributes an empty list and marks the
    context as degraded.
    """
    degraded = False

    try:
        training_examples = db.get_training_examples(limit=TRAINING_CONTEXT_LIMIT)
    except Exception as e:
        print(f"WARNING reading training examples for context failed: {e}")
        _reset_session(db)
        training_examples = []
        degraded = True

    try:
        saved_results = db.get_saved_results(limit=SAVED_RESULT_CONTEXT_LIMIT)
    except Exception as e:
        print(f"WARNING reading saved results for context failed: {e}")
        _reset_session(db)
        saved_results = []
        degraded = True

    return training_examples, saved_results, degraded


def build_context_block(training_examples: Sequence[Any], saved_results: Sequence[Any]) -> str:
    """Renders past preferences as plain text; empty inputs yield an empty string."""
    context = ""

    if training_examples:
        context += prompt_library.TRAINING_EXAMPLES_HEADER
        for i, example in enumerate(training_examples, start=1):
            context += f"\nExample {i}:\n"
            if example.title:
                context += f"Title: {example.title}\n"
            if example.description:
                context += f"Description: {example.description}\n"
            if example.tags:
                context += f"Tags: {example.tags}\n"
            if example.notes:
                context += f"Notes: {example.notes}\n"

    if saved_results:
        context += prompt_library.SAVED_RESULTS_HEADER
        for i, result in enumerate(saved_results, start=1):
            context += f"\nResult {i}:\n"
            context += f"Title: {result.final_video_title}\n"
            context += f"Description: {result.final_description}\n"
            context += f"Tags: {result.final_tags}\n"

    return context


def build_messages(transcript: str, context_block: str) -> List[Dict[str, str]]:
    return [
        {
            "role": "system",
            "content": prompt_library.YOUTUBE_SEO_SYSTEM_PROMPT.format(context_block=context_block),
        },
        {
            "role": "user",
            "content": prompt_library.YOUTUBE_SEO_USER_PROMPT.format(transcript=transcript),
        },
    ]


def _validate_generated_content(raw_content: Dict[str, Any]) -> GeneratedContent:
    options = raw_content.get("video_title_options")
    if not isinstance(options, list) or len(options) < 1:
        print(f"ERROR AI response missing required fields: {raw_content}")
        raise UpstreamFormatError("AI response missing required fields")
    try:
        return GeneratedContent.model_validate(raw_content)
    except ValidationError as e:
        print(f"ERROR AI response failed validation: {e}")
        raise UpstreamFormatError("AI response missing required fields", detail=str(e))


def _persist_generation(db: DatabaseService, transcript: str, content: GeneratedContent) -> Optional[Any]:
    record = {
        "transcript": transcript,
        "description": content.description,
        "thumbnail_title": content.thumbnail_title,
        "video_title": content.video_title_options[0],
        "tags": content.tags,
        "title_options": list(content.video_title_options),
    }
    try:
        return db.add_generation_record(record)
    except Exception as e:
        print(f"ERROR inserting generation record failed: {e}")
        return None


# --- Main Orchestration Function ---

async def generate_content(transcript: Optional[str], db: DatabaseService) -> GenerationResult:
    """
    Runs the full generation pipeline for one transcript.

    Raises:
        InvalidInputError: the transcript is missing or blank. Raised before
            any database or network access.
        UpstreamUnavailableError, UpstreamError, UpstreamFormatError: the AI
            call failed; nothing is persisted in that case.
    """
    if not transcript or not transcript.strip():
        raise InvalidInputError("Transcript is required")

    training_examples, saved_results, context_degraded = _read_context(db)
    context_block = build_context_block(training_examples, saved_results)
    messages = build_messages(transcript, context_block)

    raw_content = await ai_service.generate_structured_json(messages, prompt_library.YOUTUBE_CONTENT_SCHEMA)
    content = _validate_generated_content(raw_content)

    generation = _persist_generation(db, transcript, content)

    return GenerationResult(
        id=generation.id if generation is not None else None,
        description=content.description,
        thumbnail_title=content.thumbnail_title,
        video_title_options=content.video_title_options,
        tags=content.tags,
        created_at=generation.created_at if generation is not None else None,
        db_saved=generation is not None and generation.id is not None,
        context_degraded=context_degraded,
    )
