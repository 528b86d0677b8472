# /app/services/results_service.py

from typing import Optional

from .database_service import DatabaseService
from .service_errors import InvalidInputError, StorageError
from ..models.history_model import SavedResult, SaveResultRequest

# Wire name for each required field, used in the validation message.
REQUIRED_RESULT_FIELDS = {
    "transcript": "transcript",
    "final_description": "finalDescription",
    "final_thumbnail_title": "finalThumbnailTitle",
    "final_video_title": "finalVideoTitle",
    "final_tags": "finalTags",
}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def save_result(payload: SaveResultRequest, db: DatabaseService) -> SavedResult:
    """
    Persists the user's final edit of a generation and returns the stored row.
    The strings are stored exactly as received.
    """
    missing = [
        wire_name for field_name, wire_name in REQUIRED_RESULT_FIELDS.items()
        if _is_blank(getattr(payload, field_name))
    ]
    if missing:
        raise InvalidInputError("All fields are required", detail=f"Missing: {', '.join(missing)}")

    record = {
        "generation_id": payload.generation_id,
        "transcript": payload.transcript,
        "final_description": payload.final_description,
        "final_thumbnail_title": payload.final_thumbnail_title,
        "final_video_title": payload.final_video_title,
        "final_tags": payload.final_tags,
    }

    try:
        saved = db.add_saved_result(record)
    except Exception as e:
        print(f"ERROR saving final result: {e}")
        raise StorageError("Failed to save results", detail=str(e))

    return SavedResult.model_validate(saved)
