# /app/services/training_service.py

from typing import List, Optional, Union

from .database_service import DatabaseService
from .service_errors import InvalidInputError, StorageError
from ..models.training_model import ExampleType, TrainingExample, TrainingExampleCreate

VALID_EXAMPLE_TYPES = {example_type.value for example_type in ExampleType}


def _optional_text(value: Optional[str]) -> Optional[str]:
    # Absent and empty values are stored as NULL.
    return value if value else None


def list_examples(db: DatabaseService) -> List[TrainingExample]:
    try:
        records = db.get_training_examples()
    except Exception as e:
        print(f"ERROR fetching training examples: {e}")
        raise StorageError("Failed to get training examples", detail=str(e))
    return [TrainingExample.model_validate(record) for record in records]


def create_example(payload: TrainingExampleCreate, db: DatabaseService) -> TrainingExample:
    if payload.example_type not in VALID_EXAMPLE_TYPES:
        raise InvalidInputError(
            "Valid example type is required",
            detail=f"exampleType must be one of: {', '.join(sorted(VALID_EXAMPLE_TYPES))}",
        )

    record = {
        "example_type": payload.example_type,
        "title": _optional_text(payload.title),
        "description": _optional_text(payload.description),
        "tags": _optional_text(payload.tags),
        "notes": _optional_text(payload.notes),
    }

    try:
        new_example = db.add_training_example(record)
    except Exception as e:
        print(f"ERROR creating training example: {e}")
        raise StorageError("Failed to create training example", detail=str(e))

    return TrainingExample.model_validate(new_example)


def delete_example(example_id: Optional[Union[str, int]], db: DatabaseService) -> bool:
    """
    Deletes a training example. Deleting an id that does not exist is
    still a success.
    """
    if example_id is None or (isinstance(example_id, str) and not example_id.strip()):
        raise InvalidInputError("ID is required")
    try:
        resolved_id = int(example_id)
    except (TypeError, ValueError):
        raise InvalidInputError("ID must be an integer", detail=f"Got: {example_id}")

    try:
        db.delete_training_example(resolved_id)
    except Exception as e:
        print(f"ERROR deleting training example {resolved_id}: {e}")
        raise StorageError("Failed to delete training example", detail=str(e))

    return True
