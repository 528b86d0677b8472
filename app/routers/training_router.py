# /app/routers/training_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from ..models import training_model
from ..services import training_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.service_errors import ServiceError

router = APIRouter()

@router.get("", response_model=List[training_model.TrainingExample], summary="List Training Examples")
def list_training_examples(db: DatabaseService = Depends(get_db_service)):
    try:
        return training_service.list_examples(db=db)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"ERROR listing training examples: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to get training examples"}
        )

@router.post(
    "",
    response_model=training_model.TrainingExample,
    status_code=status.HTTP_201_CREATED,
    summary="Create a Training Example"
)
def create_training_example(
    payload: training_model.TrainingExampleCreate,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return training_service.create_example(payload=payload, db=db)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"ERROR creating training example: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to create training example"}
        )

@router.delete(
    "",
    response_model=training_model.DeleteResponse,
    summary="Delete a Training Example",
    description="Deletes by the `id` query parameter. Unknown ids are reported as success."
)
def delete_training_example(
    example_id: Optional[str] = Query(default=None, alias="id"),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        training_service.delete_example(example_id=example_id, db=db)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"ERROR deleting training example {example_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to delete training example"}
        )
    return {"success": True}
