# /app/routers/results_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import history_model
from ..services import results_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.service_errors import ServiceError

router = APIRouter()

@router.post(
    "",  # Maps to /results
    response_model=history_model.SavedResult,
    status_code=status.HTTP_201_CREATED,
    summary="Save a Final Result"
)
def save_result(
    payload: history_model.SaveResultRequest,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Persists the user's edited description, thumbnail title, chosen video
    title and tags so they can feed future prompts.
    """
    try:
        return results_service.save_result(payload=payload, db=db)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"ERROR saving result: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to save results"}
        )
