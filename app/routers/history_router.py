# /app/routers/history_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from ..models import history_model
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.service_errors import ServiceError

router = APIRouter()

@router.get(
    "",  # Maps to /history
    response_model=List[history_model.SavedResult],
    summary="Get Saved Result History",
    description="Lists saved results, newest first. Non-numeric or negative limit/offset values fall back to 50/0."
)
def get_history(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return history_service.get_history(db=db, limit=limit, offset=offset)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"ERROR fetching history: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to get history"}
        )
