# /app/routers/content_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import content_model
from ..services import content_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.service_errors import ServiceError

router = APIRouter()

@router.post(
    "/generate",
    response_model=content_model.GenerationResult,
    summary="Generate SEO Content from a Transcript",
    description="Builds a prompt from past training examples and saved results, asks the AI endpoint for a description, thumbnail title, five title options and tags, and stores the generation."
)
async def generate_content(
    request: content_model.GenerateContentRequest,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return await content_service.generate_content(transcript=request.transcript, db=db)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        print(f"ERROR during content generation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to generate content", "detail": str(e)}
        )
