# /app/routers/health_router.py

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..services import ai_service
from ..services.service_errors import UpstreamUnavailableError

router = APIRouter()

@router.get("/ai-health", summary="Probe the AI Endpoint")
async def ai_health():
    """
    Sends a one-line ping to the AI endpoint. Returns 200 when it answers
    successfully, 502 when it answers with an error status and 500 when it
    cannot be reached.
    """
    try:
        report = await ai_service.ping()
    except UpstreamUnavailableError as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": e.detail})
    return JSONResponse(status_code=200 if report["ok"] else 502, content=report)
