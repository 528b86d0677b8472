# /app/main.py

import os

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    content_router,
    history_router,
    results_router,
    training_router,
    health_router,
)

# --- Startup Logic ---
from .db.database import bootstrap_schema

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs ONCE at startup. A failure is logged and the API still starts.
    if bootstrap_schema():
        print("INFO database schema is ready.")
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Content Studio Backend API",
    description="Generates YouTube SEO metadata from transcripts and learns from saved results and training examples.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
CORS_ALLOW_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Handling ---
def _describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are caller errors: 400 with the same body shape as every other error."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"error": "Invalid request", "detail": _describe_validation_errors(exc)}},
    )


# --- API Router Inclusion ---
app.include_router(content_router.router, prefix="/content", tags=["Content Generation"])
app.include_router(history_router.router, prefix="/history", tags=["History"])
app.include_router(results_router.router, prefix="/results", tags=["Saved Results"])
app.include_router(training_router.router, prefix="/training", tags=["Training Examples"])
app.include_router(health_router.router, tags=["Health Check"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Content Studio Backend is running!", "version": app.version}
