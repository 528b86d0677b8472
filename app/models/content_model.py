# /app/models/content_model.py

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime

from ..services.prompt_library import TITLE_OPTION_COUNT


class GenerateContentRequest(BaseModel):
    """
    Request body for POST /content/generate. The transcript is optional at the
    schema level so that a missing value is reported as a 400 by the service
    rather than a 422 by FastAPI.
    """
    transcript: Optional[str] = None


class GeneratedContent(BaseModel):
    """
    The JSON object the AI endpoint must return inside its first choice.
    Unknown keys are ignored; the option count is enforced exactly.
    """
    model_config = ConfigDict(extra="ignore")

    description: str
    thumbnail_title: str
    video_title_options: List[str] = Field(..., min_length=TITLE_OPTION_COUNT, max_length=TITLE_OPTION_COUNT)
    tags: str

    @field_validator("video_title_options")
    @classmethod
    def options_must_not_be_blank(cls, value: List[str]) -> List[str]:
        if any(not option.strip() for option in value):
            raise ValueError("video title options must be non-empty strings")
        return value


class GenerationResult(BaseModel):
    """
    Response body for POST /content/generate.
    `id` and `created_at` are null when the generation could not be persisted.
    """
    id: Optional[int] = None
    description: str
    thumbnail_title: str
    video_title_options: List[str]
    tags: str
    created_at: Optional[datetime] = None
    db_saved: bool = Field(..., description="Whether the generation row was written to the database.")
    context_degraded: bool = Field(
        default=False,
        description="True when past examples or saved results could not be read for the prompt context.",
    )
