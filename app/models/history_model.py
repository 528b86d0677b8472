# /app/models/history_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class SavedResult(BaseModel):
    """A user-finalized result, exactly as stored in the saved_results table."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    generation_id: Optional[int] = None
    transcript: str
    final_description: str
    final_thumbnail_title: str
    final_video_title: str
    final_tags: str
    created_at: datetime


class SaveResultRequest(BaseModel):
    """
    Request body for POST /results. Fields are camelCase on the wire.
    Required-ness is checked by the service so that omissions map to a 400.
    """
    model_config = ConfigDict(populate_by_name=True)

    generation_id: Optional[int] = Field(default=None, alias="generationId")
    transcript: Optional[str] = None
    final_description: Optional[str] = Field(default=None, alias="finalDescription")
    final_thumbnail_title: Optional[str] = Field(default=None, alias="finalThumbnailTitle")
    final_video_title: Optional[str] = Field(default=None, alias="finalVideoTitle")
    final_tags: Optional[str] = Field(default=None, alias="finalTags")
