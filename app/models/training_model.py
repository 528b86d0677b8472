# /app/models/training_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from enum import Enum


class ExampleType(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"
    TAGS = "tags"
    COMPLETE = "complete"


class TrainingExample(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    example_type: ExampleType
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime


class TrainingExampleCreate(BaseModel):
    """
    Request body for POST /training. exampleType stays a plain string here so
    that an unknown kind is rejected by the service with a 400.
    """
    model_config = ConfigDict(populate_by_name=True)

    example_type: Optional[str] = Field(default=None, alias="exampleType")
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    notes: Optional[str] = None


class DeleteResponse(BaseModel):
    success: bool
