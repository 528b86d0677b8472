# /app/db/models/training_models.py

from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from ..base_class import Base
from ..types import UTCDateTime
from .generation_models import utc_now

EXAMPLE_TYPES = ("title", "description", "tags", "complete")


class TrainingExample(Base):
    __tablename__ = "training_examples"  # Override automatic pluralization
    __table_args__ = (
        CheckConstraint(
            "example_type IN (" + ", ".join(f"'{kind}'" for kind in EXAMPLE_TYPES) + ")",
            name="ck_training_examples_example_type",
        ),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    example_type = Column(String, nullable=False)
    # Optional fields are NULL when not provided, never an empty string.
    title = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(UTCDateTime, default=utc_now, index=True, nullable=False)
