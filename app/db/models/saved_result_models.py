# /app/db/models/saved_result_models.py

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from ..base_class import Base
from ..types import UTCDateTime
from .generation_models import utc_now


class SavedResult(Base):
    __tablename__ = "saved_results"  # Override automatic pluralization
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    generation_id = Column(Integer, ForeignKey("generations.id", ondelete="CASCADE"), nullable=True)
    transcript = Column(Text, nullable=False)
    final_description = Column(Text, nullable=False)
    final_thumbnail_title = Column(String, nullable=False)
    final_video_title = Column(String, nullable=False)
    final_tags = Column(Text, nullable=False)
    created_at = Column(UTCDateTime, default=utc_now, index=True, nullable=False)
