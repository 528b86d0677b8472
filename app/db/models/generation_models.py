# /app/db/models/generation_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, JSON
from ..base_class import Base
from ..types import UTCDateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Generation(Base):
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    transcript = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    thumbnail_title = Column(String, nullable=False)
    video_title = Column(String, nullable=False)  # first entry of title_options
    tags = Column(Text, nullable=False)
    title_options = Column(JSON, nullable=False)  # always exactly 5 strings
    created_at = Column(UTCDateTime, default=utc_now, index=True, nullable=False)