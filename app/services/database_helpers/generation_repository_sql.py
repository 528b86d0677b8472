# /app/services/database_helpers/generation_repository_sql.py

from typing import Dict
from sqlalchemy.orm import Session
from app.db.models.generation_models import Generation

class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_generation_record(self, record: Dict) -> Generation:
        """Creates a new Generation record in the database from a dictionary."""
        new_generation = Generation(**record)
        try:
            self.db.add(new_generation)
            self.db.flush()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        # id and created_at were populated by the flush and survive the
        # commit (expire_on_commit=False), so no refresh is needed.
        return new_generation
