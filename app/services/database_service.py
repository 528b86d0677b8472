# /app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.generation_repository_sql import GenerationRepositorySQL
from .database_helpers.saved_result_repository_sql import SavedResultRepositorySQL
from .database_helpers.training_repository_sql import TrainingRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Thin facade over the SQL repositories. Every service talks to the
        database through this class so tests can swap in a MagicMock.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.db_session = db_session
        self.generation_repo = GenerationRepositorySQL(db_session)
        self.saved_result_repo = SavedResultRepositorySQL(db_session)
        self.training_repo = TrainingRepositorySQL(db_session)

    # --- SESSION CONTROL ---
    def rollback(self) -> None: self.db_session.rollback()

    # --- GENERATION METHODS (DELEGATED) ---
    def add_generation_record(self, record: Dict): return self.generation_repo.add_generation_record(record)

    # --- SAVED RESULT METHODS (DELEGATED) ---
    def add_saved_result(self, record: Dict): return self.saved_result_repo.add_saved_result(record)
    def get_saved_results(self, limit: int, offset: int = 0) -> List: return self.saved_result_repo.get_saved_results(limit, offset)

    # --- TRAINING EXAMPLE METHODS (DELEGATED) ---
    def get_training_examples(self, limit: Optional[int] = None) -> List: return self.training_repo.get_training_examples(limit)
    def add_training_example(self, record: Dict): return self.training_repo.add_training_example(record)
    def delete_training_example(self, example_id: int) -> int: return self.training_repo.delete_training_example(example_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
