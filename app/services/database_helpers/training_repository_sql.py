# /app/services/database_helpers/training_repository_sql.py

from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from app.db.models.training_models import TrainingExample

class TrainingRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_training_examples(self, limit: Optional[int] = None) -> List[TrainingExample]:
        query = self.db.query(TrainingExample).order_by(
            TrainingExample.created_at.desc(), TrainingExample.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def add_training_example(self, record: Dict) -> TrainingExample:
        new_example = TrainingExample(**record)
        try:
            self.db.add(new_example)
            self.db.flush()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        # id and created_at were populated by the flush and survive the
        # commit (expire_on_commit=False), so no refresh is needed.
        return new_example

    def delete_training_example(self, example_id: int) -> int:
        """Deletes by id and returns the number of rows removed (0 or 1)."""
        try:
            deleted = (
                self.db.query(TrainingExample)
                .filter(TrainingExample.id == example_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return deleted
