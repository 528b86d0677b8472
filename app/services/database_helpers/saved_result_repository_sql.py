# /app/services/database_helpers/saved_result_repository_sql.py

from typing import Dict, List
from sqlalchemy.orm import Session
from app.db.models.saved_result_models import SavedResult

class SavedResultRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_saved_result(self, record: Dict) -> SavedResult:
        new_result = SavedResult(**record)
        try:
            self.db.add(new_result)
            self.db.flush()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        # id and created_at were populated by the flush and survive the
        # commit (expire_on_commit=False), so no refresh is needed.
        return new_result

    def get_saved_results(self, limit: int, offset: int = 0) -> List[SavedResult]:
        """Newest first. A limit of 0 yields an empty list."""
        return (
            self.db.query(SavedResult)
            .order_by(SavedResult.created_at.desc(), SavedResult.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
