import logging
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from database.models import CvRecord
from database.models.cv import utcnow

logger = logging.getLogger(__name__)

DEFAULT_CV_TITLE = 'My CV'


class CvRepository:
    """CV rows, one per user. Callers own the transaction (see cv_uow)."""

    def __init__(self, db: Session):
        self.db = db

    def get_latest_for_user(self, user_id: str) -> Optional[CvRecord]:
        stmt = (
            select(CvRecord)
            .where(CvRecord.user_id == user_id)
            .order_by(CvRecord.updated_at.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def upsert_for_user(
        self,
        user_id: str,
        data: Dict[str, Any],
        title: Optional[str] = None
    ) -> CvRecord:
        """Create or overwrite the user's CV (one row per user)."""
        existing = self.get_latest_for_user(user_id)

        if existing:
            existing.data = data
            if title:
                existing.title = title
            existing.updated_at = utcnow()
            record = existing
            logger.info(f"Updated CV {record.id} for user {user_id}")
        else:
            record = CvRecord(
                user_id=user_id,
                title=title or DEFAULT_CV_TITLE,
                data=data,
            )
            self.db.add(record)
            logger.info(f"Created CV for user {user_id}")

        self.db.flush()
        return record

    def delete_for_user(self, user_id: str) -> int:
        records = self.db.execute(
            select(CvRecord).where(CvRecord.user_id == user_id)
        ).scalars().all()
        for record in records:
            self.db.delete(record)
        self.db.flush()
        return len(records)
