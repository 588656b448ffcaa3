from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Text, TIMESTAMP, JSON, Index
from sqlalchemy.dialects.postgresql import JSONB

from .base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CvRecord(Base):
    """
    The saved CV of a user. One row per user; saves overwrite (last write wins).

    ``data`` holds the CV exactly as the builder sent it (camelCase JSON).
    Readers normalize it with core.cv.normalize_cv_data.
    """
    __tablename__ = 'cvs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, unique=True)
    title = Column(Text, nullable=False, default='My CV')
    data = Column(JSON().with_variant(JSONB, 'postgresql'), nullable=False, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_cvs_user_updated', 'user_id', 'updated_at'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'data': self.data,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
