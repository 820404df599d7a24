import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from database import Base


def _new_user_id() -> str:
    return uuid.uuid4().hex


def _utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_user_id)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
