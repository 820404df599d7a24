from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(16), unique=True, index=True, nullable=False)  # player-facing short code
    size = Column(Integer, nullable=False, default=3)
    x_user_id = Column(String(32), ForeignKey("users.id"), nullable=False)
    o_user_id = Column(String(32), ForeignKey("users.id"), nullable=True)
    # bumped by every move; writes are conditional on the value read
    move_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
