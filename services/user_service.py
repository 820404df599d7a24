import logging

from sqlalchemy.orm import Session
from models.user import User
from services.errors import NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def create_user(self) -> dict:
        user = User()
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Created user %s", user.id)
        return user.to_dict()

    def lookup_user(self, user_id: str) -> User:
        user = self.db.query(User).filter(User.id == user_id).first() if user_id else None
        if not user:
            raise NotFoundError(f"No user with ID {user_id} found.")
        return user
