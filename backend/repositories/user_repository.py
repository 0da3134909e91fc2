from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.core.errors import DuplicateAccount
from backend.models.user import USER_ROLE, User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, hashed_password: str, role: str = USER_ROLE) -> User:
        user = User(email=email, hashed_password=hashed_password, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateAccount() from exc
        self.db.refresh(user)
        return user

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()
