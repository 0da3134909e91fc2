"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String
from backend.database import Base
from backend.models.timestamps import utc_now

USER_ROLE = "user"
ADMIN_ROLE = "admin"


class User(Base):
    """Represents an application user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=USER_ROLE)  # user/admin
    created_at = Column(DateTime, nullable=False, default=utc_now)
