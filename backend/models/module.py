"""Learning module and enrollment model definitions."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from backend.database import Base
from backend.models.timestamps import utc_now


class ModuleEnrollment(Base):
    """A single user's membership in a module's enrollment set."""
    __tablename__ = "module_enrollments"
    __table_args__ = (
        UniqueConstraint("module_id", "user_id", name="uq_module_enrollments_module_user"),
    )

    id = Column(Integer, primary_key=True)
    module_id = Column(Integer, ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    enrolled_at = Column(DateTime, nullable=False, default=utc_now)


class Module(Base):
    """Represents a learning module."""
    __tablename__ = "modules"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False, index=True)
    estimated_time = Column(Float, nullable=False)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    created_by = relationship("User", lazy="joined")
    enrollments = relationship(
        ModuleEnrollment,
        cascade="all, delete-orphan",
        order_by=[ModuleEnrollment.enrolled_at, ModuleEnrollment.id],
    )
    enrolled_users = relationship(
        "User",
        secondary="module_enrollments",
        viewonly=True,
        order_by=ModuleEnrollment.id,
    )
