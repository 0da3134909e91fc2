from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.models.module import Module, ModuleEnrollment


class ModuleRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, data: dict, created_by_id: int) -> Module:
        module = Module(**data, created_by_id=created_by_id)
        self.db.add(module)
        self.db.commit()
        self.db.refresh(module)
        return module

    def get_by_id(self, module_id: int) -> Module | None:
        return self.db.query(Module).filter(Module.id == module_id).first()

    def find_all(
        self,
        page: int | None = None,
        limit: int | None = None,
        category: str | None = None,
        enrolled_user_id: int | None = None,
    ) -> list[Module]:
        query = self.db.query(Module)
        if category:
            query = query.filter(Module.category == category)
        if enrolled_user_id is not None:
            query = query.join(ModuleEnrollment, ModuleEnrollment.module_id == Module.id).filter(
                ModuleEnrollment.user_id == enrolled_user_id,
            )
        query = query.order_by(Module.created_at.desc(), Module.id.desc())
        if page is not None and limit is not None:
            query = query.offset((page - 1) * limit).limit(limit)
        return query.all()

    def update(self, module: Module, data: dict) -> Module:
        for field, value in data.items():
            setattr(module, field, value)
        self.db.commit()
        self.db.refresh(module)
        return module

    def delete(self, module: Module) -> None:
        self.db.delete(module)
        self.db.commit()

    def add_enrollment(self, module_id: int, user_id: int) -> bool:
        """Insert the enrollment row unless it already exists.

        The unique constraint on (module_id, user_id) makes this a single
        atomic add-if-absent; returns False when the user was already enrolled.
        """
        self.db.add(ModuleEnrollment(module_id=module_id, user_id=user_id))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return False
        return True

    def count_enrollments(self, module_id: int) -> int:
        return (
            self.db.query(func.count(ModuleEnrollment.id))
            .filter(ModuleEnrollment.module_id == module_id)
            .scalar()
        ) or 0
