import logging

from backend.core.errors import Forbidden, NotFound
from backend.models.module import Module
from backend.models.user import ADMIN_ROLE
from backend.repositories.module_repository import ModuleRepository
from backend.schemas import ModuleData

logger = logging.getLogger(__name__)


def can_modify_module(module: Module, user_id: int, user_role: str | None) -> bool:
    """Owners and admins may change or remove a module."""
    return user_role == ADMIN_ROLE or module.created_by_id == user_id


class ModuleService:
    def __init__(self, modules: ModuleRepository):
        self.modules = modules

    def create_module(self, data: ModuleData, creator_id: int) -> Module:
        module = self.modules.create(data.model_dump(), created_by_id=creator_id)
        logger.info('User %s created module %s', creator_id, module.id)
        return module

    def get_all_modules(self, page: int = 1, limit: int = 10, category: str | None = None) -> list[Module]:
        return self.modules.find_all(page=page, limit=limit, category=category)

    def get_module_by_id(self, module_id: int) -> Module:
        module = self.modules.get_by_id(module_id)
        if module is None:
            raise NotFound('Module not found')
        return module

    def update_module(self, module_id: int, data: ModuleData, user_id: int, user_role: str | None) -> Module:
        module = self._get_modifiable_module(module_id, user_id, user_role)
        module = self.modules.update(module, data.model_dump())
        logger.info('User %s updated module %s', user_id, module_id)
        return module

    def delete_module(self, module_id: int, user_id: int, user_role: str | None) -> None:
        module = self._get_modifiable_module(module_id, user_id, user_role)
        self.modules.delete(module)
        logger.info('User %s deleted module %s', user_id, module_id)

    def enroll_in_module(self, module_id: int, user_id: int) -> Module:
        self.get_module_by_id(module_id)
        if self.modules.add_enrollment(module_id, user_id):
            logger.info('User %s enrolled in module %s', user_id, module_id)
        # Re-read: the module may have been removed while enrolling.
        return self.get_module_by_id(module_id)

    def get_enrolled_modules(self, user_id: int) -> list[Module]:
        return self.modules.find_all(enrolled_user_id=user_id)

    def get_enrollment_count(self, module_id: int) -> int:
        self.get_module_by_id(module_id)
        return self.modules.count_enrollments(module_id)

    def _get_modifiable_module(self, module_id: int, user_id: int, user_role: str | None) -> Module:
        module = self.get_module_by_id(module_id)
        if not can_modify_module(module, user_id, user_role):
            raise Forbidden('Not authorized')
        return module
