from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user, require_admin
from backend.core import config
from backend.database import get_db
from backend.models.user import User
from backend.repositories.module_repository import ModuleRepository
from backend.schemas import (
    EnrolledModulesResponse,
    EnrollmentCountResponse,
    MessageResponse,
    ModuleData,
    ModuleListResponse,
    ModuleResponse,
)
from backend.services.module_service import ModuleService

router = APIRouter(tags=['modules'])

# Largest id a signed 64-bit primary key can hold.
MAX_MODULE_ID = 2**63 - 1


def get_module_service(db: Session = Depends(get_db)) -> ModuleService:
    return ModuleService(ModuleRepository(db))


@router.get('', response_model=ModuleListResponse)
def list_modules(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    category: str | None = Query(default=None),
    service: ModuleService = Depends(get_module_service),
):
    category = category.strip() if category else None
    modules = service.get_all_modules(page=page, limit=limit, category=category or None)
    return ModuleListResponse(
        modules=[ModuleResponse.from_module(module) for module in modules],
        page=page,
        limit=limit,
    )


@router.get('/enrolled', response_model=EnrolledModulesResponse)
def list_enrolled_modules(
    current_user: User = Depends(get_current_user),
    service: ModuleService = Depends(get_module_service),
):
    modules = service.get_enrolled_modules(current_user.id)
    return EnrolledModulesResponse(modules=[ModuleResponse.from_module(module) for module in modules])


@router.post('/{module_id}/enroll', response_model=ModuleResponse)
def enroll_in_module(
    module_id: int = Path(ge=1, le=MAX_MODULE_ID),
    current_user: User = Depends(get_current_user),
    service: ModuleService = Depends(get_module_service),
):
    module = service.enroll_in_module(module_id, current_user.id)
    return ModuleResponse.from_module(module)


@router.post('', response_model=ModuleResponse, status_code=status.HTTP_201_CREATED)
def create_module(
    data: ModuleData,
    current_user: User = Depends(require_admin),
    service: ModuleService = Depends(get_module_service),
):
    module = service.create_module(data, current_user.id)
    return ModuleResponse.from_module(module)


@router.get('/{module_id}', response_model=ModuleResponse)
def get_module(
    module_id: int = Path(ge=1, le=MAX_MODULE_ID),
    current_user: User = Depends(get_current_user),
    service: ModuleService = Depends(get_module_service),
):
    del current_user
    return ModuleResponse.from_module(service.get_module_by_id(module_id))


@router.put('/{module_id}', response_model=ModuleResponse)
def update_module(
    data: ModuleData,
    module_id: int = Path(ge=1, le=MAX_MODULE_ID),
    current_user: User = Depends(require_admin),
    service: ModuleService = Depends(get_module_service),
):
    module = service.update_module(module_id, data, current_user.id, current_user.role)
    return ModuleResponse.from_module(module)


@router.delete('/{module_id}', response_model=MessageResponse)
def delete_module(
    module_id: int = Path(ge=1, le=MAX_MODULE_ID),
    current_user: User = Depends(require_admin),
    service: ModuleService = Depends(get_module_service),
):
    service.delete_module(module_id, current_user.id, current_user.role)
    return MessageResponse(msg='Module deleted')


@router.get('/{module_id}/enrollments', response_model=EnrollmentCountResponse)
def get_enrollment_count(
    module_id: int = Path(ge=1, le=MAX_MODULE_ID),
    current_user: User = Depends(require_admin),
    service: ModuleService = Depends(get_module_service),
):
    del current_user
    return EnrollmentCountResponse(enrolledUsers=service.get_enrollment_count(module_id))
