from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user
from backend.database import get_db
from backend.models.user import User
from backend.repositories.user_repository import UserRepository
from backend.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, UserResponse
from backend.services.auth_service import AuthService

router = APIRouter(tags=['auth'])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


@router.post('/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    user = service.register(data.email, data.password)
    return RegisterResponse(user=user)


@router.post('/login', response_model=LoginResponse)
def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return service.login(data.email, data.password)


@router.get('/me', response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)
