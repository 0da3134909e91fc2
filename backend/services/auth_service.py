import logging

from backend.auth import jwt_handler
from backend.auth.passwords import hash_password, verify_password
from backend.core.errors import DuplicateAccount, InvalidCredentials
from backend.models.user import USER_ROLE
from backend.repositories.user_repository import UserRepository
from backend.schemas import LoginResponse, UserResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Account registration and credential checks.

    Sessions are stateless: a successful login only issues a signed token
    carrying the user's id and role.
    """

    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, email: str, password: str) -> UserResponse:
        if self.users.get_by_email(email) is not None:
            raise DuplicateAccount()

        user = self.users.create(
            email=email,
            hashed_password=hash_password(password),
            role=USER_ROLE,
        )
        logger.info('Registered user %s', user.id)
        return UserResponse.model_validate(user)

    def login(self, email: str, password: str) -> LoginResponse:
        user = self.users.get_by_email(email)
        hashed_password = user.hashed_password if user is not None else None
        if not verify_password(hashed_password, password) or user is None:
            logger.info('Rejected login attempt')
            raise InvalidCredentials()

        token = jwt_handler.create_access_token(user_id=user.id, role=user.role)
        return LoginResponse(user=UserResponse.model_validate(user), token=token)
