import jwt
import pytest

from backend.core import config
from backend.core.errors import DuplicateAccount, InvalidCredentials
from backend.models.user import User
from backend.schemas import UserResponse


def test_register_creates_user_with_default_role(auth_service, db) -> None:
    user = auth_service.register('new@example.com', 'secret123')

    assert isinstance(user, UserResponse)
    assert user.email == 'new@example.com'
    assert user.role == 'user'
    assert set(user.model_dump()) == {'id', 'email', 'role'}


def test_register_stores_password_as_one_way_hash(auth_service, db) -> None:
    created = auth_service.register('hash@example.com', 'secret123')

    stored = db.query(User).filter(User.id == created.id).one()
    assert stored.hashed_password
    assert stored.hashed_password != 'secret123'
    assert 'secret123' not in stored.hashed_password


def test_register_rejects_duplicate_email(auth_service) -> None:
    auth_service.register('dup@example.com', 'secret123')

    with pytest.raises(DuplicateAccount) as exception_info:
        auth_service.register('dup@example.com', 'another-password')

    assert exception_info.value.message == 'User already exists'


def test_login_returns_public_user_and_signed_token(auth_service) -> None:
    created = auth_service.register('login@example.com', 'secret123')

    result = auth_service.login('login@example.com', 'secret123')

    assert result.user == created
    payload = jwt.decode(result.token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    assert payload['sub'] == str(created.id)
    assert payload['role'] == 'user'
    assert payload['exp'] - payload['iat'] == config.JWT_EXPIRES_MINUTES * 60


def test_login_failures_are_indistinguishable(auth_service) -> None:
    auth_service.register('known@example.com', 'secret123')

    with pytest.raises(InvalidCredentials) as wrong_password:
        auth_service.login('known@example.com', 'wrong-password')
    with pytest.raises(InvalidCredentials) as unknown_email:
        auth_service.login('unknown@example.com', 'secret123')

    assert type(wrong_password.value) is type(unknown_email.value)
    assert wrong_password.value.message == unknown_email.value.message
    assert wrong_password.value.status_code == unknown_email.value.status_code
