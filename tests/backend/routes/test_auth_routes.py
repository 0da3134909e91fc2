import pytest
from pydantic import ValidationError

from backend.core.errors import DuplicateAccount, InvalidCredentials
from backend.routes import auth_routes
from backend.schemas import LoginRequest, RegisterRequest


def test_register_request_normalizes_email() -> None:
    request = RegisterRequest(email=' NEW@Example.COM ', password='secret123')

    assert request.email == 'new@example.com'


@pytest.mark.parametrize(
    ('email', 'password'),
    [
        ('not-an-email', 'secret123'),
        ('   ', 'secret123'),
        ('short@example.com', '12345'),
    ],
)
def test_register_request_rejects_invalid_input(email: str, password: str) -> None:
    with pytest.raises(ValidationError):
        RegisterRequest(email=email, password=password)


def test_login_request_requires_password() -> None:
    with pytest.raises(ValidationError):
        LoginRequest(email='user@example.com', password='')


def test_register_route_returns_public_user(auth_service) -> None:
    response = auth_routes.register(
        RegisterRequest(email='route@example.com', password='secret123'),
        service=auth_service,
    )

    assert response.model_dump() == {'user': {'id': response.user.id, 'email': 'route@example.com', 'role': 'user'}}


def test_register_route_rejects_duplicate(auth_service) -> None:
    data = RegisterRequest(email='route@example.com', password='secret123')
    auth_routes.register(data, service=auth_service)

    with pytest.raises(DuplicateAccount):
        auth_routes.register(data, service=auth_service)


def test_login_route_returns_token(auth_service) -> None:
    auth_routes.register(RegisterRequest(email='route@example.com', password='secret123'), service=auth_service)

    response = auth_routes.login(LoginRequest(email='ROUTE@example.com', password='secret123'), service=auth_service)

    assert response.user.email == 'route@example.com'
    assert response.token


def test_login_route_rejects_wrong_password(auth_service) -> None:
    auth_routes.register(RegisterRequest(email='route@example.com', password='secret123'), service=auth_service)

    with pytest.raises(InvalidCredentials):
        auth_routes.login(LoginRequest(email='route@example.com', password='wrong'), service=auth_service)
