import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret')

from backend.auth.passwords import hash_password  # noqa: E402
from backend.database import Base  # noqa: E402
from backend.models.module import Module, ModuleEnrollment  # noqa: E402
from backend.models.user import ADMIN_ROLE, USER_ROLE, User  # noqa: E402
from backend.repositories.module_repository import ModuleRepository  # noqa: E402
from backend.repositories.user_repository import UserRepository  # noqa: E402
from backend.services.auth_service import AuthService  # noqa: E402
from backend.services.module_service import ModuleService  # noqa: E402

TABLES = [User.__table__, Module.__table__, ModuleEnrollment.__table__]


@pytest.fixture
def db_engine():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=TABLES)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=list(reversed(TABLES)))
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_service(db) -> AuthService:
    return AuthService(UserRepository(db))


@pytest.fixture
def module_service(db) -> ModuleService:
    return ModuleService(ModuleRepository(db))


@pytest.fixture
def make_user(db):
    def _make_user(email: str, role: str = USER_ROLE, password: str = 'secret123') -> User:
        user = User(email=email, hashed_password=hash_password(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def admin(make_user) -> User:
    return make_user('admin@example.com', role=ADMIN_ROLE)


@pytest.fixture
def student(make_user) -> User:
    return make_user('student@example.com')
