"""Request and response models shared by the routes and services."""

import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from backend.core import config

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def _normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if not normalized:
        raise ValueError('Email is required.')
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError('Email must be a valid email address.')
    return normalized


class RegisterRequest(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < config.PASSWORD_MIN_LENGTH:
            raise ValueError(f'Password must be at least {config.PASSWORD_MIN_LENGTH} characters long.')
        return value


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError('Password is required.')
        return value


class ModuleData(BaseModel):
    title: str
    description: str
    category: str
    estimated_time: float = Field(alias='estimatedTime', gt=0)

    class Config:
        populate_by_name = True

    @field_validator('title', 'description', 'category')
    @classmethod
    def validate_required_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Field must not be blank.')
        return normalized


class UserResponse(BaseModel):
    id: int
    email: str
    role: str

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    user: UserResponse


class LoginResponse(BaseModel):
    user: UserResponse
    token: str


class UserSummary(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True


class ModuleResponse(BaseModel):
    id: int
    title: str
    description: str
    category: str
    estimatedTime: float
    createdBy: UserSummary
    enrolledUsers: list[UserSummary]
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_module(cls, module) -> 'ModuleResponse':
        return cls(
            id=module.id,
            title=module.title,
            description=module.description,
            category=module.category,
            estimatedTime=module.estimated_time,
            createdBy=UserSummary.model_validate(module.created_by),
            enrolledUsers=[UserSummary.model_validate(user) for user in module.enrolled_users],
            createdAt=module.created_at,
            updatedAt=module.updated_at,
        )


class ModuleListResponse(BaseModel):
    modules: list[ModuleResponse]
    page: int
    limit: int


class EnrolledModulesResponse(BaseModel):
    modules: list[ModuleResponse]


class EnrollmentCountResponse(BaseModel):
    enrolledUsers: int


class MessageResponse(BaseModel):
    msg: str
