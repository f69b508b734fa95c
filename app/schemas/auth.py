"""Auth, user and API-token schemas."""

from datetime import datetime

from pydantic import Field

from app.schemas.common import EMAIL_PATTERN, CamelModel
from app.schemas.organization import OrganizationOut


class RegisterRequest(CamelModel):
    organization_name: str = Field(min_length=1, max_length=255)
    billing_email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=8, max_length=128)
    first_name: str | None = None
    last_name: str | None = None


class LoginRequest(CamelModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class UserOut(CamelModel):
    id: str
    organization_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    organization_role: str
    user_type: str
    job_title: str | None = None
    department: str | None = None
    phone_number: str | None = None
    onboarding_completed: bool
    last_login: datetime | None = None
    created_at: datetime


class RegisterOut(CamelModel):
    user: UserOut
    organization: OrganizationOut


class UserUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    job_title: str | None = None
    department: str | None = None
    phone_number: str | None = None
    onboarding_completed: bool | None = None


class ApiTokenCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    permissions: list[str] = Field(default_factory=list)
    expires_at: datetime | None = None


class ApiTokenOut(CamelModel):
    id: str
    name: str
    token: str = Field(validation_alias="masked_token")
    permissions: list[str]
    last_used: datetime | None = None
    expires_at: datetime | None = None
    is_active: bool
    created_at: datetime


class ApiTokenCreated(CamelModel):
    """Returned once at creation; carries the full token."""

    id: str
    name: str
    token: str
    permissions: list[str]
    expires_at: datetime | None = None
    created_at: datetime
