"""Organization and membership schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.common import EMAIL_PATTERN, CamelModel

class OrganizationOut(CamelModel):
    id: str
    name: str
    slug: str
    plan: str
    max_users: int
    billing_email: str
    address: str | None = None
    phone: str | None = None
    website: str | None = None
    logo: str | None = None
    created_at: datetime
    updated_at: datetime

class OrganizationUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    billing_email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    address: str | None = None
    phone: str | None = None
    website: str | None = None
    logo: str | None = None

class MemberCreate(CamelModel):
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=8, max_length=128)
    first_name: str | None = None
    last_name: str | None = None
    organization_role: Literal["admin", "member"] = "member"
    user_type: Literal["full", "lite"] = "full"
