"""Vendor Pydantic schemas (request DTOs and response models)."""


from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.common import EMAIL_PATTERN, CamelModel

VendorStatus = Literal["pending", "active", "inactive"]

class VendorCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    status: VendorStatus = "pending"
    website: str | None = None
    company_logo: str | None = None
    primary_contact: str | None = None
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    phone: str | None = None
    address: str | None = None
    services: list[str] = Field(default_factory=lambda: ["General Waste"])
    service_areas: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    rating: int = Field(default=0, ge=0, le=100)
    on_time_rate: int = Field(default=0, ge=0, le=100)
    recycling_efficiency: int = Field(default=0, ge=0, le=100)
    customer_satisfaction: int = Field(default=0, ge=0, le=100)
    contract_start: datetime | None = None
    contract_end: datetime | None = None
    contract_terms: str | None = None
    notes: str | None = None

class VendorUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    status: VendorStatus | None = None
    website: str | None = None
    company_logo: str | None = None
    primary_contact: str | None = None
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN)
    phone: str | None = None
    address: str | None = None
    services: list[str] | None = None
    service_areas: list[str] | None = None
    certifications: list[str] | None = None
    rating: int | None = Field(default=None, ge=0, le=100)
    on_time_rate: int | None = Field(default=None, ge=0, le=100)
    recycling_efficiency: int | None = Field(default=None, ge=0, le=100)
    customer_satisfaction: int | None = Field(default=None, ge=0, le=100)
    contract_start: datetime | None = None
    contract_end: datetime | None = None
    contract_terms: str | None = None
    notes: str | None = None

class VendorOut(CamelModel):
    id: str
    organization_id: str
    name: str
    status: str
    website: str | None = None
    company_logo: str | None = None
    primary_contact: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    services: list[str]
    service_areas: list[str]
    certifications: list[str]
    rating: int
    on_time_rate: int
    recycling_efficiency: int
    customer_satisfaction: int
    contract_start: datetime | None = None
    contract_end: datetime | None = None
    contract_terms: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
