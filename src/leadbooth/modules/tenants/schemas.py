"""Tenant request/response schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from leadbooth.core.constants import MAX_COLOR_LENGTH, MAX_NAME_LENGTH


class TenantResponse(BaseModel):
    """Public tenant record returned by subdomain resolution."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    subdomain: str
    logo_url: str | None = None
    primary_color: str
    dark_color: str
    accent_color: str | None = None
    is_active: bool


class BrandingResponse(BaseModel):
    """Full branding record of the caller's tenant."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    subdomain: str
    logo_url: str | None = None
    primary_color: str
    dark_color: str
    accent_color: str | None = None
    company_email: str | None = None
    company_domain: str | None = None
    support_email: str | None = None


class BrandingUpdate(BaseModel):
    """Partial branding update. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    logo_url: str | None = None
    primary_color: str | None = Field(None, max_length=MAX_COLOR_LENGTH)
    dark_color: str | None = Field(None, max_length=MAX_COLOR_LENGTH)
    accent_color: str | None = Field(None, max_length=MAX_COLOR_LENGTH)
    company_email: EmailStr | None = None
    company_domain: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    support_email: EmailStr | None = None


class AccountLookupRequest(BaseModel):
    """Request to find the login URL of an account by e-mail."""

    email: str = Field(..., max_length=255)


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = True


class MessageResponse(SuccessResponse):
    """Acknowledgement with a human-readable message."""

    message: str
