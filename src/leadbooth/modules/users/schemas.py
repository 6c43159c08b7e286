"""User request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from leadbooth.core.constants import (
    MAX_DB_ID,
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MAX_REP_CODE_LENGTH,
    MIN_PASSWORD_LENGTH,
)


class RepLookupResponse(BaseModel):
    """A rep resolved from its rep code."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    rep_code: str | None
    email: str
    role: str


class RepResponse(BaseModel):
    """A rep as listed to admins."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    rep_code: str | None
    last_login: datetime | None = None
    created_at: datetime


class RepCreate(BaseModel):
    """Schema for creating a rep in the admin's tenant."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    rep_code: str = Field(..., min_length=1, max_length=MAX_REP_CODE_LENGTH)
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        max_length=MAX_PASSWORD_LENGTH,
    )

    @field_validator("rep_code")
    @classmethod
    def strip_rep_code(cls, v: str) -> str:
        """Rep codes appear in URLs, so surrounding whitespace is dropped."""
        v = v.strip()
        if not v:
            raise ValueError("Rep code cannot be blank")
        return v


class RepUpdate(RepCreate):
    """Schema for replacing a rep's details. The password is optional."""

    id: int = Field(..., ge=1, le=MAX_DB_ID)
    password: str | None = Field(
        None,
        min_length=MIN_PASSWORD_LENGTH,
        max_length=MAX_PASSWORD_LENGTH,
    )


class SettingsUpdate(BaseModel):
    """Changes a signed-in user makes to their own account.

    Accepts both ``currentPassword`` and ``current_password`` spellings.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    current_password: str | None = Field(
        None, alias="currentPassword", max_length=MAX_PASSWORD_LENGTH
    )
    new_password: str | None = Field(None, alias="newPassword", max_length=MAX_PASSWORD_LENGTH)
