"""Tradeshow request/response schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from leadbooth.core.constants import (
    MAX_COUNTRY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_TAG_NAME_LENGTH,
)


SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class TagSchema(BaseModel):
    """A tradeshow tag."""

    model_config = ConfigDict(from_attributes=True)

    tag_name: str = Field(..., min_length=1, max_length=MAX_TAG_NAME_LENGTH)
    tag_value: str = Field(..., max_length=MAX_NAME_LENGTH)


class TradeshowPublic(BaseModel):
    """Tradeshow fields exposed to the public lead form."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = None
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    default_country: str | None = None
    is_active: bool
    created_at: datetime


class TradeshowSummary(TradeshowPublic):
    """A tradeshow in the dashboard list."""

    submission_count: int = 0
    tags: list[TagSchema] = []


class SubmissionSummary(BaseModel):
    """A lead submitted at a tradeshow."""

    id: int
    contact_email: str
    contact_name: str
    uploaded_at: datetime
    rep_name: str | None = None
    rep_code: str | None = None


class TradeshowDetail(TradeshowPublic):
    """A tradeshow with its creator, tags and submissions."""

    updated_at: datetime
    created_by: int | None = None
    created_by_name: str | None = None
    submission_count: int = 0
    tags: list[TagSchema] = []
    submissions: list[SubmissionSummary] = []


class TradeshowCreate(BaseModel):
    """Schema for creating a tradeshow."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    slug: str = Field(..., min_length=1, max_length=MAX_SLUG_LENGTH, pattern=SLUG_PATTERN)
    description: str | None = None
    location: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    start_date: date | None = None
    end_date: date | None = None
    default_country: str | None = Field(None, max_length=MAX_COUNTRY_LENGTH)
    tags: list[TagSchema] = []

    @model_validator(mode="after")
    def check_dates(self) -> "TradeshowCreate":
        """Reject an end date before the start date."""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ToggleActiveResponse(BaseModel):
    """Result of toggling a tradeshow between active and archived."""

    success: bool = True
    message: str
    is_active: bool


class TradeshowUpdate(BaseModel):
    """Schema for a partial tradeshow update. Only sent fields are applied."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = None
    location: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    start_date: date | None = None
    end_date: date | None = None
    default_country: str | None = Field(None, max_length=MAX_COUNTRY_LENGTH)
    is_active: bool | None = None

    @field_validator("name", "is_active")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Name and active flag may be omitted but never cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v
