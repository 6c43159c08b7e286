"""Lead capture request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TrackViewRequest(BaseModel):
    """A page view event from a public form.

    ``formSource`` is accepted alongside ``form_source``.
    """

    model_config = ConfigDict(populate_by_name=True)

    form_source: str | None = Field(None, alias="formSource")


class LeadSubmittedResponse(BaseModel):
    """Result of a lead submission."""

    success: bool = True
    photo_id: int
    photo_url: str


class FunnelStats(BaseModel):
    """Submission and view counts for one form source."""

    count: int = 0
    latest_submission: datetime | None = None
    views: int = 0


class AnalyticsResponse(BaseModel):
    """Per-form-source funnel summary."""

    funnels: dict[str, FunnelStats]
    total_submissions: int
