"""Lead capture service: submissions, badge photos, views and analytics."""

from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from leadbooth.config import settings
from leadbooth.core.constants import MAX_IPV6_LENGTH, UNKNOWN_CLIENT_VALUE
from leadbooth.core.errors import BadRequestError, InternalError, NotFoundError
from leadbooth.modules.leads.models import BadgePhoto, PageView
from leadbooth.modules.leads.repos import BadgePhotoRepo, PageViewRepo
from leadbooth.modules.leads.schemas import AnalyticsResponse, FunnelStats
from leadbooth.modules.tradeshows.repos import TradeshowRepo
from leadbooth.modules.users.repos import UserRepo


logger = structlog.get_logger()


class LeadService:
    """Service for the public lead capture surface."""

    def __init__(
        self,
        photos: BadgePhotoRepo,
        views: PageViewRepo,
        tradeshows: TradeshowRepo,
        users: UserRepo,
    ) -> None:
        self.photos = photos
        self.views = views
        self.tradeshows = tradeshows
        self.users = users

    async def get_badge_photo(self, photo_id: int) -> BadgePhoto:
        """Get a stored badge photo with its bytes.

        Args:
            photo_id: The photo's ID

        Returns:
            The photo

        Raises:
            NotFoundError: If the photo doesn't exist or has no data
        """
        photo = await self.photos.get_with_data(photo_id)
        if photo is None or not photo.image_data:
            raise NotFoundError("Photo not found", resource="badge_photo", resource_id=str(photo_id))
        return photo

    async def submit_lead(
        self,
        *,
        email: str,
        name: str,
        form_source: str,
        filename: str,
        mime_type: str,
        image_data: bytes,
        tradeshow_slug: str | None = None,
        rep_code: str | None = None,
    ) -> BadgePhoto:
        """Store a lead captured at a booth.

        An unknown rep code doesn't reject the lead; it is stored
        unattributed and a warning is logged.

        Args:
            email: Attendee e-mail
            name: Attendee name
            form_source: The public form that produced the lead
            filename: Uploaded file name
            mime_type: Uploaded content type
            image_data: The badge photo bytes
            tradeshow_slug: Tradeshow the lead was captured at
            rep_code: Rep the lead is attributed to

        Returns:
            The stored submission

        Raises:
            BadRequestError: If the photo is empty, not an image or too large
            NotFoundError: If the tradeshow slug is unknown
        """
        if not form_source.strip():
            raise BadRequestError("Missing form source", error_code="form_source_required")
        if not mime_type.startswith("image/"):
            raise BadRequestError("Badge photo must be an image", error_code="invalid_photo_type")
        if not image_data:
            raise BadRequestError("Badge photo is empty", error_code="empty_photo")
        if len(image_data) > settings.max_badge_photo_bytes:
            raise BadRequestError("Badge photo is too large", error_code="photo_too_large")

        tradeshow_id = None
        if tradeshow_slug:
            tradeshow = await self.tradeshows.get_by_slug(tradeshow_slug)
            if not tradeshow:
                raise NotFoundError(
                    "Tradeshow not found",
                    resource="tradeshow",
                    resource_id=tradeshow_slug,
                )
            tradeshow_id = tradeshow.id

        rep_id = None
        if rep_code:
            rep = await self.users.find_rep_by_code(rep_code)
            if rep is None:
                logger.warning("lead_rep_code_unknown", rep_code=rep_code, form_source=form_source)
            else:
                rep_id = rep.id

        photo = BadgePhoto(
            tradeshow_id=tradeshow_id,
            filename=filename,
            mime_type=mime_type,
            file_size=len(image_data),
            image_data=image_data,
            contact_email=email.strip().lower(),
            contact_name=name.strip(),
            submitted_by_rep=rep_id,
            form_source=form_source.strip(),
        )
        photo = await self.photos.create(photo)

        logger.info(
            "lead_submitted",
            photo_id=photo.id,
            tradeshow_id=tradeshow_id,
            rep_id=rep_id,
            form_source=photo.form_source,
            file_size=photo.file_size,
        )
        return photo

    async def track_view(
        self,
        form_source: str | None,
        user_agent: str | None,
        ip_address: str | None,
    ) -> None:
        """Record a view of a public form.

        The form source is checked before the store is touched.

        Args:
            form_source: The viewed form
            user_agent: Client user agent
            ip_address: Client IP address

        Raises:
            BadRequestError: If the form source is missing
            InternalError: If the view couldn't be stored
        """
        if not form_source or not form_source.strip():
            raise BadRequestError("Missing form source", error_code="form_source_required")

        view = PageView(
            form_source=form_source.strip(),
            user_agent=user_agent or UNKNOWN_CLIENT_VALUE,
            ip_address=(ip_address or UNKNOWN_CLIENT_VALUE)[:MAX_IPV6_LENGTH],
        )
        try:
            await self.views.create(view)
        except SQLAlchemyError as exc:
            logger.error("track_view_failed", form_source=view.form_source, error=str(exc))
            raise InternalError("Failed to track view", error_code="track_view_failed") from exc

    async def analytics(self) -> AnalyticsResponse:
        """Summarise submissions and views per form source.

        Configured form sources always appear, with zero counts when
        they have no data; sources seen only in data are appended.

        Raises:
            InternalError: If the store couldn't be queried
        """
        try:
            submissions = await self.photos.submission_stats()
            views = await self.views.count_by_source()
        except SQLAlchemyError as exc:
            logger.error("analytics_failed", error=str(exc))
            raise InternalError("Failed to fetch analytics", error_code="analytics_failed") from exc

        sources = list(settings.form_sources)
        for source in sorted(set(submissions) | set(views)):
            if source not in sources:
                sources.append(source)

        funnels: dict[str, FunnelStats] = {}
        for source in sources:
            count, latest = submissions.get(source, (0, None))
            funnels[source] = FunnelStats(
                count=count,
                latest_submission=latest,
                views=views.get(source, 0),
            )

        return AnalyticsResponse(
            funnels=funnels,
            total_submissions=sum(stats.count for stats in funnels.values()),
        )


# Type alias for dependency injection
LeadSvc = Annotated[LeadService, Depends(LeadService)]
