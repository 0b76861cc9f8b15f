"""
Artwork service -- create, update, archive, audit.

All methods are @classmethod so the mixin can be composed into Catalog
without instantiation.
"""

import logging

from django.db.models import Count, Q

from skuman.codes import asc_sequence_number
from skuman.conf import get_setting
from skuman.context import CatalogContext
from skuman.exceptions import SkumanError
from skuman.models import Artwork, ArtworkStatus, AscHistory, AscHistoryStatus
from skuman.results import ArtworkStats
from skuman.services.allocation import allocate_artwork_code

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = ("asc_code", "sequence_number")


class CatalogArtworks:
    """Artwork lifecycle operations."""

    @classmethod
    def allocate_code(cls) -> str:
        """Allocate an ASC code without creating an artwork."""
        return allocate_artwork_code()

    @classmethod
    def create_artwork(
        cls,
        context: CatalogContext,
        title: str,
        partner=None,
        tags: list[str] | None = None,
        **fields,
    ) -> Artwork:
        """
        Create an artwork with a freshly allocated ASC code.

        Steps:
            1. allocate the code (AllocationError propagates, nothing persisted)
            2. persist the artwork with code + sequence number
            3. append an AscHistory "assigned" record

        Args:
            context: Acting user and role
            title: Artwork title
            partner: Owning partner; only admins/editors may pass someone
                else, partners always create for themselves
            tags: Tag names
            **fields: Other Artwork fields (artist_name, description...)

        Example:
            catalog.create_artwork(ctx, "Blue Hour", artist_name="M. Okafor")
        """
        context.require_artwork_creator()

        for name in IMMUTABLE_FIELDS:
            if name in fields:
                raise SkumanError("ASC_CODE_IMMUTABLE", field=name)

        if partner is None or not context.can_manage_catalog:
            partner = context.user

        asc_code = allocate_artwork_code()
        sequence_number = asc_sequence_number(asc_code)

        fields.setdefault("status", get_setting("DEFAULT_ARTWORK_STATUS"))
        artwork = Artwork.objects.create(
            asc_code=asc_code,
            sequence_number=sequence_number,
            title=title,
            partner=partner,
            created_by=context.user,
            **fields,
        )
        if tags:
            artwork.tags.add(*tags)

        AscHistory.objects.create(
            asc_code=asc_code,
            artwork=artwork,
            status=AscHistoryStatus.ASSIGNED,
            assigned_by=context.user,
            notes=f"ASC code generated for artwork: {title}",
        )

        logger.info(
            f"Artwork {asc_code} created: {title}",
            extra={
                "artwork": artwork.pk,
                "asc_code": asc_code,
                "partner": partner.pk,
                "actor": context.actor,
            },
        )

        return artwork

    @classmethod
    def update_artwork(cls, context: CatalogContext, artwork: Artwork, **changes) -> Artwork:
        """Update editable artwork fields. ASC code and sequence number are refused."""
        cls._require_artwork_owner(context, artwork)

        for name in IMMUTABLE_FIELDS:
            if name in changes:
                raise SkumanError("ASC_CODE_IMMUTABLE", field=name, asc_code=artwork.asc_code)

        if "partner" in changes and not context.can_manage_catalog:
            raise SkumanError(
                "PERMISSION_DENIED",
                role=str(context.role),
                action="reassign_partner",
                asc_code=artwork.asc_code,
            )

        tags = changes.pop("tags", None)
        for name, value in changes.items():
            setattr(artwork, name, value)
        artwork.save()

        if tags is not None:
            artwork.tags.set(tags, clear=True)

        logger.info(
            f"Artwork {artwork.asc_code} updated",
            extra={
                "artwork": artwork.pk,
                "fields": sorted(changes),
                "actor": context.actor,
            },
        )
        return artwork

    @classmethod
    def archive_artwork(cls, context: CatalogContext, artwork: Artwork) -> Artwork:
        cls._require_artwork_owner(context, artwork)
        artwork.archive(user=context.user)
        return artwork

    @classmethod
    def void_asc_code(cls, context: CatalogContext, history: AscHistory, reason: str) -> AscHistory:
        """Void an ASC assignment record. The code is never handed out again."""
        context.require_catalog_manager()
        history.void(reason, user=context.user)
        return history

    @classmethod
    def artwork_stats(cls, partner=None) -> ArtworkStats:
        """Artwork counts by status, optionally for one partner."""
        qs = Artwork.objects.all()
        if partner is not None:
            qs = qs.filter(partner=partner)

        counts = qs.aggregate(
            total=Count("id"),
            active=Count("id", filter=Q(status=ArtworkStatus.ACTIVE)),
            draft=Count("id", filter=Q(status=ArtworkStatus.DRAFT)),
            archived=Count("id", filter=Q(status=ArtworkStatus.ARCHIVED)),
        )
        return ArtworkStats(**counts)

    @staticmethod
    def _require_artwork_owner(context: CatalogContext, artwork: Artwork) -> None:
        context.require_user()
        if context.can_manage_catalog:
            return
        if context.can_create_artworks and artwork.partner_id == context.user.pk:
            return
        raise SkumanError(
            "PERMISSION_DENIED",
            role=str(context.role),
            action="edit_artwork",
            asc_code=artwork.asc_code,
        )
