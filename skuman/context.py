"""
Skuman request context.

Who is acting and under which role, passed explicitly to every catalog
operation that needs authorization. There is no ambient "current role".

Usage:
    ctx = CatalogContext(user=request.user, role=Role.PARTNER)
    artwork = catalog.create_artwork(ctx, title="Blue Hour")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.db import models
from django.utils.translation import gettext_lazy as _

from skuman.exceptions import SkumanError


class Role(models.TextChoices):
    """Platform roles."""

    ADMIN = "admin", _("Admin")
    EDITOR = "editor", _("Editor")
    VIEWER = "viewer", _("Viewer")
    PARTNER = "partner", _("Partner")
    CUSTOMER = "customer", _("Customer")


CATALOG_MANAGERS = (Role.ADMIN, Role.EDITOR)
ARTWORK_CREATORS = (Role.ADMIN, Role.EDITOR, Role.PARTNER)


@dataclass(frozen=True)
class CatalogContext:
    """Acting user plus the role they are currently acting under."""

    user: Any
    role: str = Role.VIEWER

    @classmethod
    def from_request(cls, request) -> CatalogContext:
        """Staff users act as admin, everyone else as partner."""
        user = request.user
        role = Role.ADMIN if getattr(user, "is_staff", False) else Role.PARTNER
        return cls(user=user, role=role)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user is not None and getattr(self.user, "is_authenticated", False))

    @property
    def can_manage_catalog(self) -> bool:
        return self.role in CATALOG_MANAGERS

    @property
    def can_create_artworks(self) -> bool:
        return self.role in ARTWORK_CREATORS

    @property
    def actor(self) -> str:
        """Audit label, e.g. 'user:joana' or 'system'."""
        if not self.is_authenticated:
            return "system"
        return f"user:{self.user.get_username()}"

    def require_user(self) -> None:
        if not self.is_authenticated:
            raise SkumanError("NOT_AUTHENTICATED")

    def require_catalog_manager(self) -> None:
        self.require_user()
        if not self.can_manage_catalog:
            raise SkumanError("PERMISSION_DENIED", role=str(self.role), action="manage_catalog")

    def require_artwork_creator(self) -> None:
        self.require_user()
        if not self.can_create_artworks:
            raise SkumanError("PERMISSION_DENIED", role=str(self.role), action="create_artwork")
