"""
Django Skuman app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SkumanConfig(AppConfig):
    """Skuman application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "skuman"
    verbose_name = _("Catalog Codes")
