"""
Shared fixtures for Skuman tests.
"""

import pytest
from django.contrib.auth import get_user_model

from skuman.conf import reset_asc_allocator
from skuman.context import CatalogContext, Role


@pytest.fixture(autouse=True)
def fresh_allocator():
    """Each test builds its allocator from the settings it runs with."""
    reset_asc_allocator()
    yield
    reset_asc_allocator()


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(
        username="staff", password="test123", is_staff=True
    )


@pytest.fixture
def partner_user(db):
    return get_user_model().objects.create_user(username="partner", password="test123")


@pytest.fixture
def other_partner(db):
    return get_user_model().objects.create_user(username="other", password="test123")


@pytest.fixture
def admin_ctx(staff_user):
    return CatalogContext(user=staff_user, role=Role.ADMIN)


@pytest.fixture
def partner_ctx(partner_user):
    return CatalogContext(user=partner_user, role=Role.PARTNER)


@pytest.fixture
def viewer_ctx(db):
    user = get_user_model().objects.create_user(username="viewer", password="test123")
    return CatalogContext(user=user, role=Role.VIEWER)
