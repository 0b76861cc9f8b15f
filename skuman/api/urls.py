"""
Skuman API URLs.

Include this in your project's urlpatterns:

    path('api/skuman/', include('skuman.api.urls')),
"""

from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import (
    ArtworkViewSet,
    ProductTypeViewSet,
    ProductVariantViewSet,
    ProductViewSet,
    SkuCheckView,
    VariantCodeViewSet,
    VariantGroupViewSet,
)

router = DefaultRouter()
router.register("artworks", ArtworkViewSet)
router.register("product-types", ProductTypeViewSet)
router.register("variant-groups", VariantGroupViewSet)
router.register("variant-codes", VariantCodeViewSet)
router.register("products", ProductViewSet)
router.register("variants", ProductVariantViewSet)

urlpatterns = [
    path("skus/check/", SkuCheckView.as_view(), name="sku-check"),
    *router.urls,
]
