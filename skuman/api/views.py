"""
Skuman API ViewSets.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from skuman.context import CatalogContext
from skuman.exceptions import AllocationError, SkumanError
from skuman.models import (
    Artwork,
    Product,
    ProductType,
    ProductVariant,
    VariantCode,
    VariantGroup,
)
from skuman.service import catalog
from skuman.services.variants import check_sku
from .serializers import (
    ArtworkSerializer,
    AscHistorySerializer,
    AssignVariantGroupsSerializer,
    ProductSerializer,
    ProductTypeSerializer,
    ProductTypeUpdateSerializer,
    ProductTypeVariantGroupSerializer,
    ProductUpdateSerializer,
    ProductVariantCreateSerializer,
    ProductVariantSerializer,
    ReorderVariantGroupsSerializer,
    SkuCheckSerializer,
    VariantCodeSerializer,
    VariantGroupSerializer,
)

logger = logging.getLogger(__name__)

FORBIDDEN_CODES = ("PERMISSION_DENIED", "NOT_AUTHENTICATED")


class IsCatalogManagerOrReadOnly(permissions.BasePermission):
    """Reads for any authenticated user; writes for admins and editors."""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return CatalogContext.from_request(request).can_manage_catalog


class SkumanViewMixin:
    """Maps skuman errors to HTTP responses and builds the request context."""

    def get_context(self) -> CatalogContext:
        return CatalogContext.from_request(self.request)

    def handle_exception(self, exc):
        if isinstance(exc, AllocationError):
            logger.error(f"ASC allocation failed: {exc}")
            return Response({"error": exc.as_dict()}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        if isinstance(exc, SkumanError):
            code = (
                status.HTTP_403_FORBIDDEN
                if exc.code in FORBIDDEN_CODES
                else status.HTTP_400_BAD_REQUEST
            )
            return Response({"error": exc.as_dict()}, status=code)
        if isinstance(exc, DjangoValidationError):
            messages = exc.message_dict if hasattr(exc, "error_dict") else exc.messages
            return Response(
                {"error": {"code": "VALIDATION_ERROR", "messages": messages}},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().handle_exception(exc)


class ArtworkViewSet(SkumanViewMixin, viewsets.ModelViewSet):
    """
    ViewSet for Artwork.

    list: Artworks visible to the caller (partners see their own)
    create: Create an artwork; its ASC code is allocated server-side
    retrieve: Get an artwork by UUID
    update: Update editable fields (ASC code is read-only)
    archive: Archive the artwork
    history: ASC assignment history
    """

    permission_classes = [IsAuthenticated]
    queryset = Artwork.objects.all()
    serializer_class = ArtworkSerializer
    lookup_field = "uuid"
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):
        qs = super().get_queryset()
        ctx = self.get_context()
        if not ctx.can_manage_catalog:
            qs = qs.filter(partner=ctx.user)
        return qs

    def create(self, request, *args, **kwargs):
        """
        POST /api/skuman/artworks/
        {
            "title": "Blue Hour",
            "artist_name": "M. Okafor",
            "tags": ["night", "city"]
        }
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        tags = data.pop("tags", None)
        artwork = catalog.create_artwork(self.get_context(), tags=tags, **data)

        return Response(self.get_serializer(artwork).data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        serializer.instance = catalog.update_artwork(
            self.get_context(), serializer.instance, **serializer.validated_data
        )

    @action(detail=True, methods=["post"])
    def archive(self, request, uuid=None):
        """
        Archive the artwork.

        POST /api/skuman/artworks/{uuid}/archive/
        """
        artwork = catalog.archive_artwork(self.get_context(), self.get_object())
        return Response({"status": artwork.status, "asc_code": artwork.asc_code})

    @action(detail=True, methods=["get"])
    def history(self, request, uuid=None):
        """
        GET /api/skuman/artworks/{uuid}/history/
        """
        artwork = self.get_object()
        return Response(AscHistorySerializer(artwork.asc_history.all(), many=True).data)

    @action(detail=False, methods=["get"])
    def stats(self, request):
        """
        GET /api/skuman/artworks/stats/
        """
        ctx = self.get_context()
        partner = None if ctx.can_manage_catalog else ctx.user
        stats = catalog.artwork_stats(partner=partner)
        return Response(vars(stats))


class ProductTypeViewSet(SkumanViewMixin, viewsets.ModelViewSet):
    """
    ViewSet for ProductType.

    list / retrieve: Product types with their variant groups
    create: Type code must be 3 uppercase letters
    update: Name, description, order (type code is fixed once created)
    variant_mapping: Which group fills VAR1/VAR2/VAR3
    assign_groups: Replace the variant groups
    reorder: Change slot order (issued SKUs are not touched)
    """

    permission_classes = [IsAuthenticated, IsCatalogManagerOrReadOnly]
    queryset = ProductType.objects.prefetch_related("variant_group_assignments__variant_group")
    serializer_class = ProductTypeSerializer

    def get_serializer_class(self):
        if self.action in ("update", "partial_update"):
            return ProductTypeUpdateSerializer
        return super().get_serializer_class()

    def perform_create(self, serializer):
        serializer.instance = catalog.create_product_type(
            self.get_context(), **serializer.validated_data
        )

    def perform_update(self, serializer):
        serializer.instance = catalog.update_product_type(
            self.get_context(), serializer.instance, **serializer.validated_data
        )

    @action(detail=True, methods=["get"], url_path="variant-mapping")
    def variant_mapping(self, request, pk=None):
        """
        GET /api/skuman/product-types/{pk}/variant-mapping/
        """
        slots = catalog.get_variant_mapping(self.get_object())
        return Response({
            f"var{index}": (
                VariantGroupSerializer(group).data if group is not None else None
            )
            for index, group in enumerate(slots.groups, start=1)
        })

    @action(detail=True, methods=["post"], url_path="assign-groups")
    def assign_groups(self, request, pk=None):
        """
        POST /api/skuman/product-types/{pk}/assign-groups/
        {
            "groups": [{"variant_group": 3, "sort_order": 0}]
        }
        """
        product_type = self.get_object()
        serializer = AssignVariantGroupsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignments = catalog.assign_variant_groups(
            self.get_context(), product_type, serializer.validated_data["groups"]
        )
        return Response(ProductTypeVariantGroupSerializer(assignments, many=True).data)

    @action(detail=True, methods=["post"])
    def reorder(self, request, pk=None):
        """
        POST /api/skuman/product-types/{pk}/reorder/
        {
            "updates": [{"id": 12, "sort_order": 1}, {"id": 13, "sort_order": 0}]
        }
        """
        product_type = self.get_object()
        serializer = ReorderVariantGroupsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updates = {u["id"]: u["sort_order"] for u in serializer.validated_data["updates"]}
        catalog.reorder_variant_groups(self.get_context(), product_type, updates)
        return Response(
            ProductTypeVariantGroupSerializer(product_type.active_assignments(), many=True).data
        )


class VariantGroupViewSet(SkumanViewMixin, viewsets.ModelViewSet):
    """ViewSet for VariantGroup."""

    permission_classes = [IsAuthenticated, IsCatalogManagerOrReadOnly]
    queryset = VariantGroup.objects.all()
    serializer_class = VariantGroupSerializer


class VariantCodeViewSet(SkumanViewMixin, viewsets.ModelViewSet):
    """ViewSet for VariantCode. Filter with ?variant_group=<id>."""

    permission_classes = [IsAuthenticated, IsCatalogManagerOrReadOnly]
    queryset = VariantCode.objects.all()
    serializer_class = VariantCodeSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        group = self.request.query_params.get("variant_group")
        if group:
            qs = qs.filter(variant_group_id=group)
        return qs


class ProductViewSet(SkumanViewMixin, viewsets.ModelViewSet):
    """
    ViewSet for Product. base_sku is derived from artwork + type.

    update: Name, dates, status (artwork and product type are fixed)
    """

    permission_classes = [IsAuthenticated, IsCatalogManagerOrReadOnly]
    queryset = Product.objects.select_related("artwork", "product_type")
    serializer_class = ProductSerializer

    def get_serializer_class(self):
        if self.action in ("update", "partial_update"):
            return ProductUpdateSerializer
        return super().get_serializer_class()

    def perform_create(self, serializer):
        serializer.instance = catalog.create_product(
            self.get_context(), **serializer.validated_data
        )


class ProductVariantViewSet(SkumanViewMixin, viewsets.ModelViewSet):
    """
    ViewSet for ProductVariant.

    create: Issue a SKU from variant selections
    update: Prices, stock, name (the SKU itself never changes)
    """

    permission_classes = [IsAuthenticated, IsCatalogManagerOrReadOnly]
    queryset = ProductVariant.objects.select_related("product")
    serializer_class = ProductVariantSerializer
    lookup_field = "uuid"

    def create(self, request, *args, **kwargs):
        """
        POST /api/skuman/variants/
        {
            "product": 7,
            "selections": {"3": "03", "5": "07"},
            "retail_price": "49.00"
        }
        """
        serializer = ProductVariantCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        product = data.pop("product")
        selections = data.pop("selections", None)
        variant = catalog.create_variant(self.get_context(), product, selections, **data)

        return Response(ProductVariantSerializer(variant).data, status=status.HTTP_201_CREATED)


class SkuCheckView(SkumanViewMixin, APIView):
    """
    Check a SKU string.

    POST /api/skuman/skus/check/
    {"sku": "11K001-UTS-03-07-12"}
    """

    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = SkuCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(check_sku(serializer.validated_data["sku"]).as_dict())
