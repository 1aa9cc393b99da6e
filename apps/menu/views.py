"""
Views for menu management.

- Category CRUD
- Menu list with search and filters, grouped listing, CRUD
- Menu variation CRUD
"""

import logging

from django.shortcuts import get_object_or_404

from rest_framework import filters, generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.permissions import IsStoreManagerOrReadOnly

from .models import Category, Menu, MenuVariation
from .serializers import (
    CategorySerializer,
    MenuGroupSerializer,
    MenuSerializer,
    MenuVariationSerializer,
)
from .services import delete_menu, filter_menus, group_menus_by_category

logger = logging.getLogger(__name__)


# Category Views


class CategoryListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing (by name) and creating categories.
    """

    serializer_class = CategorySerializer
    permission_classes = [IsStoreManagerOrReadOnly]
    pagination_class = None

    def get_queryset(self):
        return Category.objects.prefetch_related("menus").order_by("name")


class CategoryDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for retrieving, renaming and deleting a category.

    Menus of a deleted category stay, without a category.
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsStoreManagerOrReadOnly]


# Menu Views


class MenuListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing menus with search and filters, and creating menus.

    Supports:
    - Search by name (case-insensitive)
    - Filter by category (id or "none") and is_active
    - Ordering by name, price, stock, created_at
    """

    serializer_class = MenuSerializer
    permission_classes = [IsStoreManagerOrReadOnly]
    filter_backends = [filters.OrderingFilter]
    ordering_fields = ["name", "price", "stock", "created_at"]
    ordering = ["-created_at"]

    def get_queryset(self):
        queryset = Menu.objects.select_related("category").prefetch_related("variations")
        params = self.request.query_params
        return filter_menus(
            queryset,
            search=params.get("search"),
            category=params.get("category"),
            is_active=params.get("is_active"),
        )

    def perform_create(self, serializer):
        menu = serializer.save()
        logger.info(f"Menu {menu.name} created by {self.request.user.username}")


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def grouped_menus(request):
    """
    API endpoint returning menus grouped by category.

    Accepts the same ``search`` and ``is_active`` filters as the menu list.
    """
    queryset = Menu.objects.select_related("category").prefetch_related("variations")
    queryset = filter_menus(
        queryset,
        search=request.query_params.get("search"),
        is_active=request.query_params.get("is_active"),
    )

    groups = group_menus_by_category(queryset)
    return Response(MenuGroupSerializer(groups, many=True).data)


class MenuDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for retrieving, updating and deleting a menu.

    A menu that was ever ordered is deactivated instead of deleted.
    """

    serializer_class = MenuSerializer
    permission_classes = [IsStoreManagerOrReadOnly]

    def get_queryset(self):
        return Menu.objects.select_related("category").prefetch_related("variations")

    def destroy(self, request, *args, **kwargs):
        menu = self.get_object()
        result = delete_menu(menu)

        if result == "deactivated":
            return Response(
                {
                    "detail": "Menu has order history and was deactivated instead of deleted.",
                    "result": result,
                },
                status=status.HTTP_200_OK,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)


# Menu Variation Views


class MenuVariationListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing and adding variations of a menu.
    """

    serializer_class = MenuVariationSerializer
    permission_classes = [IsStoreManagerOrReadOnly]
    pagination_class = None

    def get_menu(self):
        return get_object_or_404(Menu, pk=self.kwargs["menu_id"])

    def get_queryset(self):
        return MenuVariation.objects.filter(menu=self.get_menu()).order_by("name")

    def perform_create(self, serializer):
        serializer.save(menu=self.get_menu())


class MenuVariationDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for updating and deleting a menu variation.
    """

    queryset = MenuVariation.objects.select_related("menu")
    serializer_class = MenuVariationSerializer
    permission_classes = [IsStoreManagerOrReadOnly]
