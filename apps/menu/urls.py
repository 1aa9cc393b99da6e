"""
URL configuration for menu app.
"""

from django.urls import path

from . import views

app_name = "menu"

urlpatterns = [
    # Category endpoints
    path("api/menu/categories/", views.CategoryListCreateView.as_view(), name="category_list"),
    path(
        "api/menu/categories/<uuid:pk>/",
        views.CategoryDetailView.as_view(),
        name="category_detail",
    ),
    # Menu endpoints
    path("api/menu/items/", views.MenuListCreateView.as_view(), name="menu_list"),
    path("api/menu/items/grouped/", views.grouped_menus, name="menu_grouped"),
    path("api/menu/items/<uuid:pk>/", views.MenuDetailView.as_view(), name="menu_detail"),
    # Variation endpoints
    path(
        "api/menu/items/<uuid:menu_id>/variations/",
        views.MenuVariationListCreateView.as_view(),
        name="variation_list",
    ),
    path(
        "api/menu/variations/<uuid:pk>/",
        views.MenuVariationDetailView.as_view(),
        name="variation_detail",
    ),
]
