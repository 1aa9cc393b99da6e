"""
URL configuration for sales app.
"""

from django.urls import path

from . import views

app_name = "sales"

urlpatterns = [
    # POS API Endpoints
    path("api/pos/catalog/", views.pos_catalog, name="pos_catalog"),
    path("api/pos/calculate-totals/", views.pos_calculate_totals, name="pos_calculate_totals"),
    path("api/pos/orders/", views.pos_create_order, name="pos_create_order"),
    # Order Management API
    path("api/orders/", views.OrderListView.as_view(), name="order_list"),
    path("api/orders/<uuid:pk>/", views.OrderDetailView.as_view(), name="order_detail"),
    path(
        "api/orders/items/<uuid:item_id>/status/",
        views.update_order_item_status,
        name="order_item_status",
    ),
    path(
        "api/orders/<uuid:pk>/payment-status/",
        views.update_order_payment_status,
        name="order_payment_status",
    ),
    path("api/orders/<uuid:pk>/cancel/", views.cancel_order_view, name="order_cancel"),
]
