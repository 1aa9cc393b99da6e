"""
URL configuration for the POS and back-office API.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", include("apps.core.health")),
    path("", include("apps.core.urls")),
    path("", include("apps.menu.urls")),
    path("", include("apps.sales.urls")),
    path("", include("apps.finance.urls")),
    path("", include("apps.reporting.urls")),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
