"""
URL configuration for core app.
"""

from django.urls import path

from rest_framework_simplejwt.views import TokenRefreshView

from . import views

app_name = "core"

urlpatterns = [
    # Authentication
    path("api/auth/register/", views.UserRegistrationView.as_view(), name="register"),
    path("api/auth/token/", views.CustomTokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/auth/me/", views.UserProfileView.as_view(), name="user_profile"),
    # User management
    path("api/users/", views.UserListView.as_view(), name="user_list"),
    path("api/users/<uuid:pk>/", views.UserDetailView.as_view(), name="user_detail"),
    # Store settings
    path("api/settings/store/", views.StoreSettingsView.as_view(), name="store_settings"),
]
