"""
Core views: authentication, user management and store settings.
"""

import logging

from django.contrib.auth import get_user_model

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView

from .models import StoreSettings
from .permissions import IsStoreManagerOrReadOnly, IsStoreOwner
from .serializers import (
    CustomTokenObtainPairSerializer,
    ProfileSerializer,
    StoreSettingsSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    API endpoint for JWT login. The response carries the user's role.
    """

    serializer_class = CustomTokenObtainPairSerializer


class UserRegistrationView(generics.CreateAPIView):
    """
    API endpoint for user registration.

    Registered users start with the staff role; an owner or manager
    promotes them from the users list.
    """

    queryset = User.objects.all()
    permission_classes = [permissions.AllowAny]
    serializer_class = UserRegistrationSerializer


class UserProfileView(generics.RetrieveUpdateAPIView):
    """
    API endpoint for viewing and updating the current user's profile.
    """

    serializer_class = ProfileSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user


class UserListView(generics.ListAPIView):
    """
    API endpoint for listing all user profiles, newest first.
    """

    serializer_class = UserSerializer
    permission_classes = [IsStoreOwner]

    def get_queryset(self):
        queryset = User.objects.all().order_by("-created_at")

        role = self.request.query_params.get("role")
        if role:
            queryset = queryset.filter(role=role)

        return queryset


class UserDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for viewing, editing and deleting a user profile.
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [IsStoreOwner]

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()

        if user.pk == request.user.pk:
            return Response(
                {"detail": "You cannot delete your own account."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(f"User {user.username} deleted by {request.user.username}")
        user.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


class StoreSettingsView(generics.RetrieveUpdateAPIView):
    """
    API endpoint for the store settings.

    Any authenticated user can read the settings; owners and managers can
    change them.
    """

    serializer_class = StoreSettingsSerializer
    permission_classes = [IsStoreManagerOrReadOnly]

    def get_object(self):
        return StoreSettings.load()

    def perform_update(self, serializer):
        serializer.save()
        logger.info(f"Store settings updated by {self.request.user.username}")
