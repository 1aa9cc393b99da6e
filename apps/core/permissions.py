"""
Permission classes for role-based access control.
"""

from rest_framework import permissions


class IsStoreManager(permissions.BasePermission):
    """
    Allow access only to owners and managers.
    """

    message = "Only owners and managers can perform this action."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.can_manage_store())


class IsStoreManagerOrReadOnly(permissions.BasePermission):
    """
    Any authenticated user can read; only owners and managers can write.
    """

    message = "Only owners and managers can modify this resource."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return user.can_manage_store()


class IsStoreOwner(permissions.BasePermission):
    """
    Allow access only to owners.
    """

    message = "Only owners can manage users."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_owner())
