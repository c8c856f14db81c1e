"""
Custom permissions for the car rental application.
"""
from rest_framework import permissions


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Permission to allow read access to authenticated users, but write access only to admins.
    """

    message = 'Only admins can manage cars.'

    def has_permission(self, request, view):
        """Check if request is safe method or user is admin."""
        if request.method in permissions.SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return bool(
            request.user and
            request.user.is_authenticated and
            request.user.is_admin
        )
