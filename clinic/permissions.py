"""
Permission classes for the public site and the admin portal.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsAdminSession(BasePermission):
    """Allow access only to requests carrying a valid admin session token."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated)


class ReadOnly(BasePermission):
    """Allow read‑only access (GET, HEAD, OPTIONS)."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return request.method in SAFE_METHODS


class CreateOnly(BasePermission):
    """Allow anonymous submissions (POST) such as booking requests."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return request.method == "POST"
