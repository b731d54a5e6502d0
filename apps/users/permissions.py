"""DRF permission classes backed by :mod:`apps.users.capabilities`."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .capabilities import Capability, has_capability


class CapabilityPermission(permissions.BasePermission):
    capability = Capability.AUTHENTICATED
    message = "Access denied."

    def has_permission(self, request, view) -> bool:  # type: ignore
        return has_capability(request.user, self.capability)


class IsStaff(CapabilityPermission):
    """Admins and staff members."""

    capability = Capability.STAFF
    message = "Access denied. Staff only."


class IsAdmin(CapabilityPermission):
    """Admins only."""

    capability = Capability.ADMIN
    message = "Access denied. Admin only."
