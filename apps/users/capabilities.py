"""Role-based capability checks.

The role set is closed (``admin``, ``staff``). Each capability names the
set of roles allowed to exercise it, so the checks can be unit-tested
without a request object and reused by permission classes, admin views
and management commands alike.
"""

from __future__ import annotations

import enum
from typing import Any

from .models import CustomUser

Role = CustomUser.Role


class Capability(enum.Enum):
    AUTHENTICATED = "authenticated"
    STAFF = "staff"
    ADMIN = "admin"


CAPABILITY_ROLES: dict[Capability, frozenset[str]] = {
    Capability.AUTHENTICATED: frozenset({Role.ADMIN, Role.STAFF}),
    Capability.STAFF: frozenset({Role.ADMIN, Role.STAFF}),
    Capability.ADMIN: frozenset({Role.ADMIN}),
}


def has_capability(user: Any, capability: Capability) -> bool:
    """True when ``user`` is an authenticated account whose role grants ``capability``."""
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    return getattr(user, "role", None) in CAPABILITY_ROLES[capability]
