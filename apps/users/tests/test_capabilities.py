"""Role to capability mapping."""

from __future__ import annotations

from django.contrib.auth.models import AnonymousUser
from django.test import SimpleTestCase

from apps.users.capabilities import Capability, has_capability
from apps.users.models import User


class CapabilityTests(SimpleTestCase):
    def test_admin_has_every_capability(self) -> None:
        admin = User(email="a@panlogistics.ca", role=User.Role.ADMIN)
        for capability in Capability:
            self.assertTrue(has_capability(admin, capability))

    def test_staff_cannot_administer(self) -> None:
        staff = User(email="s@panlogistics.ca", role=User.Role.STAFF)
        self.assertTrue(has_capability(staff, Capability.AUTHENTICATED))
        self.assertTrue(has_capability(staff, Capability.STAFF))
        self.assertFalse(has_capability(staff, Capability.ADMIN))

    def test_anonymous_has_nothing(self) -> None:
        anonymous = AnonymousUser()
        for capability in Capability:
            self.assertFalse(has_capability(anonymous, capability))
