"""User domain models for the Pan Logistics back office.

Only company personnel have accounts: administrators manage users and can
delete bookings, staff members process bookings and contact messages.
Customers never log in; they book and track shipments anonymously.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore


class CustomUserManager(BaseUserManager):
    """User manager that uses the lower-cased email as the login."""

    use_in_migrations = True

    @classmethod
    def normalize_email(cls, email: str) -> str:  # type: ignore[override]
        return (email or "").strip().lower()

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.Role.STAFF)
        extra_fields.setdefault("is_staff", extra_fields["role"] == CustomUser.Role.ADMIN)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.Role.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Back-office account with one of two roles."""

    class Role(models.TextChoices):
        ADMIN = "admin", "Admin"
        STAFF = "staff", "Staff"

    username = None  # type: ignore[assignment]
    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.STAFF,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(role__in=["admin", "staff"]),
                name="users_role_valid",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    def save(self, *args, **kwargs):  # type: ignore
        self.email = CustomUser.objects.normalize_email(self.email)
        super().save(*args, **kwargs)

    def change_role(self, role: str) -> None:
        self.role = role
        # Django admin access follows the admin role
        self.is_staff = role == self.Role.ADMIN or self.is_superuser
        self.save(update_fields=["role", "is_staff", "updated_at"])


# Backwards compatibility alias used in tests
User = CustomUser
