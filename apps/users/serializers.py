"""Serializers for authentication and back-office user management."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model, password_validation  # type: ignore
from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


def _check_password_rules(value: str, user=None) -> str:
    try:
        password_validation.validate_password(value, user=user)
    except DjangoValidationError as exc:
        raise serializers.ValidationError(list(exc.messages))
    return value


class UserSerializer(serializers.ModelSerializer):
    """Public projection of a user; the password hash never leaves the server."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "role", "created_at"]
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"invalid": "Please provide a valid email"})
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_email(self, value: str) -> str:
        return User.objects.normalize_email(value)


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(error_messages={"invalid": "Please provide a valid email"})
    password = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)
    role = serializers.ChoiceField(
        choices=User.Role.choices,
        default=User.Role.STAFF,
        error_messages={"invalid_choice": "Role must be admin or staff"},
    )

    def validate_email(self, value: str) -> str:
        email = User.objects.normalize_email(value)
        if User.objects.filter(email=email).exists():
            raise serializers.ValidationError("User with this email already exists")
        return email

    def validate_password(self, value: str) -> str:
        return _check_password_rules(value)

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class PasswordChangeSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(write_only=True, trim_whitespace=False)
    newPassword = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)

    def validate_currentPassword(self, value: str) -> str:
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Current password is incorrect")
        return value

    def validate_newPassword(self, value: str) -> str:
        return _check_password_rules(value, user=self.context["request"].user)

    def save(self, **kwargs):  # type: ignore
        user = self.context["request"].user
        user.set_password(self.validated_data["newPassword"])
        user.save(update_fields=["password", "updated_at"])
        return user


class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(
        choices=User.Role.choices,
        error_messages={"invalid_choice": "Role must be admin or staff"},
    )
