"""Serializers for the contact form and inbox."""

from __future__ import annotations

import re

from rest_framework import serializers  # type: ignore

from .models import ContactMessage

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactSubmitSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "Name is required",
            "blank": "Name is required",
            "max_length": "Name must be less than 255 characters",
        },
    )
    email = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "max_length": "Email must be less than 255 characters",
        },
    )
    phone = serializers.CharField(
        max_length=50,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"max_length": "Phone must be less than 50 characters"},
    )
    subject = serializers.CharField(
        max_length=255,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"max_length": "Subject must be less than 255 characters"},
    )
    message = serializers.CharField(
        max_length=5000,
        error_messages={
            "required": "Message is required",
            "blank": "Message is required",
            "max_length": "Message must be less than 5000 characters",
        },
    )

    def validate_email(self, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise serializers.ValidationError("Please provide a valid email address")
        return value.lower()


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ["id", "name", "email", "phone", "subject", "message", "is_read", "created_at"]
        read_only_fields = fields


class ContactListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
    unreadOnly = serializers.BooleanField(required=False, default=False)
