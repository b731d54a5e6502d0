"""API views for the contact form and the staff inbox."""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.users.permissions import IsStaff
from shared.api.responses import envelope

from . import services
from .serializers import ContactListQuerySerializer, ContactMessageSerializer, ContactSubmitSerializer


class ContactSubmitView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = ContactSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        row = services.submit_message(serializer.validated_data)
        return envelope(
            {"message_id": row.pk},
            message="Message sent successfully. We will get back to you soon.",
            status=status.HTTP_201_CREATED,
        )


class ContactMessageListView(APIView):
    permission_classes = [IsStaff]

    def get(self, request):  # type: ignore
        query = ContactListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = services.list_messages(
            page=query.validated_data["page"],
            limit=query.validated_data["limit"],
            unread_only=query.validated_data["unreadOnly"],
        )
        return envelope(
            ContactMessageSerializer(page.items, many=True).data,
            pagination=page.pagination(),
        )


class UnreadCountView(APIView):
    permission_classes = [IsStaff]

    def get(self, request):  # type: ignore
        return envelope({"count": services.unread_count()})


class ContactMessageReadView(APIView):
    permission_classes = [IsStaff]

    def put(self, request, pk: int):  # type: ignore
        services.mark_as_read(pk)
        return envelope(message="Message marked as read")


class ContactMessageDetailView(APIView):
    permission_classes = [IsStaff]

    def delete(self, request, pk: int):  # type: ignore
        services.delete_message(pk)
        return envelope(message="Message deleted successfully")
