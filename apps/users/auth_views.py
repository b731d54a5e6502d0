"""Views for authentication and user management.

Login is public; registration, the user list, role changes and deletion
are admin-only; profile and password change need any valid token.
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from django.contrib.auth.models import update_last_login  # type: ignore
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.settings import api_settings  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from shared.api.errors import NotFound
from shared.api.responses import envelope, failure
from shared.infrastructure.gateway import TableGateway

from .permissions import IsAdmin
from .serializers import (
    LoginSerializer,
    PasswordChangeSerializer,
    RegisterSerializer,
    RoleUpdateSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()
users = TableGateway(User)


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"token": str(refresh.access_token), "refresh": str(refresh)}


class LoginView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]
        user = users.first(email=email)
        if user is None or not user.is_active or not user.check_password(serializer.validated_data["password"]):
            logger.info(f"Failed login attempt for {email}")
            return failure("Invalid email or password", status=status.HTTP_401_UNAUTHORIZED)

        if api_settings.UPDATE_LAST_LOGIN:
            update_last_login(None, user)
        data = {**_tokens_for_user(user), "user": UserSerializer(user).data}
        logger.info(f"User {user.pk} logged in")
        return envelope(data, message="Login successful")


class RegisterView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Admin {request.user.pk} registered user {user.pk} with role {user.role}")
        return envelope(
            {"user": UserSerializer(user).data},
            message="User registered successfully",
            status=status.HTTP_201_CREATED,
        )


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        return envelope({"user": UserSerializer(request.user).data})


class PasswordChangeView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request):  # type: ignore
        serializer = PasswordChangeSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return envelope(message="Password updated successfully")


class UserListView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):  # type: ignore
        rows = users.select(order_by=["-created_at"])
        return envelope({"users": UserSerializer(rows, many=True).data})


class UserDetailView(APIView):
    permission_classes = [IsAdmin]

    def delete(self, request, pk: int):  # type: ignore
        if not users.delete(pk):
            raise NotFound("User not found")
        logger.info(f"Admin {request.user.pk} deleted user {pk}")
        return envelope(message="User deleted successfully")


class UserRoleView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request, pk: int):  # type: ignore
        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = users.first(pk=pk)
        if user is None:
            raise NotFound("User not found")
        user.change_role(serializer.validated_data["role"])
        logger.info(f"Admin {request.user.pk} changed role of user {pk} to {user.role}")
        return envelope({"user": UserSerializer(user).data}, message="Role updated successfully")


class RefreshView(TokenRefreshView):
    """Exchange a refresh token for a new access token."""

    def post(self, request, *args, **kwargs):  # type: ignore
        response = super().post(request, *args, **kwargs)
        data = {"token": response.data["access"]}
        if "refresh" in response.data:
            data["refresh"] = response.data["refresh"]
        return envelope(data)
