"""URL routing for authentication endpoints (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import (
    LoginView,
    MeView,
    PasswordChangeView,
    RefreshView,
    RegisterView,
    UserDetailView,
    UserListView,
    UserRoleView,
)

app_name = "auth"

urlpatterns = [
    path("login", LoginView.as_view(), name="login"),
    path("register", RegisterView.as_view(), name="register"),
    path("token/refresh", RefreshView.as_view(), name="token_refresh"),
    path("me", MeView.as_view(), name="me"),
    path("password", PasswordChangeView.as_view(), name="password"),
    path("users", UserListView.as_view(), name="users"),
    path("users/<int:pk>", UserDetailView.as_view(), name="user-detail"),
    path("users/<int:pk>/role", UserRoleView.as_view(), name="user-role"),
]
