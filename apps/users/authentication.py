"""Bearer JWT authentication.

Wraps SimpleJWT's ``JWTAuthentication`` so the three token failures are
told apart: a forged or garbled token, an expired one, and a valid token
whose user has since been deleted. The user row is loaded on every
request, so role changes and deletions apply on the next call.
"""

from __future__ import annotations

import logging

import jwt  # type: ignore
from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore
from rest_framework_simplejwt.exceptions import AuthenticationFailed as JWTAuthenticationFailed  # type: ignore
from rest_framework_simplejwt.exceptions import InvalidToken as JWTInvalidToken  # type: ignore
from rest_framework_simplejwt.settings import api_settings  # type: ignore

from shared.api.errors import InvalidToken, TokenExpired

logger = logging.getLogger(__name__)


def token_has_expired(raw_token: bytes | str) -> bool:
    """True when ``raw_token`` carries a valid signature but is past its ``exp``."""
    try:
        jwt.decode(
            raw_token,
            api_settings.VERIFYING_KEY or api_settings.SIGNING_KEY,
            algorithms=[api_settings.ALGORITHM],
            audience=api_settings.AUDIENCE,
            issuer=api_settings.ISSUER,
            leeway=api_settings.LEEWAY,
        )
    except jwt.ExpiredSignatureError:
        return True
    except jwt.InvalidTokenError:
        return False
    return False


class BearerJWTAuthentication(JWTAuthentication):
    """``Authorization: Bearer <token>`` authentication."""

    def get_validated_token(self, raw_token):  # type: ignore
        try:
            return super().get_validated_token(raw_token)
        except JWTInvalidToken:
            if token_has_expired(raw_token):
                raise TokenExpired()
            logger.info("Rejected bearer token with invalid signature or payload")
            raise InvalidToken()

    def get_user(self, validated_token):  # type: ignore
        try:
            return super().get_user(validated_token)
        except JWTInvalidToken:
            raise InvalidToken()
        except JWTAuthenticationFailed as exc:
            if getattr(exc.detail, "code", None) == "user_inactive":
                raise InvalidToken("Account is disabled.")
            raise InvalidToken("Invalid token. User not found.")
