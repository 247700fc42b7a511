"""HS256 JWT issuing and validation backed by PyJWT."""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from crud_backend.application.interfaces import TokenValidator
from crud_backend.domain.entities import TokenClaims
from crud_backend.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class JWTTokenService(TokenValidator):
    """Signs and verifies access tokens carrying ``user_id``, ``email`` and ``is_admin``.

    Only HMAC-SHA256 is accepted on validation; a token signed with any other
    algorithm (including ``none``) is rejected.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 15,
        refresh_token_expire_minutes: int = 10080,
    ):
        if not secret_key:
            raise ValueError("JWT secret key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_ttl = timedelta(minutes=access_token_expire_minutes)
        self._refresh_ttl = timedelta(minutes=refresh_token_expire_minutes)

    def create_access_token(self, user_id: int, email: str, is_admin: bool = False) -> str:
        return self._encode(user_id, email, is_admin, self._access_ttl)

    def create_refresh_token(self, user_id: int, email: str, is_admin: bool = False) -> str:
        return self._encode(user_id, email, is_admin, self._refresh_ttl)

    def refresh_token_expiration(self) -> datetime:
        return datetime.now(timezone.utc) + self._refresh_ttl

    def validate_token(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as exc:
            logger.debug("Rejected bearer token: %s", exc)
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from exc

        user_id = payload.get("user_id")
        email = payload.get("email")
        is_admin = payload.get("is_admin", False)
        # bool is an int subclass; a boolean user_id is not a valid identity
        if (
            not isinstance(user_id, int)
            or isinstance(user_id, bool)
            or user_id < 0
            or not isinstance(email, str)
            or not isinstance(is_admin, bool)
        ):
            raise AuthenticationError(INVALID_TOKEN_MESSAGE)
        return TokenClaims(user_id=user_id, email=email, is_admin=is_admin)

    def _encode(self, user_id: int, email: str, is_admin: bool, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "user_id": user_id,
            "email": email,
            "is_admin": is_admin,
            "exp": now + ttl,
            "iat": now,
            "nbf": now,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
