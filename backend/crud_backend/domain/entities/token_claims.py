"""Identity carried by a validated bearer token."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    email: str
    is_admin: bool = False
