"""Abstract interface (port) for bearer-token validation."""

from abc import ABC, abstractmethod

from crud_backend.domain.entities import TokenClaims


class TokenValidator(ABC):
    """Validates access tokens presented to protected routes."""

    @abstractmethod
    def validate_token(self, token: str) -> TokenClaims:
        """Return the token's claims or raise ``AuthenticationError``."""
        ...
