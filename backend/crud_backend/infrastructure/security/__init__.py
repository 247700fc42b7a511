from .jwt_token_service import JWTTokenService

__all__ = [
    "JWTTokenService",
]
