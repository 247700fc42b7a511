from crud_backend.infrastructure.database.base import Base

from .identity_models import (
    PermissionModel,
    RoleModel,
    RolePermissionModel,
    UserModel,
    UserRoleModel,
)
from .credential_models import (
    APIKeyModel,
    EmailVerificationTokenModel,
    OAuthProviderModel,
    PasswordResetTokenModel,
    RefreshTokenModel,
    SessionModel,
    UserTwoFactorModel,
)
from .file_models import FileModel

MODELS_BY_TABLE: dict[str, type[Base]] = {
    model.__tablename__: model
    for model in (
        UserModel,
        RoleModel,
        PermissionModel,
        RolePermissionModel,
        UserRoleModel,
        SessionModel,
        RefreshTokenModel,
        PasswordResetTokenModel,
        EmailVerificationTokenModel,
        OAuthProviderModel,
        APIKeyModel,
        UserTwoFactorModel,
        FileModel,
    )
}

__all__ = [
    "UserModel",
    "RoleModel",
    "PermissionModel",
    "RolePermissionModel",
    "UserRoleModel",
    "SessionModel",
    "RefreshTokenModel",
    "PasswordResetTokenModel",
    "EmailVerificationTokenModel",
    "OAuthProviderModel",
    "APIKeyModel",
    "UserTwoFactorModel",
    "FileModel",
    "MODELS_BY_TABLE",
]
