from indenture.identity.exceptions import NotAuthenticatedError
from indenture.identity.provider import (
    AuthState,
    BaseIdentityProvider,
    StaticIdentityProvider,
    User,
)

__all__ = [
    "AuthState",
    "BaseIdentityProvider",
    "NotAuthenticatedError",
    "StaticIdentityProvider",
    "User",
]
