from typing import Optional

from formsmith.models.services.base import AuthService, AuthError
from .types import Identity

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Credential from an Authorization header, None when absent, not Bearer, or empty."""
    if not isinstance(authorization, str) or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):]
    return token or None


class IdentityVerifier:
    """Resolves the request's owner. The verified id is the only source of form ownership."""

    def __init__(self, auth: AuthService):
        self.auth = auth

    def verify(self, credential: str) -> Identity:
        identity = self.auth.verify_identity(credential)
        if identity is None or not identity.id:
            raise AuthError("No user returned for credential")
        return identity
