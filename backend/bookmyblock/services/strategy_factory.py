"""
Token verification strategy factory.
Configures which identity check the auth layer uses.
"""

from bookmyblock.services.interfaces.token_verifier import TokenVerifier
from bookmyblock.services.interfaces.mock_verifier import MockTokenVerifier
from bookmyblock.services.jwt_verifier import JWTTokenVerifier
from bookmyblock.core.config import Settings, get_settings


def get_token_verifier(settings: Settings = None) -> TokenVerifier:
    """
    Get configured token verifier.

    Strategy selection via AUTH_STRATEGY:
    - mock (default): MockTokenVerifier, fixed development identity
    - jwt: JWTTokenVerifier with SECRET_KEY / ALGORITHM
    """
    settings = settings or get_settings()

    if settings.AUTH_STRATEGY == 'jwt':
        return JWTTokenVerifier(settings.SECRET_KEY, settings.ALGORITHM)
    else:
        return MockTokenVerifier()
