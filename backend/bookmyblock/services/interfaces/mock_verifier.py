"""
Mock verification strategy - no signature check.
Every dashboard logs in as the same fixed development user.
"""

from bookmyblock.services.interfaces.token_verifier import AuthenticationError, Identity, TokenVerifier

MOCK_IDENTITY = Identity(
    subject="mock-user-id",
    claims={
        "email": "user@example.com",
        "phone": None,
        "walletAddress": "0x1234567890123456789012345678901234567890",
    },
)


class MockTokenVerifier(TokenVerifier):
    """
    Accept any non-empty token.

    Use when:
    - Running locally without an identity provider
    - Tests that are not about authentication
    """

    async def verify(self, token: str) -> Identity:
        if not token:
            raise AuthenticationError("No authorization token provided")
        return MOCK_IDENTITY
