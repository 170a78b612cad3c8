"""
Token verification strategy interface.
Allows swapping the identity provider without touching the auth layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class AuthenticationError(Exception):
    """The token is missing, malformed, expired or not trusted."""


@dataclass(frozen=True)
class Identity:
    subject: str
    claims: dict[str, Any] = field(default_factory=dict)


class TokenVerifier(ABC):
    """
    Interface for bearer token verification.

    Implementations:
    - MockTokenVerifier: development stub, accepts any non-empty token
    - JWTTokenVerifier: HMAC-signed JWTs checked with the app secret
    """

    @abstractmethod
    async def verify(self, token: str) -> Identity:
        """
        Verify a bearer token.

        Returns:
            The identity the token was issued for

        Raises:
            AuthenticationError: if the token is not accepted
        """
        pass
