"""
JWT verification strategy using PyJWT.
Implements TokenVerifier for HMAC-signed tokens issued with the app secret.
"""

import jwt

from bookmyblock.services.interfaces.token_verifier import AuthenticationError, Identity, TokenVerifier


class JWTTokenVerifier(TokenVerifier):
    """Tokens must carry a `sub` claim; `exp` is enforced when present."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    async def verify(self, token: str) -> Identity:
        if not token:
            raise AuthenticationError("No authorization token provided")

        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired") from e
        except jwt.PyJWTError as e:
            raise AuthenticationError("Invalid token") from e

        subject = claims.get("sub")
        if not subject:
            raise AuthenticationError("Token has no subject")
        return Identity(subject=str(subject), claims=claims)
