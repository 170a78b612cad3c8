"""
Bearer-token identity resolution for protected endpoints.
"""

from typing import Optional

from fastapi import Depends, Header

from bookmyblock.api.deps import get_auth_service
from bookmyblock.services.auth_service import AuthService
from bookmyblock.services.interfaces.token_verifier import Identity


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        return ""
    scheme, _, token = authorization.partition(" ")
    return token.strip() if scheme.lower() == "bearer" else ""


def get_dashboard(x_dashboard: Optional[str] = Header(None)) -> str:
    """Dashboard the caller acts in; `user` unless the X-Dashboard header says otherwise."""
    return (x_dashboard or "user").strip().lower()


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    dashboard: str = Depends(get_dashboard),
    auth: AuthService = Depends(get_auth_service),
) -> Identity:
    """
    Dependency that resolves the bearer token to an identity and records the
    session for the dashboard. Raises 401 if the token is missing or rejected.
    """
    return await auth.authenticate(extract_bearer_token(authorization), dashboard)
