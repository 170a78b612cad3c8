"""
Session endpoints for the user, owner and admin dashboards.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from bookmyblock.api.deps import get_auth_service
from bookmyblock.core.security import get_current_identity, get_dashboard
from bookmyblock.schemas.auth import SessionResponse
from bookmyblock.schemas.common import ApiResponse
from bookmyblock.services.auth_service import AuthService
from bookmyblock.services.interfaces.token_verifier import Identity

router = APIRouter(prefix="/auth", tags=["Authentication"])


async def _session(auth: AuthService, identity: Identity, dashboard: str) -> SessionResponse:
    session = await auth.get_session(identity.subject, dashboard)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


@router.post("/session", response_model=ApiResponse[SessionResponse])
async def create_session_endpoint(
    identity: Identity = Depends(get_current_identity),
    dashboard: str = Depends(get_dashboard),
    auth: AuthService = Depends(get_auth_service),
):
    """Verify the bearer token and open (or refresh) a session on the chosen dashboard."""
    session = await _session(auth, identity, dashboard)
    return ApiResponse(message="Session established", data=session)


@router.get("/me", response_model=ApiResponse[SessionResponse])
async def current_session_endpoint(
    identity: Identity = Depends(get_current_identity),
    dashboard: str = Depends(get_dashboard),
    auth: AuthService = Depends(get_auth_service),
):
    return ApiResponse(data=await _session(auth, identity, dashboard))
