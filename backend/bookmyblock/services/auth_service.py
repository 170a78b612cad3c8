"""
Authentication service: token verification plus per-dashboard session records.

Each dashboard (user, owner, admin) keeps its sessions in its own key-value
namespace, so logging in to one dashboard never affects another.
"""

import json
from datetime import datetime
from typing import Optional

from fastapi import HTTPException, status

from bookmyblock.infrastructure.kv_store import KeyValueStore, NamespacedStore
from bookmyblock.models.event import utcnow
from bookmyblock.schemas.auth import SessionResponse
from bookmyblock.services.interfaces.token_verifier import AuthenticationError, Identity, TokenVerifier
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

DASHBOARDS = ("user", "owner", "admin")
SESSION_TTL_SECONDS = 60 * 60 * 24


class AuthService:
    def __init__(self, verifier: TokenVerifier, store: KeyValueStore) -> None:
        self._verifier = verifier
        self._sessions = {name: NamespacedStore(store, f"{name}:session") for name in DASHBOARDS}

    def sessions(self, dashboard: str) -> NamespacedStore:
        try:
            return self._sessions[dashboard]
        except KeyError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown dashboard '{dashboard}'",
            )

    async def authenticate(self, token: Optional[str], dashboard: str = "user") -> Identity:
        """Verify the token and record the session for the dashboard. Raises 401 if rejected."""
        sessions = self.sessions(dashboard)

        try:
            identity = await self._verifier.verify(token or "")
        except AuthenticationError as e:
            logger.warning("authentication_failed", dashboard=dashboard, reason=str(e))
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(e),
                headers={"WWW-Authenticate": "Bearer"},
            )

        record = {"claims": identity.claims, "lastSeen": utcnow().isoformat()}
        await sessions.set(identity.subject, json.dumps(record, default=str), ttl=SESSION_TTL_SECONDS)

        logger.info("session_recorded", dashboard=dashboard, subject=identity.subject)
        return identity

    async def get_session(self, subject: str, dashboard: str = "user") -> Optional[SessionResponse]:
        raw = await self.sessions(dashboard).get(subject)
        if raw is None:
            return None
        record = json.loads(raw)
        return SessionResponse(
            subject=subject,
            dashboard=dashboard,
            claims=record.get("claims", {}),
            last_seen=datetime.fromisoformat(record["lastSeen"]) if record.get("lastSeen") else None,
        )
