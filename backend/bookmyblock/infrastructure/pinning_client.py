"""
Pinata pinning client: pins JSON documents and reads content back through
IPFS gateways.
"""

from typing import Any, Optional

import httpx

from bookmyblock.core.config import Settings
from bookmyblock.core.errors import PinningError
from bookmyblock.core.metrics import record_pinning_operation
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)


class PinningClient:
    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def gateways(self) -> list[str]:
        return [self._settings.PINATA_GATEWAY_URL, *self._settings.IPFS_FALLBACK_GATEWAYS]

    def gateway_url(self, ipfs_hash: str, gateway: Optional[str] = None) -> str:
        base = (gateway or self._settings.PINATA_GATEWAY_URL).rstrip("/")
        return f"{base}/{ipfs_hash}"

    def _auth_headers(self) -> dict[str, str]:
        """API key pair if configured, else the JWT."""
        s = self._settings
        if s.PINATA_API_KEY and s.PINATA_SECRET_API_KEY:
            return {
                "pinata_api_key": s.PINATA_API_KEY,
                "pinata_secret_api_key": s.PINATA_SECRET_API_KEY,
            }
        if s.PINATA_JWT:
            return {"Authorization": f"Bearer {s.PINATA_JWT}"}
        raise PinningError("Pinata credentials not configured")

    async def pin_json(self, content: Any, name: str, keyvalues: Optional[dict[str, str]] = None) -> str:
        """Pin a JSON document and return its content hash."""
        payload = {
            "pinataContent": content,
            "pinataMetadata": {"name": name, "keyvalues": keyvalues or {}},
            "pinataOptions": {"cidVersion": 1},
        }

        try:
            response = await self._client.post(
                f"{self._settings.PINATA_API_URL.rstrip('/')}/pinning/pinJSONToIPFS",
                json=payload,
                headers=self._auth_headers(),
                timeout=self._settings.PINATA_UPLOAD_TIMEOUT,
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            record_pinning_operation("pin", success=False)
            code = e.response.status_code
            logger.error("pin_json_failed", name=name, status_code=code)
            if code in (401, 403):
                raise PinningError("Pinata authentication failed") from e
            if code == 429:
                raise PinningError("Pinata rate limit exceeded") from e
            raise PinningError(f"Pinata API error ({code})") from e
        except httpx.HTTPError as e:
            record_pinning_operation("pin", success=False)
            logger.error("pin_json_failed", name=name, error=str(e))
            raise PinningError("Failed to upload JSON to IPFS") from e
        except ValueError as e:
            record_pinning_operation("pin", success=False)
            logger.error("pin_json_failed", name=name, error="response is not JSON")
            raise PinningError("Pinata returned an unreadable response") from e

        ipfs_hash = body.get("IpfsHash") if isinstance(body, dict) else None
        if not ipfs_hash:
            record_pinning_operation("pin", success=False)
            raise PinningError("Pinata response did not include a content hash")

        record_pinning_operation("pin", success=True)
        logger.info("json_pinned", name=name, ipfs_hash=ipfs_hash)
        return ipfs_hash

    async def fetch_bytes(self, ipfs_hash: str, gateway: Optional[str] = None) -> bytes:
        url = self.gateway_url(ipfs_hash, gateway)
        try:
            response = await self._client.get(url, timeout=self._settings.IPFS_GATEWAY_TIMEOUT)
            response.raise_for_status()
        except httpx.HTTPError as e:
            record_pinning_operation("fetch", success=False)
            raise PinningError(f"Gateway fetch failed: {url}") from e
        record_pinning_operation("fetch", success=True)
        return response.content

    async def fetch_json(self, ipfs_hash: str) -> Any:
        url = self.gateway_url(ipfs_hash)
        try:
            response = await self._client.get(url, timeout=self._settings.IPFS_GATEWAY_TIMEOUT)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            record_pinning_operation("fetch", success=False)
            raise PinningError(f"Gateway fetch failed: {url}") from e
        record_pinning_operation("fetch", success=True)
        return data
