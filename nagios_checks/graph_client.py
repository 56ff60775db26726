"""Microsoft Graph queries for application password credentials."""

import logging
from datetime import datetime

import httpx

from . import config
from ._http import bearer, send
from .exceptions import APIError
from .models import PasswordCredential, PasswordCredentialList

logger = logging.getLogger(__name__)


class GraphClient:
    """Read-only Graph v1.0 client bound to one bearer token."""

    def __init__(self, token: str, http_client: httpx.AsyncClient):
        self._token = token
        self._client = http_client

    async def list_password_credentials(self, app_object_id: str) -> list[PasswordCredential]:
        result = await send(
            self._client, "GET",
            f"{config.GRAPH_URL}/applications/{app_object_id}/passwordCredentials",
            PasswordCredentialList, "the token info from Graph",
            headers=bearer(self._token),
        )
        if not result.value:
            raise APIError(
                "Expiry date is null, cannot continue. Response from Graph:",
                detail=result.error_message,
            )
        return result.value

    async def get_soonest_expiry(self, app_object_id: str) -> datetime:
        """Return the earliest ``endDateTime`` across the app's secrets."""
        credentials = await self.list_password_credentials(app_object_id)
        return soonest_expiry(credentials)


def soonest_expiry(credentials: list[PasswordCredential]) -> datetime:
    expiries = [c.expires_at for c in credentials if c.expires_at is not None]
    if not expiries:
        raise APIError("Expiry date is null, cannot continue. Response from Graph:")
    soonest = min(expiries)
    logger.info("%d password credentials, soonest expires %s", len(expiries), soonest)
    return soonest
