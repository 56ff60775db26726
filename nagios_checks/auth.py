"""Microsoft Entra ID (Azure AD) authentication via client credentials flow."""

import logging

import httpx

from . import config
from ._http import send
from .exceptions import TokenError
from .models import TokenResponse

logger = logging.getLogger(__name__)


class AzureADAuth:
    """Acquires app-only bearer tokens for Resource Manager and Graph.

    Resource Manager tokens come from the v1 endpoint (``resource=``),
    Graph tokens from the v2 endpoint (``scope=``). Tokens are not cached;
    each check asks for each token exactly once.
    """

    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        http_client: httpx.AsyncClient,
    ):
        self._tenant_id = tenant_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._client = http_client

    @property
    def authority(self) -> str:
        return f"{config.LOGIN_URL}/{self._tenant_id}"

    async def get_management_token(self) -> str:
        return await self._request_token(
            f"{self.authority}/oauth2/token",
            {"resource": config.MANAGEMENT_RESOURCE},
            source="Azure AD",
        )

    async def get_graph_token(self) -> str:
        return await self._request_token(
            f"{self.authority}/oauth2/v2.0/token",
            {"scope": config.GRAPH_SCOPE},
            source="Graph",
        )

    async def _request_token(self, url: str, audience: dict[str, str], source: str) -> str:
        data = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            **audience,
        }
        logger.info("Requesting client credentials token from %s", source)
        token = await send(
            self._client, "POST", url, TokenResponse,
            f"an auth token from {source}", data=data,
        )
        if not token.access_token:
            raise TokenError(
                f"Auth token was null, cannot continue. Response from {source}:",
                detail=token.error_description,
            )
        return token.access_token
