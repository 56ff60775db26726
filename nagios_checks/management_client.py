"""Azure Resource Manager queries for Logic App workflow runs."""

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from . import config
from ._http import bearer, send
from .exceptions import APIError
from .models import WorkflowRunList

logger = logging.getLogger(__name__)


def format_filter_timestamp(moment: datetime) -> str:
    """Render a UTC timestamp the way the runs ``$filter`` expects it."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def unsucceeded_runs_filter(since: datetime) -> str:
    return f"Status ne 'Succeeded' and startTime ge {format_filter_timestamp(since)}"


class ManagementClient:
    """Read-only Resource Manager client bound to one bearer token."""

    def __init__(self, token: str, http_client: httpx.AsyncClient):
        self._token = token
        self._client = http_client

    def provider_url(self, subscription_id: str, resource_group: str, provider: str) -> str:
        return (
            f"{config.MANAGEMENT_URL}/subscriptions/{subscription_id}"
            f"/resourceGroups/{resource_group}/providers/{provider}"
        )

    async def list_unsucceeded_runs(
        self,
        subscription_id: str,
        resource_group: str,
        provider: str,
        since: datetime,
    ) -> list[dict[str, Any]]:
        """Return runs started at or after ``since`` whose status is not Succeeded.

        The filtering happens server side. Raises APIError when the response
        carries no ``value`` field.
        """
        params = {
            "api-version": config.RUNS_API_VERSION,
            "$filter": unsucceeded_runs_filter(since),
        }
        runs = await send(
            self._client, "GET",
            self.provider_url(subscription_id, resource_group, provider),
            WorkflowRunList, "the API URI",
            params=params, headers=bearer(self._token),
        )
        if runs.value is None:
            raise APIError(
                "Value was null, cannot continue. Response from Azure:",
                detail=runs.error_message,
            )
        logger.info("%d unsucceeded runs of %s since %s", len(runs.value), provider, since)
        return runs.value
