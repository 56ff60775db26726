"""Shared fixtures: a respx router standing in for Entra ID, ARM and Graph."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import pytest
import respx

from nagios_checks import config

TENANT = "11111111-1111-1111-1111-111111111111"
SUBSCRIPTION = "22222222-2222-2222-2222-222222222222"
RESOURCE_GROUP = "rg-monitoring"
PROVIDER = "Microsoft.Logic/workflows/RaiseToPagerDutyV1.0/runs"
CLIENT_ID = "33333333-3333-3333-3333-333333333333"
CLIENT_SECRET = "s3cr3t~value"
GRAPH_APP_ID = "44444444-4444-4444-4444-444444444444"

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def argv(expirydays: str = "5", **overrides: str) -> list[str]:
    values = {
        "tenant": TENANT,
        "subscription": SUBSCRIPTION,
        "resourcegroup": RESOURCE_GROUP,
        "provider": PROVIDER,
        "clientid": CLIENT_ID,
        "clientsecret": CLIENT_SECRET,
        "graph_app_id": GRAPH_APP_ID,
        "expirydays": expirydays,
    }
    values.update(overrides)
    return list(values.values())


def graph_timestamp(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def credentials_body(*expiries: datetime) -> dict[str, Any]:
    return {
        "value": [
            {
                "keyId": f"key-{i}",
                "displayName": "nagios",
                "endDateTime": graph_timestamp(expiry),
            }
            for i, expiry in enumerate(expiries)
        ]
    }


class MockAzure:
    """Routes for the four calls a Logic App check makes, healthy by default."""

    def __init__(self, router: respx.MockRouter) -> None:
        login = f"{config.LOGIN_URL}/{TENANT}"
        self.management_token = router.post(f"{login}/oauth2/token").mock(
            return_value=httpx.Response(
                200, json={"token_type": "Bearer", "access_token": "arm-token"}
            )
        )
        self.runs = router.get(
            url__startswith=(
                f"{config.MANAGEMENT_URL}/subscriptions/{SUBSCRIPTION}"
                f"/resourceGroups/{RESOURCE_GROUP}/providers/{PROVIDER}"
            )
        ).mock(return_value=httpx.Response(200, json={"value": []}))
        self.graph_token = router.post(f"{login}/oauth2/v2.0/token").mock(
            return_value=httpx.Response(
                200, json={"token_type": "Bearer", "access_token": "graph-token"}
            )
        )
        self.credentials = router.get(
            f"{config.GRAPH_URL}/applications/{GRAPH_APP_ID}/passwordCredentials"
        ).mock(
            return_value=httpx.Response(
                200, json=credentials_body(NOW + timedelta(days=365))
            )
        )

    def expire_in(self, *expiries: datetime) -> None:
        self.credentials.mock(
            return_value=httpx.Response(200, json=credentials_body(*expiries))
        )


@pytest.fixture
def mock_router():
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def azure(mock_router) -> MockAzure:
    return MockAzure(mock_router)
