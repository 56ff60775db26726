#!/usr/bin/env python3
"""Check an Azure Logic App for failed runs and its monitoring secret's expiry.

Usage: checkAzureLogicApp <tenant> <subscription> <resourcegroup> <provider>
                          <clientid> <clientsecret> <graph_app_id> <expirydays>

Reports CRITICAL when any run in the last week did not succeed, WARNING when
the client secret expires within <expirydays> days, OK otherwise.
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime, timezone
from typing import Any

import httpx

from . import config
from ._http import create_http_client
from .auth import AzureADAuth
from .exceptions import CheckError
from .graph_client import GraphClient
from .logger import setup_logging
from .management_client import ManagementClient
from .status import CheckResult, Status
from .validation import PluginArgumentParser, guid, whole_number

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = PluginArgumentParser(
        prog="checkAzureLogicApp",
        description="Check action history on Azure objects and the expiry "
        "of the monitoring app's client secret.",
    )
    parser.add_argument(
        "tenant", type=guid("tenant"),
        help="tenant id GUID the monitoring app authenticates against "
        "(the tenant in which the app and secret were created)",
    )
    parser.add_argument(
        "subscription", type=guid("subscription"),
        help="subscription id GUID that contains the resource to check",
    )
    parser.add_argument(
        "resourcegroup",
        help="name of the resource group (text, not a GUID)",
    )
    parser.add_argument(
        "provider",
        help="provider portion of the API URI after providers/, "
        "e.g. Microsoft.Logic/workflows/RaiseToPagerDutyV1.0/runs",
    )
    parser.add_argument(
        "clientid", type=guid("clientid"),
        help="application id GUID of the monitoring app in Azure AD",
    )
    parser.add_argument(
        "clientsecret",
        help="client secret associated with the above app",
    )
    parser.add_argument(
        "graph_app_id", type=guid("graph_app_id"),
        help="object id GUID of the above app as seen by the Graph API "
        "(different to the application id)",
    )
    parser.add_argument(
        "expirydays", type=whole_number("expirydays"),
        help="warn when the client secret expires in fewer than this many days",
    )
    return parser


def days_until(expiry: datetime, now: datetime) -> int:
    """Whole days from ``now`` until ``expiry``, floored (negative once expired)."""
    return (expiry - now).days


def evaluate(
    failed_runs: list[Any], days_remaining: int, threshold: int, provider: str
) -> CheckResult:
    """Failed runs outrank an expiring secret."""
    if failed_runs:
        return CheckResult(Status.CRITICAL, f"CRITICAL - failed runs of {provider} detected")
    if days_remaining < threshold:
        return CheckResult(
            Status.WARNING,
            "WARNING - No failures detected but Azure auth token will expire "
            f"in {days_remaining} days, please renew it",
        )
    return CheckResult(
        Status.OK, f"OK - no failed runs detected since {config.RUN_LOOKBACK_TEXT}"
    )


async def check_logic_app(
    args: argparse.Namespace,
    http_client: httpx.AsyncClient | None = None,
    now: datetime | None = None,
) -> CheckResult:
    """Run the four Azure calls in order and decide the status.

    Any CheckError from a step ends the check; later calls are not made.
    """
    now = now or datetime.now(timezone.utc)
    client = http_client or create_http_client()

    try:
        auth = AzureADAuth(args.tenant, args.clientid, args.clientsecret, client)

        management = ManagementClient(await auth.get_management_token(), client)
        failed_runs = await management.list_unsucceeded_runs(
            args.subscription,
            args.resourcegroup,
            args.provider,
            since=now - config.RUN_LOOKBACK,
        )

        graph = GraphClient(await auth.get_graph_token(), client)
        expiry = await graph.get_soonest_expiry(args.graph_app_id)
    except CheckError as e:
        logger.info("Check aborted: %s", e)
        return CheckResult(e.status, f"{e.status.name} - {e}", e.detail)
    finally:
        if http_client is None:
            await client.aclose()

    days_remaining = days_until(expiry, now)
    logger.info(
        "%d failed runs, secret expires in %d days (threshold %d)",
        len(failed_runs), days_remaining, args.expirydays,
    )
    return evaluate(failed_runs, days_remaining, args.expirydays, args.provider)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        result = asyncio.run(check_logic_app(args))
    except Exception as e:
        logger.exception("Check failed with unexpected error")
        result = CheckResult(Status.UNKNOWN, f"UNKNOWN - {e}")

    print(result.render())
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
