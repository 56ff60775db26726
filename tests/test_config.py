"""Endpoints and audiences are fixed, whatever the environment says."""

import importlib

from nagios_checks import config


def test_endpoints_match_public_cloud():
    assert config.LOGIN_URL == "https://login.microsoftonline.com"
    assert config.MANAGEMENT_URL == "https://management.azure.com"
    assert config.GRAPH_URL == "https://graph.microsoft.com/v1.0"
    assert config.MANAGEMENT_RESOURCE == "https://management.azure.com/"
    assert config.PING_DEADLINE == 2


def test_environment_does_not_change_endpoints(monkeypatch):
    monkeypatch.setenv("AZURE_MANAGEMENT_URL", "https://elsewhere.example")
    monkeypatch.setenv("HTTP_TIMEOUT", "abc")
    monkeypatch.setenv("PING_DEADLINE", "0.5")

    reloaded = importlib.reload(config)

    assert reloaded.MANAGEMENT_URL == "https://management.azure.com"
    assert reloaded.MANAGEMENT_RESOURCE == "https://management.azure.com/"
    assert reloaded.PING_DEADLINE == 2
