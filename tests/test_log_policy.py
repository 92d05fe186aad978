from typing import Any

import pytest

from sumsub_bridge.api.webhooks import log_event_handler
from sumsub_bridge.services.errors import MissingCredential
from sumsub_bridge.settings import Settings

EVENT = {
    "type": "applicantReviewed",
    "applicantId": "abc",
    "info": {"firstName": "Maria", "dob": "1990-01-01"},
}


def _webhook_events(logs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [e for e in logs if e["event"] == "webhook_event"]


def test_redacted_policy_hides_personal_data(captured_logs: list[dict[str, Any]]) -> None:
    log_event_handler("redacted")(EVENT)
    [entry] = _webhook_events(captured_logs)
    assert entry["payload"]["keys"] == ["applicantId", "info", "type"]
    assert len(entry["payload"]["sha256"]) == 64
    assert "Maria" not in repr(entry)


def test_none_policy_logs_only_event_type(captured_logs: list[dict[str, Any]]) -> None:
    log_event_handler("none")(EVENT)
    [entry] = _webhook_events(captured_logs)
    assert entry["event_type"] == "applicantReviewed"
    assert "payload" not in entry
    assert "Maria" not in repr(entry)


def test_full_policy_logs_whole_payload(captured_logs: list[dict[str, Any]]) -> None:
    log_event_handler("full")(EVENT)
    [entry] = _webhook_events(captured_logs)
    assert entry["payload"] == EVENT


def test_credentials_log_presence_not_values(
    settings: Settings, captured_logs: list[dict[str, Any]]
) -> None:
    settings.outbound_credentials()
    settings.webhook_credentials()

    loaded = [e for e in captured_logs if e["event"] == "credentials_loaded"]
    assert {e["kind"] for e in loaded} == {"outbound", "webhook"}
    text = repr(captured_logs)
    for value in ("app-token", "outbound-secret", "'k1'"):
        assert value not in text


def test_missing_credential_logs_variable_name_only(
    clean_env: pytest.MonkeyPatch, captured_logs: list[dict[str, Any]]
) -> None:
    clean_env.setenv("APP_TOKEN", "app-token")
    with pytest.raises(MissingCredential):
        Settings(_env_file=None).outbound_credentials()

    [entry] = [e for e in captured_logs if e["event"] == "credential_missing"]
    assert entry["variable"] == "SECRET_KEY"
    assert "app-token" not in repr(captured_logs)
