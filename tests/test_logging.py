from sumsub_bridge.infrastructure.logging import MASK, mask_secrets


def test_mask_secrets_hides_secret_fields() -> None:
    event = {"event": "x", "secret_key": "s", "X-App-Access-Sig": "abc", "applicant_id": "a1"}
    out = mask_secrets(None, "info", event)
    assert out["secret_key"] == MASK
    assert out["X-App-Access-Sig"] == MASK
    assert out["applicant_id"] == "a1"
    assert out["event"] == "x"
