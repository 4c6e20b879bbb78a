import hashlib
import hmac
import json

import pytest

from api.connectors.whatsapp.signature import verify_meta_signature
from api.connectors.whatsapp.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)


def _sign(payload: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def test_parse_webhook_request_ok() -> None:
    secret = "secret"
    body = json.dumps({"entry": []}).encode("utf-8")
    headers = {"x-hub-signature-256": _sign(body, secret)}

    payload, result = parse_webhook_request(body, headers, secret)

    assert payload == {"entry": []}
    assert result.valid is True
    assert result.skipped is False


def test_parse_webhook_request_without_secret_skips_signature() -> None:
    payload, result = parse_webhook_request(b'{"object": "x"}', {}, None)

    assert payload == {"object": "x"}
    assert result.valid is True
    assert result.skipped is True


def test_parse_webhook_request_keeps_non_object_json() -> None:
    payload, _ = parse_webhook_request(b"[1, 2]", {}, None)
    assert payload == [1, 2]


def test_parse_webhook_request_invalid_signature() -> None:
    secret = "secret"
    body = json.dumps({"entry": []}).encode("utf-8")
    headers = {"x-hub-signature-256": "sha256=deadbeef"}

    with pytest.raises(InvalidSignatureError, match="signature"):
        parse_webhook_request(body, headers, secret)


def test_parse_webhook_request_invalid_json() -> None:
    secret = "secret"
    body = b"{invalid}"
    headers = {"x-hub-signature-256": _sign(body, secret)}

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(body, headers, secret)


def test_verify_meta_signature_header_is_case_insensitive() -> None:
    body = b"{}"
    result = verify_meta_signature(body, {"X-Hub-Signature-256": _sign(body, "s")}, "s")
    assert result.valid is True


def test_verify_meta_signature_missing_header() -> None:
    result = verify_meta_signature(b"{}", {}, "s")
    assert result.valid is False
    assert result.error == "missing_signature"


def test_verify_meta_signature_malformed_header() -> None:
    result = verify_meta_signature(b"{}", {"x-hub-signature-256": "md5=abc"}, "s")
    assert result.valid is False
    assert result.error == "malformed_signature"
