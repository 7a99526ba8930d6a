"""Tests for InspectService."""

import pytest

from tests.conftest import make_signed_payload
from txnguard.services.inspect import AssetPolicy, InspectService


@pytest.fixture
def svc() -> InspectService:
    return InspectService()


class TestPublicKey:
    def test_ok(self, svc: InspectService, account: str) -> None:
        result = svc.public_key(account)
        assert result.ok
        assert result.op == "check_public_key"
        assert result.data["key_hex"] == "42" * 32

    def test_undefined(self, svc: InspectService) -> None:
        result = svc.public_key("")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNDEFINED"

    def test_format(self, svc: InspectService) -> None:
        result = svc.public_key("GBAD")
        assert result.error is not None
        assert result.error.code == "FORMAT"
        assert result.error.detail == {"input": "GBAD"}


class TestSignerKey:
    def test_hash_x(self, svc: InspectService, hash_x: str) -> None:
        result = svc.signer_key(hash_x)
        assert result.ok
        assert result.data["type"] == "hash_x"
        assert "payload_hex" not in result.data

    def test_signed_payload(self, svc: InspectService) -> None:
        result = svc.signer_key(make_signed_payload(1, b"\xab\xcd"))
        assert result.data["type"] == "ed25519_signed_payload"
        assert result.data["payload_hex"] == "abcd"

    def test_invalid(self, svc: InspectService) -> None:
        result = svc.signer_key("nope")
        assert result.error is not None
        assert result.error.code == "FORMAT"


class TestAmount:
    def test_decimal(self, svc: InspectService) -> None:
        result = svc.amount("10.1234567")
        assert result.ok
        assert result.data == {"input": "10.1234567", "scaled": 101234567, "amount": "10.1234567"}

    def test_scaled_int(self, svc: InspectService) -> None:
        result = svc.amount(5)
        assert result.data["amount"] == "0.0000005"

    def test_negative(self, svc: InspectService) -> None:
        result = svc.amount("-1")
        assert result.error is not None
        assert result.error.code == "RANGE"

    def test_precision(self, svc: InspectService) -> None:
        result = svc.amount("10.12345678")
        assert result.error is not None
        assert result.error.code == "PARSE"

    def test_very_long_digit_string(self, svc: InspectService) -> None:
        result = svc.amount("1" * 5000)
        assert result.error is not None
        assert result.error.code == "PARSE"


class TestAsset:
    def test_native_general(self, svc: InspectService) -> None:
        result = svc.asset("native")
        assert result.ok
        assert result.data["type"] == "native"
        assert result.data["canonical"] == "native"

    def test_native_code_policy(self, svc: InspectService) -> None:
        result = svc.asset("native", policy=AssetPolicy.CODE)
        assert result.error is not None
        assert result.error.code == "FORMAT"
        assert "native" in result.error.message

    def test_credit_trustline(self, svc: InspectService, issuer: str) -> None:
        result = svc.asset(f"EURT:{issuer}", policy=AssetPolicy.TRUSTLINE)
        assert result.ok
        assert result.data["code"] == "EURT"
        assert result.data["issuer"] == issuer
        assert result.data["policy"] == "trustline"

    def test_parse_failure(self, svc: InspectService) -> None:
        result = svc.asset("USD:BAD:EXTRA")
        assert result.error is not None
        assert result.error.code == "PARSE"
