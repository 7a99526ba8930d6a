"""InspectService: run validators and report the outcome as a ServiceResult.

Used by the ``txnguard check`` commands.  Each method validates one
user-supplied value and, on success, returns what was decoded from it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from txnguard.codec.strkey import decode_ed25519_public_key, decode_signer_key
from txnguard.domain.amount import format_amount, parse_amount
from txnguard.domain.assets import canonical_asset_string
from txnguard.domain.validators import (
    parse_asset_string,
    validate_asset,
    validate_asset_code,
    validate_change_trust_asset,
    validate_public_key,
    validate_signer_key,
)
from txnguard.errors import TxnGuardError
from txnguard.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class AssetPolicy(StrEnum):
    """Which asset validator an asset check runs."""

    GENERAL = "general"
    CODE = "code"
    TRUSTLINE = "trustline"


_POLICY_VALIDATORS: dict[AssetPolicy, Callable[[Any], object]] = {
    AssetPolicy.GENERAL: validate_asset,
    AssetPolicy.CODE: validate_asset_code,
    AssetPolicy.TRUSTLINE: validate_change_trust_asset,
}


def _failure(op: str, value: str, exc: TxnGuardError) -> ServiceResult:
    logger.debug("%s rejected %r: %s", op, value, exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail={"input": value}),
    )


class InspectService:
    """Validate single values and describe what they decode to."""

    def public_key(self, value: str) -> ServiceResult:
        op = "check_public_key"
        try:
            validate_public_key(value)
        except TxnGuardError as exc:
            return _failure(op, value, exc)
        logger.debug("%s accepted %s", op, value)
        raw = decode_ed25519_public_key(value)
        return ServiceResult(ok=True, op=op, data={"public_key": value, "key_hex": raw.hex()})

    def signer_key(self, value: str) -> ServiceResult:
        op = "check_signer_key"
        try:
            validate_signer_key(value)
        except TxnGuardError as exc:
            return _failure(op, value, exc)
        logger.debug("%s accepted %s", op, value)
        signer = decode_signer_key(value)
        data: dict[str, Any] = {
            "signer_key": value,
            "type": str(signer.type),
            "key_hex": signer.key.hex(),
        }
        if signer.payload:
            data["payload_hex"] = signer.payload.hex()
        return ServiceResult(ok=True, op=op, data=data)

    def amount(self, value: int | str) -> ServiceResult:
        op = "check_amount"
        try:
            scaled = parse_amount(value)
        except TxnGuardError as exc:
            return _failure(op, str(value), exc)
        logger.debug("%s accepted %s as %d", op, value, scaled)
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": str(value), "scaled": scaled, "amount": format_amount(scaled)},
        )

    def asset(self, canonical: str, *, policy: AssetPolicy = AssetPolicy.GENERAL) -> ServiceResult:
        """Parse *canonical* and run the asset validator selected by *policy*."""
        op = "check_asset"
        try:
            asset = parse_asset_string(canonical)
            _POLICY_VALIDATORS[policy](asset)
        except TxnGuardError as exc:
            return _failure(op, canonical, exc)
        logger.debug("%s accepted %s under %s policy", op, canonical, policy)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "canonical": canonical_asset_string(asset),
                "type": str(asset.get_type()),
                "code": asset.get_code(),
                "issuer": asset.get_issuer(),
                "policy": str(policy),
            },
        )
