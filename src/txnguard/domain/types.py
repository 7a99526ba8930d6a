"""Asset and signer-key type tags.

Both unions are closed: the protocol defines exactly four asset kinds and
four signer-key kinds, so plain enums are used rather than a registry.
"""

from __future__ import annotations

import re
from enum import StrEnum

from txnguard.errors import FormatError

# Asset codes are 1-12 ASCII alphanumerics, case-sensitive.
ASSET_CODE_PATTERN = re.compile(r"[A-Za-z0-9]{1,12}")


class AssetType(StrEnum):
    """Asset variants known to the protocol."""

    NATIVE = "native"
    CREDIT_ALPHANUM4 = "credit_alphanum4"
    CREDIT_ALPHANUM12 = "credit_alphanum12"
    POOL_SHARE = "pool_share"


class SignerKeyType(StrEnum):
    """Signer key variants accepted by the protocol."""

    ED25519 = "ed25519"
    PRE_AUTH_TX = "pre_auth_tx"
    HASH_X = "hash_x"
    ED25519_SIGNED_PAYLOAD = "ed25519_signed_payload"


def credit_asset_type(code: str) -> AssetType:
    """Return the alphanum variant for *code*, raising on a malformed code.

    Examples:
        >>> credit_asset_type("USD")
        <AssetType.CREDIT_ALPHANUM4: 'credit_alphanum4'>
        >>> credit_asset_type("SOMELONGCODE")
        <AssetType.CREDIT_ALPHANUM12: 'credit_alphanum12'>
    """
    if not 1 <= len(code) <= 12:
        msg = "asset code length must be between 1 and 12 characters"
        raise FormatError(msg)
    if ASSET_CODE_PATTERN.fullmatch(code) is None:
        msg = f"asset code {code!r} must contain only alphanumeric characters"
        raise FormatError(msg)
    if len(code) <= 4:
        return AssetType.CREDIT_ALPHANUM4
    return AssetType.CREDIT_ALPHANUM12
