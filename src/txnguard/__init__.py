"""txnguard: field validation and canonical parsing for Stellar operations."""

from __future__ import annotations

from txnguard.domain.amount import format_amount, parse_amount
from txnguard.domain.assets import (
    Asset,
    BasicAsset,
    CreditAsset,
    LiquidityPoolShareAsset,
    NativeAsset,
    canonical_asset_string,
)
from txnguard.domain.types import AssetType, SignerKeyType
from txnguard.domain.validators import (
    parse_asset_string,
    validate_asset,
    validate_asset_code,
    validate_change_trust_asset,
    validate_public_key,
    validate_signer_key,
)
from txnguard.errors import (
    FormatError,
    ParseError,
    RangeError,
    TxnGuardError,
    UndefinedError,
    ValidationError,
    new_validation_error,
)

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "AssetType",
    "BasicAsset",
    "CreditAsset",
    "FormatError",
    "LiquidityPoolShareAsset",
    "NativeAsset",
    "ParseError",
    "RangeError",
    "SignerKeyType",
    "TxnGuardError",
    "UndefinedError",
    "ValidationError",
    "__version__",
    "canonical_asset_string",
    "format_amount",
    "new_validation_error",
    "parse_amount",
    "parse_asset_string",
    "validate_asset",
    "validate_asset_code",
    "validate_change_trust_asset",
    "validate_public_key",
    "validate_signer_key",
]
