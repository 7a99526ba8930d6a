"""SEP-11 canonical asset list decoding.

A canonical asset list is a comma-separated sequence of entries, each either
``native`` (in any letter case) or ``CODE:ISSUER``::

    native,USD:GA5ZSEJYB37JRC5AVCIA5MOP4RHTM335X2KGX3IHOJAPP5RE34K4KZVN

Each credit entry is checked by constructing a :class:`stellar_sdk.Asset`.
Decoding yields :class:`AssetRecord` values, the wire-level view of an asset
that the domain layer converts into its own asset types.
"""

from __future__ import annotations

from dataclasses import dataclass

from stellar_sdk import Asset
from stellar_sdk.exceptions import AssetCodeInvalidError, AssetIssuerInvalidError

from txnguard.domain.types import AssetType, credit_asset_type
from txnguard.errors import FormatError

NATIVE_LITERAL = "native"


@dataclass(frozen=True)
class AssetRecord:
    """Intermediate asset representation produced by the decoder."""

    type: AssetType
    code: str = ""
    issuer: str = ""


def _invalid(entry: str, reason: str) -> FormatError:
    return FormatError(f"{entry} is not a valid asset, it contains an invalid {reason}")


def decode_canonical_asset(entry: str) -> AssetRecord:
    """Decode a single canonical asset entry."""
    if entry.lower() == NATIVE_LITERAL:
        return AssetRecord(AssetType.NATIVE)

    parts = entry.split(":")
    if len(parts) != 2:
        msg = f"{entry} is not a valid asset"
        raise FormatError(msg)
    code, issuer = parts
    try:
        sdk_asset = Asset(code, issuer)
    except AssetCodeInvalidError as exc:
        raise _invalid(entry, "asset code") from exc
    except AssetIssuerInvalidError as exc:
        raise _invalid(entry, "issuer") from exc

    # The SDK's code pattern tolerates a trailing newline; ours does not.
    try:
        asset_type = credit_asset_type(sdk_asset.code)
    except FormatError as exc:
        raise _invalid(entry, "asset code") from exc
    return AssetRecord(asset_type, sdk_asset.code, issuer)


def decode_canonical_asset_list(text: str) -> list[AssetRecord]:
    """Decode a comma-separated canonical asset list.

    An empty string decodes to an empty list.
    """
    if not text:
        return []
    return [decode_canonical_asset(entry) for entry in text.split(",")]
