"""Field validators and the canonical asset parser.

Three asset policies share one capability set (:class:`BasicAsset`):

- ``validate_asset``: payment and trade assets. Native passes; coded assets
  need a valid code and issuer.
- ``validate_asset_code``: trust-authorization assets. Native is forbidden;
  the issuer is ignored.
- ``validate_change_trust_asset``: trustline assets. Like the code-only
  policy, plus an issuer check unless the asset is a pool share.

Validators raise typed errors from :mod:`txnguard.errors`; attributing a
failure to a field is left to the caller (see ``new_validation_error``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from txnguard.codec.assets import decode_canonical_asset_list
from txnguard.codec.strkey import decode_signer_key, is_valid_ed25519_public_key
from txnguard.domain.assets import asset_from_record
from txnguard.domain.types import AssetType
from txnguard.errors import FormatError, ParseError, TxnGuardError, UndefinedError

if TYPE_CHECKING:
    from txnguard.domain.assets import Asset, BasicAsset


def validate_public_key(public_key: str) -> None:
    """Raise unless *public_key* is a well-formed ed25519 account address."""
    if not public_key:
        msg = "public key is undefined"
        raise UndefinedError(msg)
    if not is_valid_ed25519_public_key(public_key):
        msg = f"{public_key} is not a valid stellar public key"
        raise FormatError(msg)


def validate_signer_key(signer_key: str) -> None:
    """Raise unless *signer_key* decodes as any of the four signer variants."""
    if not signer_key:
        msg = "signer key is undefined"
        raise UndefinedError(msg)
    try:
        decode_signer_key(signer_key)
    except FormatError as exc:
        msg = f"{signer_key} is not a valid stellar signer key"
        raise FormatError(msg) from exc


def _validate_issuer(asset: BasicAsset) -> None:
    try:
        validate_public_key(asset.get_issuer())
    except TxnGuardError as exc:
        msg = f"asset issuer: {exc}"
        raise type(exc)(msg) from exc


def validate_asset(asset: BasicAsset | None) -> None:
    """Check a payment or trade asset: native, or valid code plus issuer."""
    if asset is None:
        msg = "asset is undefined"
        raise UndefinedError(msg)
    if asset.is_native():
        return
    asset.get_type()
    _validate_issuer(asset)


def validate_asset_code(asset: BasicAsset | None) -> BasicAsset:
    """Check a non-native asset's code, ignoring any issuer.

    Returns the asset, narrowed to non-optional.
    """
    if asset is None:
        msg = "asset is undefined"
        raise UndefinedError(msg)
    if asset.is_native():
        msg = "native (XLM) asset type is not allowed"
        raise FormatError(msg)
    asset.get_type()
    return asset


def validate_change_trust_asset(asset: BasicAsset | None) -> None:
    """Check a trustline asset: non-native, valid code, issuer unless pool share."""
    checked = validate_asset_code(asset)
    if checked.get_type() is AssetType.POOL_SHARE:
        return
    _validate_issuer(checked)


def parse_asset_string(canonical: str) -> Asset:
    """Parse a single SEP-11 canonical asset (``native`` or ``CODE:ISSUER``).

    Raises:
        ParseError: If the text does not decode to exactly one valid asset.
    """
    try:
        records = decode_canonical_asset_list(canonical)
    except TxnGuardError as exc:
        msg = f"error parsing asset string: {exc}"
        raise ParseError(msg) from exc

    if len(records) != 1:
        msg = f"error parsing asset string: expected exactly one asset, got {len(records)}"
        raise ParseError(msg)

    try:
        return asset_from_record(records[0])
    except TxnGuardError as exc:
        msg = f"error parsing asset string via asset record: {exc}"
        raise ParseError(msg) from exc
