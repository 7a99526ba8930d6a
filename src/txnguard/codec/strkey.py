"""Key codec adapter over :mod:`stellar_sdk`.

StrKey text (``G``, ``T``, ``X`` and ``P`` addresses) is decoded by the
Stellar SDK.  This module narrows the SDK's assorted decode failures to
:class:`FormatError` and maps its signer variants onto
:class:`SignerKeyType`, so the domain layer never imports the SDK directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from stellar_sdk import SignerKey, StrKey
from stellar_sdk.signer_key import SignerKeyType as SdkSignerKeyType

from txnguard.domain.types import SignerKeyType
from txnguard.errors import FormatError

_SIGNER_TYPES = {
    SdkSignerKeyType.SIGNER_KEY_TYPE_ED25519: SignerKeyType.ED25519,
    SdkSignerKeyType.SIGNER_KEY_TYPE_PRE_AUTH_TX: SignerKeyType.PRE_AUTH_TX,
    SdkSignerKeyType.SIGNER_KEY_TYPE_HASH_X: SignerKeyType.HASH_X,
    SdkSignerKeyType.SIGNER_KEY_TYPE_ED25519_SIGNED_PAYLOAD: SignerKeyType.ED25519_SIGNED_PAYLOAD,
}


@dataclass(frozen=True)
class DecodedSigner:
    """A signer key split into its variant, 32-byte key and optional payload."""

    type: SignerKeyType
    key: bytes
    payload: bytes = b""


def is_valid_ed25519_public_key(text: str) -> bool:
    return StrKey.is_valid_ed25519_public_key(text)


def decode_ed25519_public_key(text: str) -> bytes:
    """Return the raw 32-byte key of a ``G`` address.

    Raises:
        FormatError: If *text* is not a well-formed account address.
    """
    try:
        return StrKey.decode_ed25519_public_key(text)
    except ValueError as exc:
        msg = f"invalid ed25519 public key: {text}"
        raise FormatError(msg) from exc


def decode_signer_key(text: str) -> DecodedSigner:
    """Decode any of the four signer key variants.

    Raises:
        FormatError: If *text* is empty, carries an unsupported prefix, or
            fails the SDK's checksum and length checks.
    """
    if not text:
        msg = "empty signer key"
        raise FormatError(msg)
    try:
        signer = SignerKey.from_encoded_signer_key(text)
    except (ValueError, OverflowError) as exc:
        # OverflowError comes from prefixes outside A-Z.
        msg = f"invalid signer key: {text}"
        raise FormatError(msg) from exc

    kind = _SIGNER_TYPES[signer.signer_key_type]
    if kind is SignerKeyType.ED25519_SIGNED_PAYLOAD:
        signed = signer.to_signed_payload_signer()
        return DecodedSigner(kind, signer.signer_key[:32], signed.payload)
    return DecodedSigner(kind, signer.signer_key)
