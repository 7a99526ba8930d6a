"""Asset model: native, credit and liquidity-pool-share assets.

Validators depend only on the :class:`BasicAsset` capability set, so any
object exposing ``is_native``/``get_type``/``get_code``/``get_issuer``
can be validated, not just the concrete types below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from txnguard.codec.assets import NATIVE_LITERAL
from txnguard.domain.types import AssetType, credit_asset_type
from txnguard.errors import FormatError

if TYPE_CHECKING:
    from txnguard.codec.assets import AssetRecord


@runtime_checkable
class BasicAsset(Protocol):
    """Capability set shared by every asset variant."""

    def is_native(self) -> bool: ...

    def get_type(self) -> AssetType: ...

    def get_code(self) -> str: ...

    def get_issuer(self) -> str: ...


@dataclass(frozen=True)
class NativeAsset:
    """The network's native asset (XLM). Has neither code nor issuer."""

    def is_native(self) -> bool:
        return True

    def get_type(self) -> AssetType:
        return AssetType.NATIVE

    def get_code(self) -> str:
        return ""

    def get_issuer(self) -> str:
        return ""


@dataclass(frozen=True)
class CreditAsset:
    """An issued asset identified by code and issuer account."""

    code: str
    issuer: str

    def is_native(self) -> bool:
        return False

    def get_type(self) -> AssetType:
        """Return the alphanum variant implied by the code length.

        Raises:
            FormatError: If the code is empty, longer than 12 characters
                or not alphanumeric.
        """
        return credit_asset_type(self.code)

    def get_code(self) -> str:
        return self.code

    def get_issuer(self) -> str:
        return self.issuer


@dataclass(frozen=True)
class LiquidityPoolShareAsset:
    """Shares of a liquidity pool, referenced by its hex pool id."""

    pool_id: str

    def is_native(self) -> bool:
        return False

    def get_type(self) -> AssetType:
        return AssetType.POOL_SHARE

    def get_code(self) -> str:
        return ""

    def get_issuer(self) -> str:
        return ""


Asset = NativeAsset | CreditAsset | LiquidityPoolShareAsset


def asset_from_record(record: AssetRecord) -> Asset:
    """Convert a decoded :class:`AssetRecord` into a domain asset."""
    if record.type is AssetType.NATIVE:
        return NativeAsset()
    if record.type in (AssetType.CREDIT_ALPHANUM4, AssetType.CREDIT_ALPHANUM12):
        asset = CreditAsset(code=record.code, issuer=record.issuer)
        if asset.get_type() is not record.type:
            msg = f"asset code {record.code!r} does not match type {record.type}"
            raise FormatError(msg)
        return asset
    msg = f"invalid asset type {record.type}"
    raise FormatError(msg)


def canonical_asset_string(asset: BasicAsset) -> str:
    """Render *asset* in SEP-11 canonical form (``native`` or ``CODE:ISSUER``).

    Raises:
        FormatError: For pool-share assets, which have no canonical form.
    """
    if asset.is_native():
        return NATIVE_LITERAL
    if asset.get_type() is AssetType.POOL_SHARE:
        msg = "liquidity pool share assets have no canonical string form"
        raise FormatError(msg)
    return f"{asset.get_code()}:{asset.get_issuer()}"
