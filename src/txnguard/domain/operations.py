"""Operation field checks.

Each operation value object runs the validators for its fields and
re-raises the first failure as a :class:`ValidationError` naming the field.
These objects carry no wire encoding; they gate operation construction.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from txnguard.domain.amount import parse_amount
from txnguard.domain.validators import (
    validate_asset,
    validate_asset_code,
    validate_change_trust_asset,
    validate_public_key,
    validate_signer_key,
)
from txnguard.errors import RangeError, TxnGuardError, new_validation_error

if TYPE_CHECKING:
    from txnguard.domain.assets import BasicAsset

# Largest trustline limit expressible as a scaled int64.
MAX_TRUSTLINE_LIMIT = "922337203685.4775807"

MAX_SIGNER_WEIGHT = 255


def _check(field: str, validator: Callable[[Any], object], value: Any) -> None:
    try:
        validator(value)
    except TxnGuardError as exc:
        raise new_validation_error(field, str(exc)) from exc


def _check_source(source_account: str | None) -> None:
    if source_account is not None:
        _check("source_account", validate_public_key, source_account)


def _validate_weight(weight: int) -> None:
    if not 0 <= weight <= MAX_SIGNER_WEIGHT:
        msg = f"signer weight must be between 0 and {MAX_SIGNER_WEIGHT}"
        raise RangeError(msg)


def _validate_offer_id(offer_id: int) -> None:
    if offer_id < 0:
        msg = "offer id can not be negative"
        raise RangeError(msg)


@dataclass(frozen=True)
class Payment:
    """Send *amount* of *asset* to *destination*."""

    destination: str
    amount: int | str
    asset: BasicAsset | None
    source_account: str | None = None

    def validate(self) -> None:
        _check("destination", validate_public_key, self.destination)
        _check("amount", parse_amount, self.amount)
        _check("asset", validate_asset, self.asset)
        _check_source(self.source_account)


@dataclass(frozen=True)
class ChangeTrust:
    """Create, update or remove a trustline to *line*."""

    line: BasicAsset | None
    limit: int | str = MAX_TRUSTLINE_LIMIT
    source_account: str | None = None

    def validate(self) -> None:
        _check("line", validate_change_trust_asset, self.line)
        _check("limit", parse_amount, self.limit)
        _check_source(self.source_account)


@dataclass(frozen=True)
class AllowTrust:
    """Authorize or deauthorize *trustor* to hold *asset*.

    Only the asset code matters; any issuer on *asset* is ignored.
    """

    trustor: str
    asset: BasicAsset | None
    authorize: bool = True
    source_account: str | None = None

    def validate(self) -> None:
        _check("trustor", validate_public_key, self.trustor)
        _check("asset", validate_asset_code, self.asset)
        _check_source(self.source_account)


@dataclass(frozen=True)
class SetOptionsSigner:
    """Add, update or remove (weight 0) a signer on the source account."""

    address: str
    weight: int
    source_account: str | None = None

    def validate(self) -> None:
        _check("address", validate_signer_key, self.address)
        _check("weight", _validate_weight, self.weight)
        _check_source(self.source_account)


@dataclass(frozen=True)
class ManageSellOffer:
    """Create, update or delete an offer selling *selling* for *buying*."""

    selling: BasicAsset | None
    buying: BasicAsset | None
    amount: int | str
    price: int | str
    offer_id: int = 0
    source_account: str | None = None

    def validate(self) -> None:
        _check("selling", validate_asset, self.selling)
        _check("buying", validate_asset, self.buying)
        _check("amount", parse_amount, self.amount)
        _check("price", parse_amount, self.price)
        _check("offer_id", _validate_offer_id, self.offer_id)
        _check_source(self.source_account)
