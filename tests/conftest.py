"""Shared pytest fixtures and key helpers for txnguard tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner
from stellar_sdk import SignedPayloadSigner, SignerKey, StrKey

# All-zero ed25519 key; a well-known StrKey test vector.
ZERO_ACCOUNT = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"


def make_address(fill: int) -> str:
    """Return a valid G-address whose 32 key bytes are all *fill*."""
    return StrKey.encode_ed25519_public_key(bytes([fill]) * 32)


def make_signed_payload(fill: int, payload: bytes) -> str:
    """Return a P-address signing *payload* with the key of ``make_address(fill)``."""
    signer = SignedPayloadSigner(make_address(fill), payload)
    return SignerKey.ed25519_signed_payload(signer).encoded_signer_key


def flip_char(text: str, index: int) -> str:
    """Replace the character at *index* with a different base32 letter."""
    replacement = "B" if text[index] != "B" else "C"
    return text[:index] + replacement + text[index + 1 :]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def issuer() -> str:
    """A valid issuer account address."""
    return StrKey.encode_ed25519_public_key(bytes(range(32)))


@pytest.fixture
def account() -> str:
    """A second valid account address, distinct from ``issuer``."""
    return make_address(0x42)


@pytest.fixture
def pre_auth_tx() -> str:
    return StrKey.encode_pre_auth_tx(b"\x11" * 32)


@pytest.fixture
def hash_x() -> str:
    return StrKey.encode_sha256_hash(b"\x22" * 32)
