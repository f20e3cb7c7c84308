"""
Shared fixtures for the cosmwallet test suite.
"""

import asyncio

import pytest

from cosmwallet import Secp256k1Wallet

# Vector shared with other Cosmos SDK wallet implementations
DEFAULT_MNEMONIC = "special sign fit simple patrol salute grocery chicken wheat radar tonight ceiling"
DEFAULT_PUBKEY = bytes.fromhex("02baa4ef93f2ce84592a49b1d729c074eab640112522a7a89f7d03ebab21ded7b6")
DEFAULT_ADDRESS = "cosmos1jhg0e7s6gn44tfc5k37kr04sznyhedtc9rzys5"

# A second valid mnemonic (BIP-39 test vector, all-zero entropy)
ABANDON_MNEMONIC = " ".join(["abandon"] * 11 + ["about"])


@pytest.fixture(scope="module")
def wallet() -> Secp256k1Wallet:
    """Wallet for the default vector, shared within a test module."""
    return asyncio.run(Secp256k1Wallet.from_mnemonic(DEFAULT_MNEMONIC))


@pytest.fixture
def app_home(tmp_path, monkeypatch):
    """Point the application directory at a temporary location."""
    home = tmp_path / "home"
    monkeypatch.setenv("COSMWALLET_HOME", str(home))
    return home
