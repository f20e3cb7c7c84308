"""
Chain presets - Address prefixes and SLIP-44 coin types.

Supports the Cosmos Hub and a few common Cosmos SDK chains.
"""

from dataclasses import dataclass

from .errors import UnknownChainError
from .models.path import DerivationPath, make_bip44_path

# ============================================
# Chain Configurations
# ============================================

@dataclass(frozen=True)
class ChainConfig:
    """Configuration for a Cosmos SDK chain."""
    name: str
    display_name: str
    prefix: str         # bech32 human readable part
    coin_type: int      # SLIP-44

    def hd_path(self, account_index: int = 0) -> DerivationPath:
        """m/44'/coin_type'/0'/0/account_index"""
        return make_bip44_path(self.coin_type, account_index)


CHAINS = {
    "cosmoshub": ChainConfig(
        name="cosmoshub",
        display_name="Cosmos Hub",
        prefix="cosmos",
        coin_type=118,
    ),
    "osmosis": ChainConfig(
        name="osmosis",
        display_name="Osmosis",
        prefix="osmo",
        coin_type=118,
    ),
    "juno": ChainConfig(
        name="juno",
        display_name="Juno",
        prefix="juno",
        coin_type=118,
    ),
    "terra": ChainConfig(
        name="terra",
        display_name="Terra",
        prefix="terra",
        coin_type=330,
    ),
    "kava": ChainConfig(
        name="kava",
        display_name="Kava",
        prefix="kava",
        coin_type=459,
    ),
}

# Default chain
DEFAULT_CHAIN = "cosmoshub"


def get_chain(name: str) -> ChainConfig:
    """Look up a chain preset by name (case-insensitive)."""
    try:
        return CHAINS[name.lower()]
    except KeyError:
        raise UnknownChainError(name) from None
