"""
Models package - Data model for cosmwallet.

Contains:
- PathIndex, DerivationPath: BIP-32/SLIP-10 derivation paths
- Algo, AccountRecord, AccountData: account records
"""

from .path import (
    PathIndex,
    DerivationPath,
    HARDENED_OFFSET,
    path_to_string,
    make_cosmoshub_path,
    make_bip44_path,
)
from .account import Algo, AccountRecord, AccountData

__all__ = [
    "PathIndex",
    "DerivationPath",
    "HARDENED_OFFSET",
    "path_to_string",
    "make_cosmoshub_path",
    "make_bip44_path",
    "Algo",
    "AccountRecord",
    "AccountData",
]
