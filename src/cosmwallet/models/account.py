"""
Account records - what a wallet derives and what it tells consumers.
"""

from dataclasses import dataclass
from enum import Enum

from .path import DerivationPath


class Algo(str, Enum):
    """Key algorithm families. Only secp256k1 can sign in this wallet."""
    SECP256K1 = "secp256k1"
    ED25519 = "ed25519"
    SR25519 = "sr25519"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AccountRecord:
    """Derivation instructions for one account."""
    algo: Algo
    hd_path: DerivationPath
    prefix: str     # bech32 human readable part, e.g. "cosmos"

    def to_dict(self) -> dict:
        return {
            "algo": self.algo.value,
            "hdPath": str(self.hd_path),
            "prefix": self.prefix,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AccountRecord":
        return cls(
            algo=Algo(data["algo"]),
            hd_path=DerivationPath.parse(data["hdPath"]),
            prefix=data["prefix"],
        )


@dataclass(frozen=True)
class AccountData:
    """Public view of an account. Never carries private key material."""
    address: str    # bech32 encoded
    algo: Algo
    pubkey: bytes   # compressed, 33 bytes for secp256k1

    def to_dict(self) -> dict:
        return {
            "address": self.address,
            "algo": self.algo.value,
            "pubkey": self.pubkey.hex(),
        }
