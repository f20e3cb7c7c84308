"""
Addresses - bech32 account addresses from public keys.
"""

import bech32

from ..errors import InvalidPrefixError, InvalidPubkeyError, UnsupportedAlgorithmError
from ..models.account import Algo
from .crypto import ripemd160, sha256

COMPRESSED_SECP256K1_PUBKEY_SIZE = 33
ED25519_PUBKEY_SIZE = 32

# BIP-173 human readable part
MAX_PREFIX_LENGTH = 83


def validate_prefix(prefix: str) -> None:
    """
    Check a bech32 prefix: 1 to 83 printable ASCII characters, no uppercase.

    Raises:
        InvalidPrefixError: If the prefix cannot start a bech32 address
    """
    if not isinstance(prefix, str) or not 1 <= len(prefix) <= MAX_PREFIX_LENGTH:
        raise InvalidPrefixError(f"Bech32 prefix must be 1 to {MAX_PREFIX_LENGTH} characters: {prefix!r}")
    if any(not 33 <= ord(c) <= 126 for c in prefix) or prefix != prefix.lower():
        raise InvalidPrefixError(f"Bech32 prefix must be lowercase printable ASCII: {prefix!r}")


def _encode(prefix: str, data: bytes) -> str:
    validate_prefix(prefix)
    five_bit = bech32.convertbits(data, 8, 5)
    if five_bit is None:
        raise ValueError("Failed to convert address bits")
    return bech32.bech32_encode(prefix, five_bit)


def raw_secp256k1_pubkey_to_address(pubkey: bytes, prefix: str) -> str:
    """bech32(prefix, ripemd160(sha256(pubkey))) for a compressed pubkey."""
    if len(pubkey) != COMPRESSED_SECP256K1_PUBKEY_SIZE:
        raise InvalidPubkeyError(f"Invalid Secp256k1 pubkey length (compressed): {len(pubkey)}")
    return _encode(prefix, ripemd160(sha256(pubkey)))


def raw_ed25519_pubkey_to_address(pubkey: bytes, prefix: str) -> str:
    """bech32(prefix, sha256(pubkey)[:20])."""
    if len(pubkey) != ED25519_PUBKEY_SIZE:
        raise InvalidPubkeyError(f"Invalid Ed25519 pubkey length: {len(pubkey)}")
    return _encode(prefix, sha256(pubkey)[:20])


def pubkey_to_address(pubkey: bytes, prefix: str, algo: Algo = Algo.SECP256K1) -> str:
    """Address for a raw public key of the given algorithm."""
    algo = Algo(algo)
    if algo is Algo.SECP256K1:
        return raw_secp256k1_pubkey_to_address(pubkey, prefix)
    if algo is Algo.ED25519:
        return raw_ed25519_pubkey_to_address(pubkey, prefix)
    raise UnsupportedAlgorithmError(f"No address encoding for {algo.value}")
