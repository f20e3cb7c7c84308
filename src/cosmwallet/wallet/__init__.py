"""
Wallet package - Key management and signing for cosmwallet.

Contains:
- Secp256k1Wallet: single-account HD wallet with BIP-39/44 derivation
- EncryptedWallet: the v1 encrypted serialization format
- StdSignature: the signature envelope
- Address helpers and on-disk storage
"""

from .hdwallet import (
    Secp256k1Wallet,
    prehash,
    DEFAULT_PREFIX,
    PREHASH_SHA256,
    PREHASH_SHA512,
    PREHASH_TYPES,
)
from .container import (
    EncryptedWallet,
    EncryptedWalletData,
    AlgorithmDescriptor,
    SERIALIZATION_TYPE_V1,
    SECP256K1_WALLET_SALT,
    ALGORITHM_ID_ARGON2ID,
    ALGORITHM_ID_NONE,
    ALGORITHM_ID_XCHACHA20POLY1305_IETF,
)
from .signature import (
    PubKey,
    StdSignature,
    encode_secp256k1_pubkey,
    encode_secp256k1_signature,
    decode_signature,
)
from .address import (
    pubkey_to_address,
    validate_prefix,
    raw_secp256k1_pubkey_to_address,
    raw_ed25519_pubkey_to_address,
)
from .store import write_encrypted_wallet, read_encrypted_wallet

__all__ = [
    # Wallet
    "Secp256k1Wallet",
    "prehash",
    "DEFAULT_PREFIX",
    "PREHASH_SHA256",
    "PREHASH_SHA512",
    "PREHASH_TYPES",
    # Container
    "EncryptedWallet",
    "EncryptedWalletData",
    "AlgorithmDescriptor",
    "SERIALIZATION_TYPE_V1",
    "SECP256K1_WALLET_SALT",
    "ALGORITHM_ID_ARGON2ID",
    "ALGORITHM_ID_NONE",
    "ALGORITHM_ID_XCHACHA20POLY1305_IETF",
    # Signatures
    "PubKey",
    "StdSignature",
    "encode_secp256k1_pubkey",
    "encode_secp256k1_signature",
    "decode_signature",
    # Addresses
    "pubkey_to_address",
    "validate_prefix",
    "raw_secp256k1_pubkey_to_address",
    "raw_ed25519_pubkey_to_address",
    # Storage
    "write_encrypted_wallet",
    "read_encrypted_wallet",
]
