"""
cosmwallet - Hierarchical-deterministic signing wallet for Cosmos SDK chains.

Derives one secp256k1 account from a BIP-39 mnemonic, signs messages into
StdSignature envelopes and serializes its secrets into an encrypted v1
container.
"""

from .errors import (
    WalletError,
    InvalidMnemonicError,
    AddressNotFoundError,
    UnsupportedPrehashError,
    UnsupportedSecretTypeError,
    UnsupportedAlgorithmError,
    InvalidPubkeyError,
    InvalidPrefixError,
    InvalidSignatureError,
    WalletLockedError,
    ContainerFormatError,
    UnknownChainError,
)
from .models import (
    PathIndex,
    DerivationPath,
    path_to_string,
    make_cosmoshub_path,
    Algo,
    AccountRecord,
    AccountData,
)
from .wallet import (
    Secp256k1Wallet,
    EncryptedWallet,
    StdSignature,
    decode_signature,
    pubkey_to_address,
    validate_prefix,
    write_encrypted_wallet,
    read_encrypted_wallet,
)
from .chains import ChainConfig, CHAINS, get_chain

__version__ = "0.1.0"

__all__ = [
    # Errors
    "WalletError",
    "InvalidMnemonicError",
    "AddressNotFoundError",
    "UnsupportedPrehashError",
    "UnsupportedSecretTypeError",
    "UnsupportedAlgorithmError",
    "InvalidPubkeyError",
    "InvalidPrefixError",
    "InvalidSignatureError",
    "WalletLockedError",
    "ContainerFormatError",
    "UnknownChainError",
    # Models
    "PathIndex",
    "DerivationPath",
    "path_to_string",
    "make_cosmoshub_path",
    "Algo",
    "AccountRecord",
    "AccountData",
    # Wallet
    "Secp256k1Wallet",
    "EncryptedWallet",
    "StdSignature",
    "decode_signature",
    "pubkey_to_address",
    "validate_prefix",
    "write_encrypted_wallet",
    "read_encrypted_wallet",
    # Chains
    "ChainConfig",
    "CHAINS",
    "get_chain",
]
