"""
Encrypted wallet container - the v1 serialization format.

A self-describing JSON document: the algorithm identifiers and their
parameters travel with the ciphertext so a reader can pick the right
primitives without outside context.

    {"type": "v1",
     "kdf": {"algorithm": "argon2id", "params": {...}},
     "encryption": {"algorithm": "xchacha20poly1305-ietf", "params": {"nonce": "<hex>"}},
     "value": "<base64>"}

The encrypted value is UTF-8 JSON of
{"mnemonic": "...", "accounts": [{"algo": ..., "hdPath": ..., "prefix": ...}]}.
"""

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Any

from ..errors import ContainerFormatError
from ..models.account import AccountRecord
from .crypto import (
    ARGON2_HASH_LEN,
    ARGON2_MEMORY_COST,
    ARGON2_TIME_COST,
    XCHACHA20_NONCE_SIZE,
    encrypt,
    random_bytes,
)

SERIALIZATION_TYPE_V1 = "v1"

# Fixed for the whole v1 format: the same password always gives the same key,
# so one precomputed table covers every v1 container. Must be 16 bytes.
SECP256K1_WALLET_SALT = b"Secp256k1Wallet1"

ALGORITHM_ID_ARGON2ID = "argon2id"
ALGORITHM_ID_NONE = "none"
ALGORITHM_ID_XCHACHA20POLY1305_IETF = "xchacha20poly1305-ietf"

_COMPACT = (",", ":")


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """An algorithm identifier plus a map of algorithm-specific parameters."""
    algorithm: str
    params: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"algorithm": self.algorithm, "params": dict(self.params)}

    @classmethod
    def from_dict(cls, data: Any, what: str) -> "AlgorithmDescriptor":
        if not isinstance(data, dict):
            raise ContainerFormatError(f"'{what}' must be an object")
        algorithm = data.get("algorithm")
        if not isinstance(algorithm, str) or not algorithm:
            raise ContainerFormatError(f"'{what}.algorithm' must be a non-empty string")
        params = data.get("params", {})
        if not isinstance(params, dict):
            raise ContainerFormatError(f"'{what}.params' must be an object")
        return cls(algorithm=algorithm, params=params)


def argon2id_descriptor() -> AlgorithmDescriptor:
    """KDF descriptor for the fixed password hashing options."""
    return AlgorithmDescriptor(
        algorithm=ALGORITHM_ID_ARGON2ID,
        params={
            "outputLength": ARGON2_HASH_LEN,
            "opsLimit": ARGON2_TIME_COST,
            "memLimitKib": ARGON2_MEMORY_COST,
        },
    )


def raw_key_descriptor() -> AlgorithmDescriptor:
    """KDF descriptor when the caller supplied the encryption key directly."""
    return AlgorithmDescriptor(algorithm=ALGORITHM_ID_NONE)


@dataclass(frozen=True)
class EncryptedWalletData:
    """The plaintext that gets encrypted."""
    mnemonic: str
    accounts: tuple[AccountRecord, ...]

    def to_json(self) -> str:
        return json.dumps(
            {
                "mnemonic": self.mnemonic,
                "accounts": [account.to_dict() for account in self.accounts],
            },
            separators=_COMPACT,
        )


@dataclass(frozen=True)
class EncryptedWallet:
    """A JSON document holding the encrypted wallet and its metadata."""
    type: str                           # format+version identifier
    kdf: AlgorithmDescriptor            # password to encryption key
    encryption: AlgorithmDescriptor     # symmetric encryption
    value: str                          # base64 encoded ciphertext

    @property
    def nonce(self) -> bytes:
        return bytes.fromhex(self.encryption.params["nonce"])

    @property
    def ciphertext(self) -> bytes:
        return base64.b64decode(self.value)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "kdf": self.kdf.to_dict(),
            "encryption": self.encryption.to_dict(),
            "value": self.value,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=_COMPACT)

    @classmethod
    def from_dict(cls, data: Any) -> "EncryptedWallet":
        """
        Validate the document shape. Does not decrypt anything.

        Raises:
            ContainerFormatError: If the document is not a v1 container
        """
        if not isinstance(data, dict):
            raise ContainerFormatError("Encrypted wallet must be a JSON object")

        doc_type = data.get("type")
        if doc_type != SERIALIZATION_TYPE_V1:
            raise ContainerFormatError(f"Unsupported serialization type: {doc_type!r}")

        kdf = AlgorithmDescriptor.from_dict(data.get("kdf"), "kdf")
        encryption = AlgorithmDescriptor.from_dict(data.get("encryption"), "encryption")

        nonce_hex = encryption.params.get("nonce")
        if not isinstance(nonce_hex, str):
            raise ContainerFormatError("'encryption.params.nonce' must be a hex string")
        try:
            bytes.fromhex(nonce_hex)
        except ValueError as e:
            raise ContainerFormatError("'encryption.params.nonce' is not valid hex") from e

        value = data.get("value")
        if not isinstance(value, str):
            raise ContainerFormatError("'value' must be a base64 string")
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ContainerFormatError("'value' is not valid base64") from e

        return cls(type=doc_type, kdf=kdf, encryption=encryption, value=value)

    @classmethod
    def from_json(cls, text: str) -> "EncryptedWallet":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ContainerFormatError(f"Encrypted wallet is not valid JSON: {e}") from e
        return cls.from_dict(data)


def encrypt_wallet_data(
    data: EncryptedWalletData,
    encryption_key: bytes,
    kdf: AlgorithmDescriptor,
) -> EncryptedWallet:
    """
    Encrypt `data` under `encryption_key` with a freshly drawn nonce.

    The nonce is created here and nowhere else, so every call uses a new one.
    """
    message = data.to_json().encode("utf-8")
    nonce = random_bytes(XCHACHA20_NONCE_SIZE)
    encrypted = encrypt(message, encryption_key, nonce)

    return EncryptedWallet(
        type=SERIALIZATION_TYPE_V1,
        kdf=kdf,
        encryption=AlgorithmDescriptor(
            algorithm=ALGORITHM_ID_XCHACHA20POLY1305_IETF,
            params={"nonce": nonce.hex()},
        ),
        value=base64.b64encode(encrypted).decode("ascii"),
    )
