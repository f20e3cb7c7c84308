"""
HD Wallet - One secp256k1 account derived from a BIP-39 mnemonic.

Usage:
    # Create new wallet
    wallet = await Secp256k1Wallet.generate(12)
    mnemonic = wallet.mnemonic  # Store securely offline

    # Restore an existing one
    wallet = await Secp256k1Wallet.from_mnemonic(mnemonic)

    # Sign
    [account] = await wallet.get_accounts()
    signature = await wallet.sign(account.address, b"hello")

    # Encrypted snapshot
    serialization = await wallet.save("my-password")
"""

import asyncio
import logging
from typing import Optional, Union

from ..errors import (
    AddressNotFoundError,
    UnsupportedPrehashError,
    UnsupportedSecretTypeError,
    WalletLockedError,
)
from ..models.account import AccountData, AccountRecord, Algo
from ..models.path import DerivationPath, make_cosmoshub_path
from .address import raw_secp256k1_pubkey_to_address, validate_prefix
from .container import (
    SECP256K1_WALLET_SALT,
    EncryptedWalletData,
    argon2id_descriptor,
    encrypt_wallet_data,
    raw_key_descriptor,
)
from .crypto import (
    SIGNATURE_COMPONENT_SIZE,
    XCHACHA20_KEY_SIZE,
    compress_pubkey,
    create_signature,
    derive_key,
    derive_private_key,
    entropy_length,
    entropy_to_mnemonic,
    make_keypair,
    mnemonic_to_seed,
    random_bytes,
    sha256,
    sha512,
    validate_mnemonic,
)
from .signature import StdSignature, encode_secp256k1_signature

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "cosmos"

PREHASH_SHA256 = "sha256"
PREHASH_SHA512 = "sha512"
PREHASH_TYPES = (None, PREHASH_SHA256, PREHASH_SHA512)


def prehash(message: bytes, prehash_type: Optional[str]) -> bytes:
    """Apply the agreed digest to `message` before signing."""
    if prehash_type is None:
        return bytes(message)
    if prehash_type == PREHASH_SHA256:
        return sha256(message)
    if prehash_type == PREHASH_SHA512:
        return sha512(message)
    raise UnsupportedPrehashError(f"Unknown prehash type: {prehash_type!r}")


def _derive_keypair(mnemonic: str, hd_path: DerivationPath) -> tuple[bytes, bytes]:
    """(private key, compressed public key) for `mnemonic` at `hd_path`."""
    seed = mnemonic_to_seed(mnemonic)
    private_key = derive_private_key(seed, hd_path)
    uncompressed = make_keypair(private_key)
    return private_key, compress_pubkey(uncompressed)


class Secp256k1Wallet:
    """
    Signing wallet holding exactly one derived secp256k1 account.

    The mnemonic is the only durable secret. The keypair is derived once
    at construction; the address is recomputed from the public key on every
    access so the two can never disagree.

    Use from_mnemonic() or generate() rather than the constructor.
    """

    def __init__(
        self,
        mnemonic: str,
        hd_path: DerivationPath,
        private_key: bytes,
        pubkey: bytes,
        prefix: str,
    ):
        """Initialize wallet with already derived key material (internal use)."""
        self._mnemonic: Optional[str] = mnemonic
        self._accounts: tuple[AccountRecord, ...] = (
            AccountRecord(algo=Algo.SECP256K1, hd_path=hd_path, prefix=prefix),
        )
        self._private_key = bytearray(private_key)
        self._pubkey = bytes(pubkey)
        self._locked = False

    # ============================================
    # Construction
    # ============================================

    @classmethod
    async def from_mnemonic(
        cls,
        mnemonic: str,
        hd_path: Optional[DerivationPath] = None,
        prefix: str = DEFAULT_PREFIX,
    ) -> "Secp256k1Wallet":
        """
        Restore a wallet from the given BIP-39 mnemonic.

        Args:
            mnemonic: Any valid English mnemonic
            hd_path: The BIP-32/SLIP-10 derivation path. Defaults to the
                Cosmos Hub path m/44'/118'/0'/0/0
            prefix: The bech32 address prefix (human readable part)

        Raises:
            InvalidMnemonicError: Before any key material is derived
            InvalidPrefixError: Before any key material is derived
        """
        validate_mnemonic(mnemonic)
        validate_prefix(prefix)
        if hd_path is None:
            hd_path = make_cosmoshub_path(0)

        private_key, pubkey = await asyncio.to_thread(_derive_keypair, mnemonic, hd_path)

        wallet = cls(mnemonic, hd_path, private_key, pubkey, prefix)
        logger.debug(f"Derived {wallet.address} at {hd_path}")
        return wallet

    @classmethod
    async def generate(
        cls,
        length: int = 12,
        hd_path: Optional[DerivationPath] = None,
        prefix: str = DEFAULT_PREFIX,
    ) -> "Secp256k1Wallet":
        """
        Generate a new wallet with a BIP-39 mnemonic of the given length.

        Args:
            length: Number of words in the mnemonic (12, 15, 18, 21 or 24)
            hd_path: The BIP-32/SLIP-10 derivation path. Defaults to the
                Cosmos Hub path m/44'/118'/0'/0/0
            prefix: The bech32 address prefix (human readable part)
        """
        validate_prefix(prefix)
        entropy = random_bytes(entropy_length(length))
        mnemonic = entropy_to_mnemonic(entropy)
        logger.info(f"Generated new {length}-word mnemonic")
        return await cls.from_mnemonic(mnemonic, hd_path, prefix)

    # ============================================
    # Accessors
    # ============================================

    @property
    def mnemonic(self) -> str:
        """The mnemonic (sensitive - only show during backup!)."""
        self._ensure_unlocked()
        return self._mnemonic

    @property
    def address(self) -> str:
        account = self._accounts[0]
        return raw_secp256k1_pubkey_to_address(self._pubkey, account.prefix)

    @property
    def pubkey(self) -> bytes:
        """Compressed public key."""
        return self._pubkey

    @property
    def accounts(self) -> tuple[AccountRecord, ...]:
        """Derivation instructions, one per account."""
        return self._accounts

    @property
    def is_locked(self) -> bool:
        return self._locked

    async def get_accounts(self) -> list[AccountData]:
        """Accounts a consumer may request signatures for."""
        return [
            AccountData(
                address=self.address,
                algo=self._accounts[0].algo,
                pubkey=self._pubkey,
            )
        ]

    # ============================================
    # Signing
    # ============================================

    async def sign(
        self,
        address: str,
        message: bytes,
        prehash_type: Optional[str] = PREHASH_SHA256,
    ) -> StdSignature:
        """
        Sign `message` with the key behind `address`.

        Args:
            address: Must be this wallet's address
            message: Arbitrary bytes
            prehash_type: None, "sha256" or "sha512"

        Returns: StdSignature wrapping the 64-byte r||s signature

        Raises:
            AddressNotFoundError: If the wallet does not hold `address`
            UnsupportedPrehashError: For an unknown prehash type
        """
        if address != self.address:
            raise AddressNotFoundError(address)
        self._ensure_unlocked()

        hashed_message = prehash(message, prehash_type)
        r, s = await asyncio.to_thread(create_signature, hashed_message, bytes(self._private_key))
        signature_bytes = r.rjust(SIGNATURE_COMPONENT_SIZE, b"\x00") + s.rjust(SIGNATURE_COMPONENT_SIZE, b"\x00")

        logger.debug(f"Signed {len(message)} byte message for {address} (prehash={prehash_type})")
        return encode_secp256k1_signature(self._pubkey, signature_bytes)

    # ============================================
    # Serialization
    # ============================================

    async def save(self, secret: Union[str, bytes, bytearray]) -> str:
        """
        Generate an encrypted serialization of this wallet.

        Args:
            secret: A password string runs through Argon2id with the fixed
                v1 salt. 32 raw bytes are used as the encryption key directly.

        Returns: the v1 container as a JSON string

        Raises:
            UnsupportedSecretTypeError: For any other kind of secret
        """
        self._ensure_unlocked()

        if isinstance(secret, str):
            encryption_key = await asyncio.to_thread(derive_key, secret, SECP256K1_WALLET_SALT)
            kdf = argon2id_descriptor()
        elif isinstance(secret, (bytes, bytearray)):
            if len(secret) != XCHACHA20_KEY_SIZE:
                raise UnsupportedSecretTypeError(
                    f"Encryption key must be {XCHACHA20_KEY_SIZE} bytes, got {len(secret)}"
                )
            encryption_key = bytes(secret)
            kdf = raw_key_descriptor()
        else:
            raise UnsupportedSecretTypeError(
                f"Unsupported type of encryption secret: {type(secret).__name__}"
            )

        data = EncryptedWalletData(mnemonic=self._mnemonic, accounts=self._accounts)
        encrypted = await asyncio.to_thread(encrypt_wallet_data, data, encryption_key, kdf)

        logger.info(f"Serialized wallet {self.address} (kdf={kdf.algorithm})")
        return encrypted.to_json()

    # ============================================
    # Security: Memory Cleanup
    # ============================================

    def _ensure_unlocked(self) -> None:
        if self._locked:
            raise WalletLockedError("Wallet is locked")

    def lock(self) -> None:
        """
        Lock the wallet, clearing sensitive data from memory.

        The private key buffer is zeroed. After locking, the wallet can still
        list accounts but cannot sign or serialize.
        """
        private_key = getattr(self, '_private_key', None)
        if private_key is not None:
            for i in range(len(private_key)):
                private_key[i] = 0
        self._mnemonic = None
        self._locked = True

    def __del__(self):
        """Attempt to clear sensitive data on destruction."""
        self.lock()

    def __repr__(self) -> str:
        return f"Secp256k1Wallet(address='{self.address}')"
