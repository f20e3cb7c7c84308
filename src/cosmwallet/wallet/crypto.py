"""
Wallet Crypto - Adapters over the audited primitive libraries.

Industry-standard building blocks:
- BIP-39 mnemonics and seeds (mnemonic)
- BIP-32/SLIP-10 secp256k1 derivation (eth_account)
- secp256k1 keys and RFC 6979 deterministic, low-s ECDSA (ecdsa)
- Argon2id key derivation (argon2-cffi)
- XChaCha20-Poly1305 authenticated encryption (pycryptodome)

Everything here is synchronous; the wallet decides what runs off the
event loop.
"""

import hashlib
import re
import secrets

# Cryptography
from argon2.low_level import hash_secret_raw, Type
from Crypto.Cipher import ChaCha20_Poly1305
from Crypto.Hash import RIPEMD160
from ecdsa import SigningKey, VerifyingKey, SECP256k1
from ecdsa.keys import BadSignatureError
from ecdsa.util import sigencode_strings_canonize, sigdecode_string

# BIP-39 / BIP-32
from mnemonic import Mnemonic
from eth_account.hdaccount import key_from_seed

from ..errors import InvalidMnemonicError
from ..models.path import DerivationPath


# ============================================
# Security Constants
# ============================================

# Argon2id parameters. Not great, but cheap enough to run interactively.
ARGON2_TIME_COST = 11               # libsodium opsLimit
ARGON2_MEMORY_COST = 8 * 1024       # KiB, libsodium memLimit / 1024
ARGON2_PARALLELISM = 1              # libsodium always uses one lane
ARGON2_HASH_LEN = 32                # 256-bit encryption key

# XChaCha20-Poly1305 constants
XCHACHA20_KEY_SIZE = 32
XCHACHA20_NONCE_SIZE = 24
POLY1305_TAG_SIZE = 16

PRIVATE_KEY_SIZE = 32
SIGNATURE_COMPONENT_SIZE = 32

VALID_WORD_COUNTS = (12, 15, 18, 21, 24)

_MNEMONIC_FORMAT = re.compile(r"^[a-z]+( [a-z]+)*$")

_english = Mnemonic("english")


# ============================================
# Hashing
# ============================================

def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


def ripemd160(data: bytes) -> bytes:
    # hashlib's ripemd160 depends on the OpenSSL build
    return RIPEMD160.new(data).digest()


# ============================================
# Randomness
# ============================================

def random_bytes(n: int) -> bytes:
    """n bytes from the OS CSPRNG."""
    return secrets.token_bytes(n)


# ============================================
# Mnemonics
# ============================================

def validate_mnemonic(phrase: str) -> str:
    """
    Check an English BIP-39 mnemonic.

    The phrase must be lowercase words separated by single spaces, every
    word must be in the wordlist and the checksum must match.

    Returns: the phrase unchanged
    Raises: InvalidMnemonicError
    """
    if not isinstance(phrase, str) or not _MNEMONIC_FORMAT.match(phrase):
        raise InvalidMnemonicError("Invalid mnemonic format")

    words = phrase.split(" ")
    if len(words) not in VALID_WORD_COUNTS:
        raise InvalidMnemonicError(f"Invalid word count in mnemonic: {len(words)}")

    for word in words:
        if word not in _english.wordlist:
            raise InvalidMnemonicError("Mnemonic contains invalid word")

    if not _english.check(phrase):
        raise InvalidMnemonicError("Invalid mnemonic checksum")

    return phrase


def entropy_length(word_count: int) -> int:
    """Entropy bytes encoded by a mnemonic of `word_count` words."""
    if word_count not in VALID_WORD_COUNTS:
        raise ValueError(f"word_count must be one of {VALID_WORD_COUNTS}, got {word_count}")
    return 4 * ((11 * word_count) // 33)


def entropy_to_mnemonic(entropy: bytes) -> str:
    return _english.to_mnemonic(entropy)


def mnemonic_to_seed(phrase: str) -> bytes:
    """64-byte BIP-39 seed with an empty passphrase."""
    return _english.to_seed(phrase, passphrase="")


# ============================================
# Key Derivation
# ============================================

def derive_private_key(seed: bytes, hd_path: DerivationPath) -> bytes:
    """Walk the secp256k1 key tree from `seed` along `hd_path`."""
    return key_from_seed(seed, str(hd_path))


def derive_key(password: str, salt: bytes) -> bytes:
    """
    Derive an encryption key from password using Argon2id.

    Argon2id is memory-hard, making brute-force attacks expensive.
    """
    return hash_secret_raw(
        secret=password.encode('utf-8'),
        salt=salt,
        time_cost=ARGON2_TIME_COST,
        memory_cost=ARGON2_MEMORY_COST,
        parallelism=ARGON2_PARALLELISM,
        hash_len=ARGON2_HASH_LEN,
        type=Type.ID
    )


# ============================================
# secp256k1
# ============================================

def make_keypair(private_key: bytes) -> bytes:
    """Uncompressed (65 byte, 0x04 prefixed) public key for `private_key`."""
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise ValueError(f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}")
    signing_key = SigningKey.from_string(bytes(private_key), curve=SECP256k1)
    return signing_key.get_verifying_key().to_string("uncompressed")


def compress_pubkey(pubkey: bytes) -> bytes:
    """33-byte compressed form of a secp256k1 public key."""
    return VerifyingKey.from_string(bytes(pubkey), curve=SECP256k1).to_string("compressed")


def create_signature(message_hash: bytes, private_key: bytes) -> tuple[bytes, bytes]:
    """
    Deterministic ECDSA signature over already hashed bytes.

    Hashes longer than the curve order are truncated to its bit length.
    An empty hash raises ValueError.
    s is normalized to the lower half of the order.

    Returns: (r, s), each 32 bytes big-endian
    """
    if not message_hash:
        raise ValueError("Message hash must not be empty")
    signing_key = SigningKey.from_string(bytes(private_key), curve=SECP256k1)
    r, s = signing_key.sign_digest_deterministic(
        bytes(message_hash),
        hashfunc=hashlib.sha256,
        sigencode=sigencode_strings_canonize,
        allow_truncate=True,
    )
    return r, s


def verify_signature(signature: bytes, message_hash: bytes, pubkey: bytes) -> bool:
    """Check a 64-byte r||s signature against a compressed or uncompressed pubkey."""
    verifying_key = VerifyingKey.from_string(bytes(pubkey), curve=SECP256k1)
    try:
        return verifying_key.verify_digest(
            bytes(signature),
            bytes(message_hash),
            sigdecode=sigdecode_string,
            allow_truncate=True,
        )
    except BadSignatureError:
        return False


# ============================================
# Encryption
# ============================================

def encrypt(plaintext: bytes, key: bytes, nonce: bytes) -> bytes:
    """
    XChaCha20-Poly1305 (IETF) encryption.

    Returns: ciphertext followed by the 16-byte tag (libsodium layout)
    """
    if len(key) != XCHACHA20_KEY_SIZE:
        raise ValueError(f"Encryption key must be {XCHACHA20_KEY_SIZE} bytes")
    if len(nonce) != XCHACHA20_NONCE_SIZE:
        raise ValueError(f"Nonce must be {XCHACHA20_NONCE_SIZE} bytes")

    cipher = ChaCha20_Poly1305.new(key=bytes(key), nonce=bytes(nonce))
    ciphertext, tag = cipher.encrypt_and_digest(plaintext)
    return ciphertext + tag
