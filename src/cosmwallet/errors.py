"""
Errors - Exception types raised by cosmwallet.

Failures of the underlying primitives (entropy source, KDF, cipher) are not
wrapped and propagate unchanged.
"""


class WalletError(Exception):
    """Base class for all wallet errors."""
    pass


class InvalidMnemonicError(WalletError, ValueError):
    """Mnemonic is malformed, uses unknown words or fails its checksum."""
    pass


class AddressNotFoundError(WalletError, KeyError):
    """Signing was requested for an address this wallet does not hold."""

    def __init__(self, address: str):
        super().__init__(f"Address {address} not found in wallet")
        self.address = address

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class UnsupportedPrehashError(WalletError, ValueError):
    """Unknown prehash type."""
    pass


class UnsupportedSecretTypeError(WalletError, TypeError):
    """Encryption secret is neither a password string nor a 32-byte key."""
    pass


class UnsupportedAlgorithmError(WalletError, ValueError):
    """Key algorithm is known but not supported for this operation."""
    pass


class InvalidPubkeyError(WalletError, ValueError):
    """Public key has the wrong length or encoding."""
    pass


class InvalidPrefixError(WalletError, ValueError):
    """Bech32 prefix is empty, too long or not lowercase printable ASCII."""
    pass


class InvalidSignatureError(WalletError, ValueError):
    """Signature or signature envelope is malformed."""
    pass


class WalletLockedError(WalletError):
    """Secret material was cleared by lock()."""
    pass


class ContainerFormatError(WalletError, ValueError):
    """Encrypted wallet document does not have the expected shape."""
    pass


class UnknownChainError(WalletError, KeyError):
    """No chain preset with this name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown chain: {name}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
