"""
Signatures - The StdSignature envelope understood by Cosmos SDK verifiers.

A secp256k1 signature travels as a fixed 64-byte r||s value next to the
compressed public key, both base64 encoded.
"""

import base64
import binascii
from dataclasses import dataclass

from ..errors import InvalidPubkeyError, InvalidSignatureError

PUBKEY_TYPE_SECP256K1 = "tendermint/PubKeySecp256k1"
SECP256K1_SIGNATURE_SIZE = 64


@dataclass(frozen=True)
class PubKey:
    type: str
    value: str      # base64

    def to_dict(self) -> dict:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class StdSignature:
    pub_key: PubKey
    signature: str  # base64

    def to_dict(self) -> dict:
        return {"pub_key": self.pub_key.to_dict(), "signature": self.signature}

    @classmethod
    def from_dict(cls, data: dict) -> "StdSignature":
        try:
            pub_key = data["pub_key"]
            return cls(
                pub_key=PubKey(type=pub_key["type"], value=pub_key["value"]),
                signature=data["signature"],
            )
        except (KeyError, TypeError) as e:
            raise InvalidSignatureError(f"Malformed signature envelope: {e}") from e


def encode_secp256k1_pubkey(pubkey: bytes) -> PubKey:
    if len(pubkey) != 33 or pubkey[0] not in (0x02, 0x03):
        raise InvalidPubkeyError(
            "Public key must be compressed secp256k1, i.e. 33 bytes starting with 0x02 or 0x03"
        )
    return PubKey(type=PUBKEY_TYPE_SECP256K1, value=base64.b64encode(pubkey).decode("ascii"))


def encode_secp256k1_signature(pubkey: bytes, signature: bytes) -> StdSignature:
    """
    Wrap a raw signature and its public key into a StdSignature.

    Args:
        pubkey: a compressed secp256k1 public key
        signature: 64-byte fixed length r||s
    """
    if len(signature) != SECP256K1_SIGNATURE_SIZE:
        raise InvalidSignatureError(
            "Signature must be 64 bytes long. Cosmos SDK uses a 2x32 byte fixed length "
            "encoding for the secp256k1 signature integers r and s."
        )
    return StdSignature(
        pub_key=encode_secp256k1_pubkey(pubkey),
        signature=base64.b64encode(signature).decode("ascii"),
    )


def _b64decode(value: str, what: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise InvalidSignatureError(f"Invalid base64 in {what}") from e


def decode_signature(signature: StdSignature) -> tuple[bytes, bytes]:
    """
    Unwrap a StdSignature.

    Returns: (pubkey, signature) raw bytes
    """
    if signature.pub_key.type != PUBKEY_TYPE_SECP256K1:
        raise InvalidSignatureError(f"Unsupported pubkey type: {signature.pub_key.type}")

    pubkey = _b64decode(signature.pub_key.value, "pubkey")
    raw = _b64decode(signature.signature, "signature")
    if len(pubkey) != 33:
        raise InvalidPubkeyError(f"Invalid Secp256k1 pubkey length (compressed): {len(pubkey)}")
    if len(raw) != SECP256K1_SIGNATURE_SIZE:
        raise InvalidSignatureError(f"Invalid signature length: {len(raw)}")
    return pubkey, raw
