"""
Tests for address encoding and the StdSignature envelope.
"""

import base64

import bech32
import pytest

from cosmwallet import (
    Algo,
    InvalidPrefixError,
    InvalidPubkeyError,
    InvalidSignatureError,
    StdSignature,
    UnsupportedAlgorithmError,
    decode_signature,
    pubkey_to_address,
)
from cosmwallet.wallet import (
    encode_secp256k1_pubkey,
    encode_secp256k1_signature,
    raw_ed25519_pubkey_to_address,
    raw_secp256k1_pubkey_to_address,
)
from cosmwallet.wallet.crypto import ripemd160, sha256

from conftest import DEFAULT_ADDRESS, DEFAULT_PUBKEY


class TestAddress:

    def test_known_secp256k1_address(self):
        assert raw_secp256k1_pubkey_to_address(DEFAULT_PUBKEY, "cosmos") == DEFAULT_ADDRESS

    def test_address_payload_is_hash160(self):
        hrp, data = bech32.bech32_decode(DEFAULT_ADDRESS)
        assert hrp == "cosmos"
        assert bytes(bech32.convertbits(data, 5, 8, False)) == ripemd160(sha256(DEFAULT_PUBKEY))

    def test_prefix(self):
        assert raw_secp256k1_pubkey_to_address(DEFAULT_PUBKEY, "terra").startswith("terra1")

    @pytest.mark.parametrize("length", [0, 32, 65])
    def test_secp256k1_length(self, length):
        with pytest.raises(InvalidPubkeyError):
            raw_secp256k1_pubkey_to_address(bytes(length), "cosmos")

    @pytest.mark.parametrize("prefix", ["", "COSMOS", "Cosmos", "cos mos", "caf\u00e9", "a" * 84])
    def test_invalid_prefix(self, prefix):
        with pytest.raises(InvalidPrefixError):
            raw_secp256k1_pubkey_to_address(DEFAULT_PUBKEY, prefix)

    def test_longest_prefix(self):
        assert raw_ed25519_pubkey_to_address(bytes(32), "a" * 83).startswith("a" * 83 + "1")

    def test_ed25519_address(self):
        pubkey = bytes(range(32))
        address = raw_ed25519_pubkey_to_address(pubkey, "cosmosvalconspub")
        hrp, data = bech32.bech32_decode(address)
        assert hrp == "cosmosvalconspub"
        assert bytes(bech32.convertbits(data, 5, 8, False)) == sha256(pubkey)[:20]

    def test_ed25519_length(self):
        with pytest.raises(InvalidPubkeyError):
            raw_ed25519_pubkey_to_address(DEFAULT_PUBKEY, "cosmos")

    def test_dispatch_on_algo(self):
        assert pubkey_to_address(DEFAULT_PUBKEY, "cosmos", Algo.SECP256K1) == DEFAULT_ADDRESS
        assert pubkey_to_address(DEFAULT_PUBKEY, "cosmos", "secp256k1") == DEFAULT_ADDRESS
        ed = bytes(32)
        assert pubkey_to_address(ed, "cosmos", Algo.ED25519) == raw_ed25519_pubkey_to_address(ed, "cosmos")

    def test_sr25519_not_supported(self):
        with pytest.raises(UnsupportedAlgorithmError):
            pubkey_to_address(bytes(32), "cosmos", Algo.SR25519)

    def test_unknown_algo(self):
        with pytest.raises(ValueError):
            pubkey_to_address(DEFAULT_PUBKEY, "cosmos", "rsa")


class TestStdSignature:

    def test_encode_pubkey(self):
        pubkey = encode_secp256k1_pubkey(DEFAULT_PUBKEY)
        assert pubkey.to_dict() == {
            "type": "tendermint/PubKeySecp256k1",
            "value": base64.b64encode(DEFAULT_PUBKEY).decode(),
        }

    @pytest.mark.parametrize("pubkey", [bytes(33), b"\x04" + bytes(32), DEFAULT_PUBKEY[:32]])
    def test_encode_rejects_uncompressed_or_bad(self, pubkey):
        with pytest.raises(InvalidPubkeyError):
            encode_secp256k1_pubkey(pubkey)

    @pytest.mark.parametrize("length", [0, 63, 65, 72])
    def test_signature_must_be_64_bytes(self, length):
        with pytest.raises(InvalidSignatureError, match="64 bytes"):
            encode_secp256k1_signature(DEFAULT_PUBKEY, bytes(length))

    def test_decode_inverts_encode(self):
        raw = bytes(range(64))
        envelope = encode_secp256k1_signature(DEFAULT_PUBKEY, raw)
        assert decode_signature(envelope) == (DEFAULT_PUBKEY, raw)

    def test_dict_round_trip(self):
        envelope = encode_secp256k1_signature(DEFAULT_PUBKEY, bytes(64))
        assert StdSignature.from_dict(envelope.to_dict()) == envelope

    def test_from_dict_rejects_missing_fields(self):
        with pytest.raises(InvalidSignatureError):
            StdSignature.from_dict({"signature": "AA=="})

    def test_decode_rejects_other_pubkey_types(self):
        envelope = StdSignature.from_dict({
            "pub_key": {"type": "tendermint/PubKeyEd25519", "value": base64.b64encode(bytes(32)).decode()},
            "signature": base64.b64encode(bytes(64)).decode(),
        })
        with pytest.raises(InvalidSignatureError):
            decode_signature(envelope)

    def test_decode_rejects_bad_lengths(self):
        envelope = StdSignature.from_dict({
            "pub_key": {"type": "tendermint/PubKeySecp256k1", "value": base64.b64encode(DEFAULT_PUBKEY).decode()},
            "signature": base64.b64encode(bytes(63)).decode(),
        })
        with pytest.raises(InvalidSignatureError):
            decode_signature(envelope)

    def test_decode_rejects_bad_base64(self):
        envelope = StdSignature.from_dict({
            "pub_key": {"type": "tendermint/PubKeySecp256k1", "value": "not base64!"},
            "signature": base64.b64encode(bytes(64)).decode(),
        })
        with pytest.raises(InvalidSignatureError):
            decode_signature(envelope)
