"""
Tests for the signing protocol: access control, prehash handling,
signature shape and verification.
"""

import base64
import hashlib

import pytest

from cosmwallet import (
    AddressNotFoundError,
    Secp256k1Wallet,
    UnsupportedPrehashError,
    decode_signature,
)
from cosmwallet.wallet import hdwallet, prehash
from cosmwallet.wallet.crypto import verify_signature
from cosmwallet.wallet.signature import PUBKEY_TYPE_SECP256K1

from conftest import DEFAULT_ADDRESS, DEFAULT_PUBKEY

SECP256K1_HALF_ORDER = 0x7FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF5D576E7357A4501DDFE92F46681B20A0


def _raw(signature) -> bytes:
    return base64.b64decode(signature.signature)


class TestPrehash:

    def test_none_passes_through(self):
        assert prehash(b"hello", None) == b"hello"

    def test_sha256(self):
        assert prehash(b"hello", "sha256") == hashlib.sha256(b"hello").digest()

    def test_sha512(self):
        assert prehash(b"hello", "sha512") == hashlib.sha512(b"hello").digest()

    @pytest.mark.parametrize("prehash_type", ["SHA256", "md5", "keccak256", ""])
    def test_unknown(self, prehash_type):
        with pytest.raises(UnsupportedPrehashError):
            prehash(b"hello", prehash_type)


class TestSign:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prehash_type", [None, "sha256", "sha512"])
    async def test_signature_is_64_bytes(self, wallet, prehash_type):
        signature = await wallet.sign(DEFAULT_ADDRESS, b"some message", prehash_type)
        assert len(_raw(signature)) == 64

    @pytest.mark.asyncio
    async def test_envelope(self, wallet):
        signature = await wallet.sign(DEFAULT_ADDRESS, b"hello")
        envelope = signature.to_dict()
        assert envelope["pub_key"] == {
            "type": PUBKEY_TYPE_SECP256K1,
            "value": base64.b64encode(DEFAULT_PUBKEY).decode(),
        }
        pubkey, raw = decode_signature(signature)
        assert pubkey == DEFAULT_PUBKEY
        assert len(raw) == 64

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prehash_type", [None, "sha256", "sha512"])
    async def test_signature_verifies(self, wallet, prehash_type):
        message = b"\x00\x01 arbitrary bytes \xff"
        signature = await wallet.sign(DEFAULT_ADDRESS, message, prehash_type)
        assert verify_signature(_raw(signature), prehash(message, prehash_type), DEFAULT_PUBKEY)

    @pytest.mark.asyncio
    async def test_signature_does_not_verify_other_message(self, wallet):
        signature = await wallet.sign(DEFAULT_ADDRESS, b"hello")
        assert not verify_signature(_raw(signature), prehash(b"hellp", "sha256"), DEFAULT_PUBKEY)

    @pytest.mark.asyncio
    async def test_deterministic(self, wallet):
        a = await wallet.sign(DEFAULT_ADDRESS, b"hello")
        b = await wallet.sign(DEFAULT_ADDRESS, b"hello")
        assert a == b

    @pytest.mark.asyncio
    async def test_low_s(self, wallet):
        for i in range(8):
            signature = await wallet.sign(DEFAULT_ADDRESS, f"message {i}".encode())
            s = int.from_bytes(_raw(signature)[32:], "big")
            assert s <= SECP256K1_HALF_ORDER

    @pytest.mark.asyncio
    async def test_default_prehash_is_sha256(self, wallet):
        default = await wallet.sign(DEFAULT_ADDRESS, b"hello")
        explicit = await wallet.sign(DEFAULT_ADDRESS, b"hello", "sha256")
        assert default == explicit

    @pytest.mark.asyncio
    async def test_prehash_changes_signature(self, wallet):
        sha256 = await wallet.sign(DEFAULT_ADDRESS, b"hello", "sha256")
        sha512 = await wallet.sign(DEFAULT_ADDRESS, b"hello", "sha512")
        assert sha256.signature != sha512.signature

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prehash_type", [None, "sha256", "sha512"])
    async def test_bytes_reaching_the_curve(self, wallet, monkeypatch, prehash_type):
        seen = []
        original = hdwallet.create_signature

        def spy(message_hash, private_key):
            seen.append(message_hash)
            return original(message_hash, private_key)

        monkeypatch.setattr(hdwallet, "create_signature", spy)
        message = b"the quick brown fox"
        await wallet.sign(DEFAULT_ADDRESS, message, prehash_type)

        expected = {
            None: message,
            "sha256": hashlib.sha256(message).digest(),
            "sha512": hashlib.sha512(message).digest(),
        }[prehash_type]
        assert seen == [expected]

    @pytest.mark.asyncio
    async def test_empty_unhashed_message(self, wallet):
        with pytest.raises(ValueError, match="Message hash must not be empty"):
            await wallet.sign(DEFAULT_ADDRESS, b"", None)

    @pytest.mark.asyncio
    async def test_empty_message_with_prehash(self, wallet):
        signature = await wallet.sign(DEFAULT_ADDRESS, b"")
        assert verify_signature(_raw(signature), hashlib.sha256(b"").digest(), DEFAULT_PUBKEY)

    @pytest.mark.asyncio
    async def test_unknown_prehash(self, wallet):
        with pytest.raises(UnsupportedPrehashError):
            await wallet.sign(DEFAULT_ADDRESS, b"hello", "sha3")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("address", [
        "cosmos1pkptre7fdkl6gfrzlesjjvhxhlc3r4gmmk8rs6",
        "osmo1jhg0e7s6gn44tfc5k37kr04sznyhedtc9rzys5",
        "",
        DEFAULT_ADDRESS.upper(),
    ])
    async def test_foreign_address(self, wallet, address):
        with pytest.raises(AddressNotFoundError, match="not found in wallet"):
            await wallet.sign(address, b"hello")

    @pytest.mark.asyncio
    async def test_foreign_address_produces_no_signature(self, wallet, monkeypatch):
        calls = []
        monkeypatch.setattr(hdwallet, "create_signature", lambda *args: calls.append(args))
        with pytest.raises(AddressNotFoundError):
            await wallet.sign("cosmos1pkptre7fdkl6gfrzlesjjvhxhlc3r4gmmk8rs6", b"hello")
        assert calls == []


class TestExampleScenario:

    @pytest.mark.asyncio
    async def test_generate_sign_verify(self):
        wallet = await Secp256k1Wallet.generate(12)
        [account] = await wallet.get_accounts()
        assert account.address.startswith("cosmos1")

        signature = await wallet.sign(account.address, "hello".encode("utf-8"), "sha256")
        pubkey, raw = decode_signature(signature)

        assert len(raw) == 64
        assert pubkey == account.pubkey
        assert verify_signature(raw, hashlib.sha256(b"hello").digest(), account.pubkey)
