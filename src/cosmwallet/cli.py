"""
cosmwallet - Command line front end.

Entry point for the application.

Secrets are read from COSMWALLET_MNEMONIC / COSMWALLET_PASSWORD when set,
otherwise prompted for without echo. They are never passed as arguments.
"""

import argparse
import asyncio
import getpass
import json
import logging
import os
import sys
from typing import Optional

from .chains import CHAINS, get_chain
from .errors import WalletError
from .models.path import DerivationPath
from .services.logging import cleanup_old_logs, configure_logging, get_log_file_path
from .utils import load_settings
from .wallet import (
    PREHASH_SHA256,
    PREHASH_SHA512,
    Secp256k1Wallet,
    read_encrypted_wallet,
    write_encrypted_wallet,
)

logger = logging.getLogger(__name__)

MNEMONIC_ENV = "COSMWALLET_MNEMONIC"
PASSWORD_ENV = "COSMWALLET_PASSWORD"

_PREHASH_CHOICES = {"sha256": PREHASH_SHA256, "sha512": PREHASH_SHA512, "none": None}


def _read_mnemonic() -> str:
    mnemonic = os.environ.get(MNEMONIC_ENV)
    if mnemonic is None:
        mnemonic = getpass.getpass("Mnemonic: ")
    return mnemonic.strip()


def _read_password() -> str:
    password = os.environ.get(PASSWORD_ENV)
    if password is not None:
        return password

    password = getpass.getpass("Password: ")
    if getpass.getpass("Confirm password: ") != password:
        raise WalletError("Passwords do not match")
    return password


def _derivation(args) -> tuple[DerivationPath, str]:
    """Path and prefix from --chain/--account, overridden by --hd-path/--prefix."""
    chain = get_chain(args.chain)
    if args.hd_path:
        hd_path = DerivationPath.parse(args.hd_path)
    else:
        hd_path = chain.hd_path(args.account)
    return hd_path, args.prefix or chain.prefix


async def _restore(args) -> Secp256k1Wallet:
    hd_path, prefix = _derivation(args)
    return await Secp256k1Wallet.from_mnemonic(_read_mnemonic(), hd_path, prefix)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


# ============================================
# Commands
# ============================================

async def cmd_generate(args) -> int:
    hd_path, prefix = _derivation(args)
    wallet = await Secp256k1Wallet.generate(args.words, hd_path, prefix)
    [account] = await wallet.get_accounts()
    _print_json({
        "mnemonic": wallet.mnemonic,
        "hdPath": str(hd_path),
        **account.to_dict(),
    })
    wallet.lock()
    return 0


async def cmd_accounts(args) -> int:
    wallet = await _restore(args)
    accounts = await wallet.get_accounts()
    _print_json([account.to_dict() for account in accounts])
    wallet.lock()
    return 0


async def cmd_sign(args) -> int:
    wallet = await _restore(args)
    address = args.address or wallet.address
    signature = await wallet.sign(
        address,
        args.message.encode("utf-8"),
        _PREHASH_CHOICES[args.prehash],
    )
    _print_json(signature.to_dict())
    wallet.lock()
    return 0


async def cmd_save(args) -> int:
    wallet = await _restore(args)
    serialization = await wallet.save(_read_password())
    path = write_encrypted_wallet(args.out, serialization)
    print(f"Saved {wallet.address} to {path}")
    wallet.lock()
    return 0


async def cmd_inspect(args) -> int:
    encrypted = read_encrypted_wallet(args.file)
    _print_json({
        "type": encrypted.type,
        "kdf": encrypted.kdf.to_dict(),
        "encryption": encrypted.encryption.to_dict(),
        "valueLength": len(encrypted.ciphertext),
    })
    return 0


def build_parser(settings: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cosmwallet",
        description="HD signing wallet for Cosmos SDK chains",
    )
    parser.add_argument(
        "--log-level",
        default=settings["log_level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_derivation_args(sub):
        sub.add_argument("--chain", default=settings["default_chain"], choices=sorted(CHAINS))
        sub.add_argument("--account", type=int, default=0, help="Address index in the default path")
        sub.add_argument("--hd-path", help="Explicit derivation path, e.g. m/44'/118'/0'/0/0")
        sub.add_argument("--prefix", help="bech32 prefix (defaults to the chain's)")

    generate = subparsers.add_parser("generate", help="Create a new mnemonic")
    generate.add_argument("--words", type=int, default=12, choices=[12, 15, 18, 21, 24])
    add_derivation_args(generate)
    generate.set_defaults(handler=cmd_generate)

    accounts = subparsers.add_parser("accounts", help="Show the account for a mnemonic")
    add_derivation_args(accounts)
    accounts.set_defaults(handler=cmd_accounts)

    sign = subparsers.add_parser("sign", help="Sign a UTF-8 message")
    sign.add_argument("--message", required=True)
    sign.add_argument("--prehash", default="sha256", choices=sorted(_PREHASH_CHOICES))
    sign.add_argument("--address", help="Signer address (defaults to the wallet's)")
    add_derivation_args(sign)
    sign.set_defaults(handler=cmd_sign)

    save = subparsers.add_parser("save", help="Write an encrypted wallet file")
    save.add_argument("out")
    add_derivation_args(save)
    save.set_defaults(handler=cmd_save)

    inspect = subparsers.add_parser("inspect", help="Show the metadata of an encrypted wallet file")
    inspect.add_argument("file")
    inspect.set_defaults(handler=cmd_inspect)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point."""
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    # Configure logging before anything else
    retention_days = int(settings["log_retention_days"])
    log_file = get_log_file_path() if retention_days > 0 else None
    configure_logging(getattr(logging, args.log_level), log_file)
    if log_file is not None:
        cleanup_old_logs(retention_days)

    try:
        return asyncio.run(args.handler(args))
    except (WalletError, ValueError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
