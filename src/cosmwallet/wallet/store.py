"""
Wallet Store - Encrypted wallet documents on disk.

Files are written atomically and readable by the owner only. Reading
returns the parsed envelope; nothing is decrypted here.
"""

import logging
import os
from pathlib import Path

from .container import EncryptedWallet

logger = logging.getLogger(__name__)

# Secure file permissions (Unix only)
SECURE_FILE_MODE = 0o600  # Owner read/write only


def set_secure_permissions(filepath: Path) -> None:
    """
    Set restrictive file permissions on Unix systems.

    Sets file to mode 0600 (owner read/write only) to protect wallet data.
    No-op on Windows (NTFS uses ACLs, not Unix permissions).
    """
    if os.name == 'posix':
        os.chmod(filepath, SECURE_FILE_MODE)


def write_encrypted_wallet(filepath: str | Path, serialization: str) -> Path:
    """
    Save an encrypted wallet document.

    The document is validated first so a malformed string never replaces
    a good file.
    """
    filepath = Path(filepath)
    EncryptedWallet.from_json(serialization)

    filepath.parent.mkdir(parents=True, exist_ok=True)

    temp_path = filepath.with_suffix(filepath.suffix + '.tmp')
    # Mode only applies on creation; set_secure_permissions covers a stale temp file
    fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, SECURE_FILE_MODE)
    with os.fdopen(fd, 'w', encoding='utf-8') as f:
        f.write(serialization)
    set_secure_permissions(temp_path)

    temp_path.replace(filepath)
    logger.info(f"Wrote encrypted wallet to {filepath}")
    return filepath


def read_encrypted_wallet(filepath: str | Path) -> EncryptedWallet:
    """
    Load and validate an encrypted wallet document.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ContainerFormatError: If the file is not a v1 container
    """
    filepath = Path(filepath)
    with open(filepath, 'r', encoding='utf-8') as f:
        return EncryptedWallet.from_json(f.read())
