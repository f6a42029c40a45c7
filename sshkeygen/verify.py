from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import paramiko

from .errors import KeyVerificationError
from .keypair import PathLike

LOGGER = logging.getLogger(__name__)


def load_private_key(private_key_path: PathLike) -> paramiko.RSAKey:
    try:
        return paramiko.RSAKey.from_private_key_file(str(private_key_path))
    except (OSError, paramiko.SSHException) as e:
        raise KeyVerificationError(f"{private_key_path}: {e}", e) from e


def read_public_key(public_key_path: PathLike) -> Tuple[str, str]:
    """
    Read an authorized-keys file holding a single line.
    Returns (algorithm, base64 blob); a trailing comment is ignored.
    """
    try:
        text = Path(public_key_path).read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as e:
        raise KeyVerificationError(f"{public_key_path}: {e}", e) from e

    lines = [ln for ln in text.splitlines() if ln.strip()]
    if len(lines) != 1:
        raise KeyVerificationError(f"{public_key_path}: expected one key line, found {len(lines)}")
    parts = lines[0].split()
    if len(parts) < 2:
        raise KeyVerificationError(f"{public_key_path}: malformed key line")
    return parts[0], parts[1]


def fingerprint(key: paramiko.PKey) -> str:
    """OpenSSH style SHA256 fingerprint, e.g. ``SHA256:abc...``."""
    return key.fingerprint


def verify_key_pair(private_key_path: PathLike, public_key_path: PathLike) -> str:
    """
    Check that both files describe the same key pair.
    Returns the fingerprint of the pair, raises KeyVerificationError otherwise.
    """
    key = load_private_key(private_key_path)
    algorithm, blob = read_public_key(public_key_path)

    if algorithm != key.get_name():
        raise KeyVerificationError(
            f"{public_key_path}: algorithm {algorithm!r} does not match private key {key.get_name()!r}"
        )
    if blob != key.get_base64():
        raise KeyVerificationError(f"{public_key_path}: public key does not match {private_key_path}")

    fp = fingerprint(key)
    LOGGER.debug("Key pair verified: %s", fp)
    return fp
