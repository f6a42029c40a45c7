"""
RSA key pair generation for SSH.

Generates a fresh 2048-bit RSA key and writes it as two files:

- private key: PEM ``RSA PRIVATE KEY`` (PKCS#1, unencrypted), mode 0600
- public key: one ``ssh-rsa <base64>`` line, no comment

Every call is synchronous and independent. Calls against the same pair of
paths are not coordinated here; callers must run at most one generation per
destination pair at a time.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .config import KEY_BITS, KEY_FILE_MODE, PUBLIC_EXPONENT
from .errors import FileWriteError, KeyFormatError, KeyGenerationError, RandomSourceError

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass
class KeyPairPaths:
    private_key_path: Path
    public_key_path: Path


# =========================
# Generation and encoding
# =========================

def _generate_private_key() -> rsa.RSAPrivateKey:
    try:
        return rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT,
            key_size=KEY_BITS,
        )
    except OSError as e:
        raise RandomSourceError(str(e), e) from e
    except (ValueError, InternalError, UnsupportedAlgorithm) as e:
        raise KeyGenerationError(str(e), e) from e


def encode_private_key(private_key: rsa.RSAPrivateKey) -> bytes:
    """PEM block ``RSA PRIVATE KEY`` with the PKCS#1 DER body, no encryption."""
    try:
        return private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyFormatError(str(e), e) from e


def encode_public_key(private_key: rsa.RSAPrivateKey) -> bytes:
    """Authorized-keys line ``ssh-rsa <base64>`` terminated by a newline."""
    try:
        public_key = private_key.public_key()
        line = public_key.public_bytes(
            encoding=serialization.Encoding.OpenSSH,
            format=serialization.PublicFormat.OpenSSH,
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyFormatError(str(e), e) from e
    return line + b"\n"


# =========================
# Persistence
# =========================

def write_key_file(path: PathLike, data: bytes, mode: int = KEY_FILE_MODE) -> Path:
    """
    Create or overwrite ``path`` with ``data``.

    The file is created with ``mode``. An existing file is narrowed to ``mode``
    before anything is written to it.
    """
    target = Path(path)
    try:
        # truncate only after the mode is narrowed
        fd = os.open(target, os.O_WRONLY | os.O_CREAT, mode)
        with os.fdopen(fd, "wb") as f:
            if hasattr(os, "fchmod"):
                os.fchmod(f.fileno(), mode)
            os.ftruncate(f.fileno(), 0)
            f.write(data)
    except OSError as e:
        raise FileWriteError(target, e) from e
    return target


def generate_key_pair(private_key_path: PathLike, public_key_path: PathLike) -> KeyPairPaths:
    """
    Generate a new RSA key pair and write both halves.

    Raises RandomSourceError, KeyGenerationError, KeyFormatError or
    FileWriteError. The public key is never written when the private key
    write fails; a failed public key write leaves the private key in place.
    """
    if Path(private_key_path).resolve() == Path(public_key_path).resolve():
        raise FileWriteError(public_key_path, OSError("private and public key paths are the same"))

    LOGGER.debug("Generating %d-bit RSA key", KEY_BITS)
    private_key = _generate_private_key()

    private_text = encode_private_key(private_key)
    public_text = encode_public_key(private_key)

    private_path = write_key_file(private_key_path, private_text)
    LOGGER.info("Private key written: %s", private_path)

    public_path = write_key_file(public_key_path, public_text)
    LOGGER.info("Public key written: %s", public_path)

    return KeyPairPaths(private_key_path=private_path, public_key_path=public_path)
