"""Generate an RSA key pair and write it in SSH-compatible formats."""

from .errors import (
    FileWriteError,
    KeyFormatError,
    KeyGenerationError,
    KeyPairError,
    KeyVerificationError,
    RandomSourceError,
)
from .keypair import KeyPairPaths, generate_key_pair

__all__ = [
    "FileWriteError",
    "KeyFormatError",
    "KeyGenerationError",
    "KeyPairError",
    "KeyPairPaths",
    "KeyVerificationError",
    "RandomSourceError",
    "generate_key_pair",
]
