from __future__ import annotations

import os
from typing import Optional, Union


class KeyPairError(RuntimeError):
    """Base error; keeps the underlying exception as ``cause``."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RandomSourceError(KeyPairError):
    """The OS random source failed while drawing key material."""


class KeyGenerationError(KeyPairError):
    """RSA key generation failed."""


class KeyFormatError(KeyPairError):
    """The key material could not be derived or encoded."""


class FileWriteError(KeyPairError):
    def __init__(self, path: Union[str, os.PathLike], cause: OSError):
        self.path = os.fspath(path)
        super().__init__(f"{self.path}: {cause}", cause)


class KeyVerificationError(KeyPairError):
    """Written key files could not be read back or do not match."""
