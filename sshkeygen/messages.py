from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from .config import KEY_BITS, default_key_paths
from .keypair import PathLike, generate_key_pair

PRE_DESCRIPTION = (
    "This tool can be used to generate an SSH public/private key pair.\n"
    f"Keys are generated using the RSA algorithm and are {KEY_BITS} bits in length.\n"
    "\n"
    "The resulting key pair can be imported for use in programs\n"
    "such as FileZilla, as well as from the command line."
)

POST_DESCRIPTION = (
    "Key pair has been generated successfully.\n"
    "Please find the files below:\n"
    "\n"
    "Private key: {private_key_path}\n"
    "Public key: {public_key_path}"
)

ERROR_DESCRIPTION = "Error generating key pair.\nPlease find error details below:\n\n"


def generate_for_display(
    private_key_path: Optional[PathLike] = None,
    public_key_path: Optional[PathLike] = None,
) -> Tuple[bool, str]:
    """
    Run one generation and return (ok, text) ready to show to the user.

    Without paths, the configured default directory is used. Passing only one
    of the two paths is a programming error.
    """
    if (private_key_path is None) != (public_key_path is None):
        raise ValueError("private_key_path and public_key_path must be given together")

    try:
        if private_key_path is None:
            private_key_path, public_key_path = default_key_paths()
        result = generate_key_pair(private_key_path, public_key_path)
    except RuntimeError as e:  # KeyPairError, or Path.home() failing
        return False, ERROR_DESCRIPTION + str(e)

    return True, describe_paths(result.private_key_path, result.public_key_path)


def describe_paths(private_key_path: PathLike, public_key_path: PathLike) -> str:
    return POST_DESCRIPTION.format(
        private_key_path=Path(private_key_path),
        public_key_path=Path(public_key_path),
    )
