# sshkeygen/cli.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .config import LOG_LEVEL, default_key_paths
from .errors import KeyVerificationError
from .messages import ERROR_DESCRIPTION, PRE_DESCRIPTION, generate_for_display
from .verify import verify_key_pair

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sshkeygen",
        description="Generate an RSA (2048 bits) SSH key pair: PEM private key + authorized-keys public key.",
    )
    p.add_argument("--private-key", default=None, help="Private key path (default: <dir>/id_rsa)")
    p.add_argument(
        "--public-key",
        default=None,
        help="Public key path (default: <private-key>.pub, or <dir>/id_rsa.pub)",
    )
    p.add_argument(
        "--output-dir",
        default=None,
        help="Destination directory (default: SSH_KEYGEN_DIR from .env, or the home directory)",
    )
    p.add_argument("--cwd", action="store_true", help="Write id_rsa / id_rsa.pub in the working directory")

    p.add_argument("--verify", action="store_true", help="Read both files back and print the fingerprint")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("-q", "--quiet", action="store_true", help="Do not print the introduction text")
    return p


def resolve_paths(args: argparse.Namespace) -> Tuple[Path, Path]:
    """
    Explicit paths win. A lone --private-key gets its public key next to it
    with a .pub suffix. Otherwise the default directory policy applies.
    """
    if args.private_key:
        private_path = Path(args.private_key)
        public_path = Path(args.public_key) if args.public_key else Path(f"{private_path}.pub")
        return private_path, public_path

    output_dir = Path(args.output_dir) if args.output_dir else None
    private_path, public_path = default_key_paths(output_dir=output_dir, use_cwd=args.cwd)
    if args.public_key:
        public_path = Path(args.public_key)
    return private_path, public_path


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.getLevelName(LOG_LEVEL)
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.WARNING
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if unknown_level:
        LOGGER.warning("Unknown SSH_KEYGEN_LOG_LEVEL %r, using WARNING", LOG_LEVEL)

    if not args.quiet:
        print(PRE_DESCRIPTION)
        print()

    try:
        private_path, public_path = resolve_paths(args)
    except RuntimeError as e:
        LOGGER.debug("Could not resolve destination directory", exc_info=True)
        print(ERROR_DESCRIPTION + str(e))
        return 1

    ok, text = generate_for_display(private_path, public_path)
    print(text)
    if not ok:
        LOGGER.debug("Key pair generation failed for %s / %s", private_path, public_path)
        return 1

    if args.verify:
        try:
            fp = verify_key_pair(private_path, public_path)
        except KeyVerificationError as e:
            LOGGER.debug("Verification failed", exc_info=True)
            print(ERROR_DESCRIPTION + str(e))
            return 1
        print(f"Fingerprint: {fp}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
