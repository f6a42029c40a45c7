# sshkeygen/config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load .env even when the tool runs from another folder
def _load_dotenv_from_ancestors() -> Optional[Path]:
    candidates = [Path.cwd(), *Path(__file__).resolve().parents]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
            return env_path
    load_dotenv()
    return None


_ENV_PATH = _load_dotenv_from_ancestors()

# Fixed key parameters
KEY_BITS = 2048
PUBLIC_EXPONENT = 65537
KEY_FILE_MODE = 0o600

PRIVATE_KEY_FILE = os.getenv("SSH_KEYGEN_PRIVATE_KEY_FILE", "id_rsa")
PUBLIC_KEY_FILE = os.getenv("SSH_KEYGEN_PUBLIC_KEY_FILE", "id_rsa.pub")
LOG_LEVEL = os.getenv("SSH_KEYGEN_LOG_LEVEL", "WARNING").strip().upper()


def default_output_dir(use_cwd: bool = False) -> Path:
    """
    Directory used when the caller gives no explicit paths.

    Working directory if use_cwd, else SSH_KEYGEN_DIR, else the user's home.
    Path.home() raises RuntimeError when the home directory cannot be resolved.
    """
    if use_cwd:
        return Path.cwd()
    configured = os.getenv("SSH_KEYGEN_DIR", "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path.home()


def default_key_paths(output_dir: Optional[Path] = None, use_cwd: bool = False) -> Tuple[Path, Path]:
    base = Path(output_dir) if output_dir is not None else default_output_dir(use_cwd=use_cwd)
    return base / PRIVATE_KEY_FILE, base / PUBLIC_KEY_FILE
