import base64
import hashlib

import paramiko
import pytest

from sshkeygen.errors import KeyVerificationError
from sshkeygen.keypair import generate_key_pair
from sshkeygen.verify import fingerprint, load_private_key, read_public_key, verify_key_pair


@pytest.fixture
def generated(key_paths):
    generate_key_pair(*key_paths)
    return key_paths


def test_paramiko_reads_generated_pair(generated):
    private_path, public_path = generated

    key = load_private_key(private_path)
    algorithm, blob = read_public_key(public_path)

    assert isinstance(key, paramiko.RSAKey)
    assert key.get_bits() == 2048
    assert algorithm == "ssh-rsa"
    assert blob == key.get_base64()


def test_verify_returns_sha256_fingerprint(generated):
    private_path, public_path = generated

    fp = verify_key_pair(private_path, public_path)

    blob = public_path.read_text().split()[1]
    expected = base64.b64encode(hashlib.sha256(base64.b64decode(blob)).digest()).decode().rstrip("=")
    assert fp == "SHA256:" + expected
    assert fp == fingerprint(load_private_key(private_path))


def test_verify_detects_mismatched_pair(generated, tmp_path):
    private_path, _ = generated
    other_private, other_public = tmp_path / "other", tmp_path / "other.pub"
    generate_key_pair(other_private, other_public)

    with pytest.raises(KeyVerificationError, match="does not match"):
        verify_key_pair(private_path, other_public)


def test_verify_accepts_trailing_comment(generated):
    private_path, public_path = generated
    public_path.write_text(public_path.read_text().rstrip("\n") + " user@host\n")

    assert verify_key_pair(private_path, public_path).startswith("SHA256:")


def test_verify_rejects_other_algorithm(generated):
    private_path, public_path = generated
    blob = public_path.read_text().split()[1]
    public_path.write_text(f"ssh-ed25519 {blob}\n")

    with pytest.raises(KeyVerificationError, match="algorithm"):
        verify_key_pair(private_path, public_path)


def test_missing_private_key(tmp_path):
    with pytest.raises(KeyVerificationError) as excinfo:
        load_private_key(tmp_path / "absent")

    assert "absent" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, OSError)


def test_garbage_private_key(tmp_path):
    path = tmp_path / "id_rsa"
    path.write_text("not a key\n")

    with pytest.raises(KeyVerificationError):
        load_private_key(path)


@pytest.mark.parametrize("content", ["", "ssh-rsa\n", "ssh-rsa AAAA\nssh-rsa BBBB\n"])
def test_malformed_public_key_file(tmp_path, content):
    path = tmp_path / "id_rsa.pub"
    path.write_text(content)

    with pytest.raises(KeyVerificationError):
        read_public_key(path)
