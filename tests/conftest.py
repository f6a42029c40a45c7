import pytest


@pytest.fixture(autouse=True)
def _no_configured_dir(monkeypatch):
    monkeypatch.delenv("SSH_KEYGEN_DIR", raising=False)


@pytest.fixture
def key_paths(tmp_path):
    return tmp_path / "id_rsa", tmp_path / "id_rsa.pub"
