import pytest

from hexline import messages


@pytest.fixture(autouse=True)
def reset_messages(monkeypatch):
    """the CLI sets module flags; put them back after each test"""
    monkeypatch.setattr(messages, "PRINTS", True)
    monkeypatch.setattr(messages, "DEBUG", False)
    monkeypatch.setattr(messages, "no_color", False)


@pytest.fixture
def twenty_bytes(tmp_path):
    path = tmp_path / "twenty.bin"
    path.write_bytes(b"ABCDEFGHIJKLMNOPQRST")
    return path
