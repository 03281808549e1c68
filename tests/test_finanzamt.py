import pytest
from steuernummer import FinanzamtRegistry


@pytest.fixture
def registry():
    return FinanzamtRegistry(["2866", "5133", "9198"])


def test_known_number(registry):
    assert registry.is_known("5133") is True
    assert "2866" in registry


def test_unknown_number(registry):
    assert registry.is_known("5134") is False


def test_len(registry):
    assert len(registry) == 3


def test_add(registry):
    registry.add(" 1123 ")
    assert registry.is_known("1123") is True


@pytest.mark.parametrize("number", ["123", "12345", "12a4", "１２３４"])
def test_add_rejects_malformed(registry, number):
    with pytest.raises(ValueError):
        registry.add(number)


def test_from_file(tmp_path):
    path = tmp_path / "bufa.txt"
    path.write_text(
        "# Bundesfinanzamtnummern\n2866\n\n5133  # Düsseldorf-Süd\n",
        encoding="utf-8",
    )
    registry = FinanzamtRegistry.from_file(path)
    assert len(registry) == 2
    assert registry.is_known("5133") is True


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FinanzamtRegistry.from_file(tmp_path / "missing.txt")
