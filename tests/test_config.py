import pytest

from config import _get_bool, _get_int, _get_list


def test_get_list(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, ,http://b.test")
    assert _get_list("ALLOWED_ORIGINS") == ["http://a.test", "http://b.test"]


def test_get_list_fallback(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    assert _get_list("ALLOWED_ORIGINS", "*") == ["*"]


@pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("0", False), ("", False)])
def test_get_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("DEV_LOGGING", raw)
    assert _get_bool("DEV_LOGGING") is expected


def test_get_int(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert _get_int("PORT", "3000") == 8080
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(RuntimeError):
        _get_int("PORT", "3000")
