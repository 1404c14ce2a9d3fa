"""Tests for environment-driven settings."""

from config import Settings


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).cors_origins == [
        "http://localhost:5173",
        "http://localhost:3000",
    ]


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://app.example.edu, https://admin.example.edu,")
    assert Settings(_env_file=None).cors_origins == [
        "https://app.example.edu",
        "https://admin.example.edu",
    ]


def test_cors_origins_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://app.example.edu"]')
    assert Settings(_env_file=None).cors_origins == ["https://app.example.edu"]
