"""Smoke test for the seckit demo entry point."""

import base64

import pytest

from seckit import main as demo


def test_demo_runs_with_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECKIT_SECRET_KEY", "env_secret_key_that_is_32_chars_long")
    monkeypatch.setenv("SECKIT_DB_SECRET_KEY", base64.b64encode(bytes(range(32))).decode())
    monkeypatch.setenv("SECKIT_ENV", "development")
    demo.main()


def test_demo_falls_back_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SECKIT_SECRET_KEY", raising=False)
    monkeypatch.delenv("SECKIT_DB_SECRET_KEY", raising=False)
    config = demo._load_config()
    assert config.is_prod is False
    demo.main()
