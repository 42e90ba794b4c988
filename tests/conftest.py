"""
Pytest fixtures for SynapseFi helper tests.

Every test gets an isolated environment: no project .env is loaded and the
contract / timezone variables start unset.
"""

from __future__ import annotations

import os

import pytest

ENV_KEYS = (
    "CREDIT_PASSPORT_ADDRESS",
    "VITE_CREDIT_PASSPORT_ADDRESS",
    "SYNAPSE_TOKEN_ADDRESS",
    "VITE_SYNAPSE_TOKEN_ADDRESS",
    "SYNAPSE_DISPLAY_TZ",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point .env loading at an empty temp file and clear config variables."""
    import synapsefi.config.env as env

    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("", encoding="utf-8")
    monkeypatch.setattr(env, "_ENV_PATH", env_file)
    yield env_file
    # load_dotenv writes os.environ directly, outside monkeypatch
    for key in ENV_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def valid_address() -> str:
    return "0xAbCdEf0123456789abcdef0123456789ABCDEF01"
