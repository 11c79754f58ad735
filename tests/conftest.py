"""Shared fixtures for the validator tests."""

import pytest

from emirates_kit import kit_config
from emirates_kit.validators import emirates_id


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config at an empty temp location for every test."""
    config_path = tmp_path / "config.json"
    monkeypatch.setenv(kit_config.CONFIG_ENV_VAR, str(config_path))
    kit_config.reset_config()
    yield config_path
    kit_config.reset_config()


def make_emirates_id(birth_year: int, sequence: str = "1234567") -> str:
    """Build a valid dash-formatted Emirates ID for a birth year."""
    base14 = f"784{birth_year}{sequence}"
    check = emirates_id.compute_check_digit(base14)
    return f"784-{birth_year}-{sequence}-{check}"


@pytest.fixture
def id_factory():
    return make_emirates_id
