"""
Tests for environment-based rule configuration.
"""

import pytest
from pydantic import ValidationError

from banco_imobiliario import GameRules
from banco_imobiliario.settings import RulesSettings, get_rules_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in RulesSettings.model_fields:
        monkeypatch.delenv(f"BANCO_{name.upper()}", raising=False)
    get_rules_settings.cache_clear()
    yield
    get_rules_settings.cache_clear()


def test_defaults_match_standard_rules():
    assert RulesSettings().to_rules() == GameRules()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BANCO_STARTING_BALANCE", "1500")
    monkeypatch.setenv("BANCO_JAIL_FINE", "100")

    rules = RulesSettings().to_rules()

    assert rules.starting_balance == 1500
    assert rules.jail_fine == 100
    assert rules.passing_start_bonus == 200


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("BANCO_MAX_PLAYERS=4\n")

    assert RulesSettings().to_rules().max_players == 4


@pytest.mark.parametrize(
    "name,value",
    [
        ("BANCO_SALE_REFUND_RATE", "1.5"),
        ("BANCO_JAIL_FINE", "-1"),
        ("BANCO_STARTING_BALANCE", "lots"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        RulesSettings()


def test_seat_limits_checked(monkeypatch):
    monkeypatch.setenv("BANCO_MIN_PLAYERS", "5")
    monkeypatch.setenv("BANCO_MAX_PLAYERS", "3")

    with pytest.raises(ValidationError):
        RulesSettings()


def test_settings_are_cached():
    assert get_rules_settings() is get_rules_settings()


def test_house_limit_is_not_configurable(monkeypatch):
    monkeypatch.setenv("BANCO_MAX_HOUSES", "2")

    assert "max_houses" not in RulesSettings.model_fields
    assert RulesSettings().to_rules().max_houses == 4
