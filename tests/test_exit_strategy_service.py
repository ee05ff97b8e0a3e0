import pytest

from deal_inputs import low_rate_good_house
from wholesale.adapters.config import AppConfig
from wholesale.domain.strategy_rules import DEFAULT_THRESHOLDS
from wholesale.domain.types import DealStrategy, TierRecommendation
from wholesale.services.exit_strategy import evaluate_exit_strategy, thresholds_from_config


def test_default_config_matches_builtin_thresholds():
    assert thresholds_from_config(AppConfig()) == DEFAULT_THRESHOLDS


def test_percent_strings_are_normalized():
    cfg = AppConfig(SPREAD_THRESHOLD="8%", LOW_RATE_THRESHOLD="4.5%", EQUITY_MINIMUM=15)

    assert cfg.SPREAD_THRESHOLD == pytest.approx(0.08)
    assert cfg.EQUITY_MINIMUM == pytest.approx(0.15)
    assert cfg.LOW_RATE_THRESHOLD == pytest.approx(4.5)


def test_negative_ratio_is_rejected():
    with pytest.raises(ValueError):
        AppConfig(SPREAD_THRESHOLD=-0.1)


def test_env_overrides_reach_the_decision_table(monkeypatch):
    monkeypatch.setenv("WHOLESALE_SPREAD_THRESHOLD", "8%")
    monkeypatch.setenv("WHOLESALE_FLIP_CAPITAL_MINIMUM", "0")

    result = evaluate_exit_strategy(low_rate_good_house(), thresholds_from_config(AppConfig()))

    assert result.tier1_result.recommendation == TierRecommendation.standard
    assert result.recommendations[0].strategy == DealStrategy.assignment
