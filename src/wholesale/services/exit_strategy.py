# src/wholesale/services/exit_strategy.py
from __future__ import annotations

from wholesale.adapters.config import AppConfig, config
from wholesale.adapters.logging_utils import get_logger
from wholesale.domain.exit_strategy import ExitStrategyAnalysis, StrategyInput
from wholesale.domain.strategy_rules import StrategyThresholds, analyze_exit_strategy

logger = get_logger(__name__)


def thresholds_from_config(cfg: AppConfig = config) -> StrategyThresholds:
    return StrategyThresholds(
        spread_threshold=cfg.SPREAD_THRESHOLD,
        equity_minimum=cfg.EQUITY_MINIMUM,
        low_rate_threshold=cfg.LOW_RATE_THRESHOLD,
        high_rate_warning=cfg.HIGH_RATE_WARNING,
        retail_repair_threshold=cfg.RETAIL_REPAIR_THRESHOLD,
        flip_capital_minimum=cfg.FLIP_CAPITAL_MINIMUM,
        low_equity_warning_percent=cfg.LOW_EQUITY_WARNING_PERCENT,
    )


def evaluate_exit_strategy(
    inp: StrategyInput,
    thresholds: StrategyThresholds | None = None,
) -> ExitStrategyAnalysis:
    analysis = analyze_exit_strategy(inp, thresholds or thresholds_from_config())

    logger.info(
        "exit_strategy_evaluated",
        extra={
            "context": {
                "tier1": analysis.tier1_result.recommendation.value,
                "strategies": [r.strategy.value for r in analysis.recommendations],
                "n_warnings": len(analysis.warnings),
            }
        },
    )
    return analysis
