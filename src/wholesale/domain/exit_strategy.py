# src/wholesale/domain/exit_strategy.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from wholesale.domain.types import (
    Condition,
    DealStrategy,
    Motivation,
    RiskLevel,
    TierRecommendation,
)


@dataclass(frozen=True)
class StrategyInput:
    arv: float                    # after-repair value
    purchase_price: float
    repairs: float
    mortgage_balance: float
    interest_rate: float          # percent, e.g. 4.5
    property_condition: Condition # never `unknown` here
    seller_motivation: Motivation # never `unknown` here
    seller_needs_cash: bool
    user_liquid_capital: float


@dataclass(frozen=True)
class DealMetrics:
    equity: float          # arv - mortgage_balance
    total_cost: float      # purchase_price + repairs
    spread: float          # arv - total_cost
    spread_ratio: float    # spread / arv, 0 when arv == 0
    equity_ratio: float    # equity / arv, 0 when arv == 0
    mortgage_to_arv: float # mortgage_balance / arv, 0 when arv == 0


@dataclass(frozen=True)
class Tier1Result:
    equity_percent: float
    spread_percent: float
    passes_equity_test: bool
    recommendation: TierRecommendation


@dataclass(frozen=True)
class Tier2Result:
    has_existing_debt: bool
    interest_rate: float
    is_low_rate: bool
    recommendation: Optional[DealStrategy]


@dataclass(frozen=True)
class Tier3Result:
    is_retail_condition: bool
    wants_market_value: bool
    recommendation: Optional[DealStrategy]


@dataclass(frozen=True)
class StrategyRecommendation:
    strategy: DealStrategy
    rank: int
    score: int
    pros: List[str]
    cons: List[str]
    requirements: List[str]
    reasons: List[str]       # why this strategy passed its eligibility check
    estimated_profit: int
    risk_level: RiskLevel
    time_to_close: str


@dataclass(frozen=True)
class ExitStrategyAnalysis:
    input: StrategyInput
    metrics: DealMetrics
    tier1_result: Tier1Result
    tier2_result: Optional[Tier2Result]
    tier3_result: Optional[Tier3Result]
    recommendations: List[StrategyRecommendation]
    warnings: List[str]
