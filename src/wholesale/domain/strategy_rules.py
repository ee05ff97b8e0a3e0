# src/wholesale/domain/strategy_rules.py
"""
Exit-strategy decision table.

The deal is run through three tiers:

  1. equity/spread test   -> standard | creative | pass
  2. existing-debt test   -> subject_to | morby_method | seller_finance (creative only)
  3. retail-condition test -> novation (creative only)

Strategies that pass their predicate are ranked by a static score; strategies
that fail are left out of `recommendations` (the tier results say why).
Warnings are collected independently of which strategies survived.

Everything here is pure: same input, same output, no config reads, no I/O.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from wholesale.domain.exit_strategy import (
    DealMetrics,
    ExitStrategyAnalysis,
    StrategyInput,
    StrategyRecommendation,
    Tier1Result,
    Tier2Result,
    Tier3Result,
)
from wholesale.domain.types import (
    Condition,
    DealStrategy,
    Motivation,
    RiskLevel,
    TierRecommendation,
)


@dataclass(frozen=True)
class StrategyThresholds:
    spread_threshold: float = 0.20            # spread / ARV for a standard deal
    equity_minimum: float = 0.10              # equity / ARV floor for high-rate deals
    low_rate_threshold: float = 5.0           # percent
    high_rate_warning: float = 8.0            # percent
    retail_repair_threshold: float = 15_000.0
    flip_capital_minimum: float = 10_000.0
    low_equity_warning_percent: float = 15.0


DEFAULT_THRESHOLDS = StrategyThresholds()

# metric ratios are clamped to +/- this many multiples of ARV
RATIO_LIMIT = 1e6


@dataclass(frozen=True)
class _StrategyProfile:
    score: int
    pros: Tuple[str, ...]
    cons: Tuple[str, ...]
    requirements: Tuple[str, ...]
    risk_level: RiskLevel
    time_to_close: str
    profit_share: float               # share of the spread we expect to keep
    profit_cap: Optional[float] = None


_PROFILES: dict[DealStrategy, _StrategyProfile] = {
    DealStrategy.assignment: _StrategyProfile(
        score=90,
        pros=("Fastest closing", "Lowest risk", "No capital required", "Simple transaction"),
        cons=("Lower profit margin", "Buyer must qualify"),
        requirements=("Assignable contract", "Buyer lined up"),
        risk_level=RiskLevel.low,
        time_to_close="2-4 weeks",
        profit_share=0.3,
        profit_cap=15_000.0,
    ),
    DealStrategy.subject_to: _StrategyProfile(
        score=75,
        pros=("Keep existing low rate", "Low down payment", "No new financing needed"),
        cons=("Due-on-sale clause risk", "Property management required", "Seller stays on loan"),
        requirements=("Seller trust", "Existing mortgage assumable", "Title company experience"),
        risk_level=RiskLevel.medium,
        time_to_close="2-3 weeks",
        profit_share=0.5,
    ),
    DealStrategy.morby_method: _StrategyProfile(
        score=70,
        pros=("$0 down possible", "Seller gets immediate cash", "Keep low rate mortgage"),
        cons=("Complex structure", "Requires education", "Seller must understand"),
        requirements=("Motivated seller", "Low rate existing loan", "Experienced title company"),
        risk_level=RiskLevel.medium,
        time_to_close="3-4 weeks",
        profit_share=0.4,
    ),
    DealStrategy.seller_finance: _StrategyProfile(
        score=68,
        pros=("Flexible terms", "No bank qualification", "Negotiable interest rate"),
        cons=("Seller must own free & clear", "Monthly payments continue", "Default risk"),
        requirements=("Free & clear property", "Seller willing to carry note", "Proper documentation"),
        risk_level=RiskLevel.medium,
        time_to_close="2-4 weeks",
        profit_share=0.5,
    ),
    DealStrategy.novation: _StrategyProfile(
        score=65,
        pros=("Access retail buyers", "Higher price possible", "Seller stays motivated"),
        cons=("Longer timeline", "Seller cooperation needed", "Market dependent"),
        requirements=("Retail-ready property", "Signed novation agreement", "Realtor partnership"),
        risk_level=RiskLevel.medium,
        time_to_close="60-90 days",
        profit_share=0.6,
    ),
    DealStrategy.double_close: _StrategyProfile(
        score=60,
        pros=("Highest profit potential", "Control the deal", "Privacy on assignment fee"),
        cons=("Capital intensive", "Two closings required", "Higher transaction costs"),
        requirements=("Transactional funding or cash", "Title company experience", "End buyer confirmed"),
        risk_level=RiskLevel.high,
        time_to_close="3-6 months",
        profit_share=0.8,
    ),
    DealStrategy.wholetail: _StrategyProfile(
        score=55,
        pros=("Access retail market", "Higher profit than wholesale", "Light rehab only"),
        cons=("Holding costs", "Capital required", "Market risk"),
        requirements=("$10K+ liquid capital", "Light rehab capability", "Market knowledge"),
        risk_level=RiskLevel.high,
        time_to_close="3-6 months",
        profit_share=0.8,
    ),
}

_RETAIL_CONDITIONS = {Condition.excellent, Condition.good}


def _usd(value: float) -> str:
    return f"${value:,.0f}"


def _ratio(numerator: float, arv: float) -> float:
    # a near-zero ARV can push the quotient to +/-inf
    if arv <= 0:
        return 0.0
    return max(-RATIO_LIMIT, min(RATIO_LIMIT, numerator / arv))


def compute_metrics(inp: StrategyInput) -> DealMetrics:
    equity = inp.arv - inp.mortgage_balance
    total_cost = inp.purchase_price + inp.repairs
    spread = inp.arv - total_cost
    return DealMetrics(
        equity=equity,
        total_cost=total_cost,
        spread=spread,
        spread_ratio=_ratio(spread, inp.arv),
        equity_ratio=_ratio(equity, inp.arv),
        mortgage_to_arv=_ratio(inp.mortgage_balance, inp.arv),
    )


def _tier1(inp: StrategyInput, m: DealMetrics, t: StrategyThresholds) -> Tier1Result:
    passes_equity_test = True
    if m.spread_ratio >= t.spread_threshold:
        recommendation = TierRecommendation.standard
    elif m.equity_ratio < t.equity_minimum and inp.interest_rate > t.low_rate_threshold:
        recommendation = TierRecommendation.pass_
        passes_equity_test = False
    else:
        recommendation = TierRecommendation.creative

    return Tier1Result(
        equity_percent=m.equity_ratio * 100,
        spread_percent=m.spread_ratio * 100,
        passes_equity_test=passes_equity_test,
        recommendation=recommendation,
    )


def _tier2(inp: StrategyInput, t: StrategyThresholds) -> Tier2Result:
    has_existing_debt = inp.mortgage_balance > 0
    is_low_rate = inp.interest_rate < t.low_rate_threshold

    recommendation: Optional[DealStrategy] = None
    if has_existing_debt and is_low_rate:
        recommendation = DealStrategy.morby_method if inp.seller_needs_cash else DealStrategy.subject_to
    elif not has_existing_debt:
        recommendation = DealStrategy.seller_finance

    return Tier2Result(
        has_existing_debt=has_existing_debt,
        interest_rate=inp.interest_rate,
        is_low_rate=is_low_rate,
        recommendation=recommendation,
    )


def _tier3(inp: StrategyInput, t: StrategyThresholds) -> Tier3Result:
    is_retail_condition = inp.property_condition in _RETAIL_CONDITIONS
    recommendation = (
        DealStrategy.novation
        if inp.repairs < t.retail_repair_threshold and is_retail_condition
        else None
    )
    return Tier3Result(
        is_retail_condition=is_retail_condition,
        wants_market_value=inp.seller_motivation == Motivation.low,
        recommendation=recommendation,
    )


def _estimated_profit(profile: _StrategyProfile, spread: float) -> int:
    profit = spread * profile.profit_share
    if profile.profit_cap is not None:
        profit = min(profit, profile.profit_cap)
    return int(round(max(0.0, profit)))


def _build(strategy: DealStrategy, reasons: List[str], spread: float) -> StrategyRecommendation:
    profile = _PROFILES[strategy]
    return StrategyRecommendation(
        strategy=strategy,
        rank=0,
        score=profile.score,
        pros=list(profile.pros),
        cons=list(profile.cons),
        requirements=list(profile.requirements),
        reasons=reasons,
        estimated_profit=_estimated_profit(profile, spread),
        risk_level=profile.risk_level,
        time_to_close=profile.time_to_close,
    )


def _debt_reasons(inp: StrategyInput, tier2: Tier2Result, t: StrategyThresholds) -> List[str]:
    if not tier2.has_existing_debt:
        return ["No existing mortgage - seller owns the property free and clear"]
    reasons = [
        f"Existing loan at {inp.interest_rate:g}% is below the {t.low_rate_threshold:g}% low-rate threshold",
    ]
    if inp.seller_needs_cash:
        reasons.append("Seller needs cash at closing")
    else:
        reasons.append("Seller does not need cash at closing")
    return reasons


def _recommendations(
    inp: StrategyInput,
    m: DealMetrics,
    tier1: Tier1Result,
    tier2: Optional[Tier2Result],
    tier3: Optional[Tier3Result],
    t: StrategyThresholds,
) -> List[StrategyRecommendation]:
    picked: List[Tuple[DealStrategy, List[str]]] = []
    has_capital = inp.user_liquid_capital >= t.flip_capital_minimum
    condition = inp.property_condition.value

    if tier1.recommendation == TierRecommendation.standard:
        picked.append((
            DealStrategy.assignment,
            [
                f"Spread of {tier1.spread_percent:.1f}% meets the "
                f"{t.spread_threshold * 100:.0f}% assignment threshold",
                "No buyer capital required to assign the contract",
            ],
        ))
        if inp.property_condition != Condition.poor and has_capital:
            picked.append((
                DealStrategy.wholetail,
                [
                    f"Spread of {tier1.spread_percent:.1f}% leaves room for a retail resale",
                    f"Property in {condition} condition needs only light rehab",
                    f"Liquid capital of {_usd(inp.user_liquid_capital)} covers the "
                    f"{_usd(t.flip_capital_minimum)} holding minimum",
                ],
            ))

    if tier2 is not None and tier2.recommendation is not None:
        picked.append((tier2.recommendation, _debt_reasons(inp, tier2, t)))

    if tier3 is not None and tier3.recommendation is not None:
        if all(s != DealStrategy.novation for s, _ in picked):
            reasons = [
                f"Property in {condition} condition is retail-ready",
                f"Repairs of {_usd(inp.repairs)} are under the "
                f"{_usd(t.retail_repair_threshold)} retail threshold",
            ]
            if tier3.wants_market_value:
                reasons.append("Low-motivation seller is holding out for market value")
            picked.append((DealStrategy.novation, reasons))

    if has_capital and all(s != DealStrategy.double_close for s, _ in picked):
        picked.append((
            DealStrategy.double_close,
            [
                f"Liquid capital of {_usd(inp.user_liquid_capital)} covers the "
                f"{_usd(t.flip_capital_minimum)} transactional minimum",
            ],
        ))

    built = [_build(strategy, reasons, m.spread) for strategy, reasons in picked]
    # sorted() is stable, so equal scores keep insertion order
    ordered = sorted(built, key=lambda r: -r.score)
    return [replace(r, rank=i) for i, r in enumerate(ordered, start=1)]


def _warnings(
    inp: StrategyInput,
    m: DealMetrics,
    tier1: Tier1Result,
    recommendations: List[StrategyRecommendation],
    t: StrategyThresholds,
) -> List[str]:
    warnings: List[str] = []

    if tier1.recommendation == TierRecommendation.pass_:
        warnings.append("Deal has low equity and high interest rate - consider passing")

    if m.spread < 0:
        warnings.append(
            f"Negative spread: purchase price plus repairs ({_usd(m.total_cost)}) "
            f"exceeds ARV ({_usd(inp.arv)})"
        )
    elif m.spread == 0:
        warnings.append(
            f"Zero spread: purchase price plus repairs ({_usd(m.total_cost)}) "
            f"equals ARV - no margin for assignment or resale"
        )

    if inp.mortgage_balance > inp.arv:
        warnings.append(
            f"Negative equity: mortgage balance ({_usd(inp.mortgage_balance)}) "
            f"exceeds ARV ({_usd(inp.arv)})"
        )

    if inp.interest_rate > t.high_rate_warning:
        warnings.append(
            f"High interest rate ({inp.interest_rate:g}%) makes Subject-To less attractive"
        )

    if inp.user_liquid_capital < t.flip_capital_minimum:
        warnings.append(
            "Wholetail/Double-Close strategies hidden due to insufficient capital "
            f"({_usd(inp.user_liquid_capital)} < {_usd(t.flip_capital_minimum)})"
        )

    if not recommendations:
        warnings.append("No viable exit strategies found for this deal")

    if tier1.equity_percent < t.low_equity_warning_percent:
        warnings.append("Low equity position - creative financing may be required")

    return warnings


def analyze_exit_strategy(
    inp: StrategyInput,
    thresholds: StrategyThresholds = DEFAULT_THRESHOLDS,
) -> ExitStrategyAnalysis:
    """
    Classify which exit strategies fit a deal.

    Total over any input that passed boundary validation: a dead deal comes
    back as an empty `recommendations` list plus warnings, never an exception.
    """
    metrics = compute_metrics(inp)
    tier1 = _tier1(inp, metrics, thresholds)

    tier2: Optional[Tier2Result] = None
    tier3: Optional[Tier3Result] = None
    if tier1.recommendation == TierRecommendation.creative:
        tier2 = _tier2(inp, thresholds)
        tier3 = _tier3(inp, thresholds)

    recommendations = _recommendations(inp, metrics, tier1, tier2, tier3, thresholds)
    warnings = _warnings(inp, metrics, tier1, recommendations, thresholds)

    return ExitStrategyAnalysis(
        input=inp,
        metrics=metrics,
        tier1_result=tier1,
        tier2_result=tier2,
        tier3_result=tier3,
        recommendations=recommendations,
        warnings=warnings,
    )
