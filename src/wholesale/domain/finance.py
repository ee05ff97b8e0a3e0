# src/wholesale/domain/finance.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wholesale.domain.types import Condition, DealGrade, Motivation


@dataclass(frozen=True)
class Comp:
    address: str
    sale_price: float
    sale_date: str          # ISO-8601
    sqft: float
    price_per_sqft: float
    distance: float         # miles from subject
    adjusted_value: float


@dataclass(frozen=True)
class MAOBreakdown:
    arv: float
    arv_multiplier: float
    repairs: float
    wholesale_fee: float
    mao: float


@dataclass(frozen=True)
class RehabEstimate:
    low: int
    medium: int
    high: int
    cost_per_sqft: float
    condition: Condition


@dataclass(frozen=True)
class ProfitProjection:
    assignment_fee: float
    estimated_profit: int
    roi: float              # percent, one decimal
    holding_costs: int
    closing_costs: int


@dataclass(frozen=True)
class DealGradeResult:
    grade: DealGrade
    score: int
    reasons: List[str]


# (min, max) rehab dollars per sqft
REHAB_COST_PER_SQFT: dict[Condition, Tuple[float, float]] = {
    Condition.excellent: (0.0, 10.0),
    Condition.good: (10.0, 30.0),
    Condition.fair: (25.0, 55.0),
    Condition.poor: (45.0, 85.0),
    Condition.unknown: (25.0, 55.0),
}

HOLDING_COST_RATE = 0.03
CLOSING_COST_RATE = 0.05


def calculate_mao(
    arv: float,
    repairs: float,
    wholesale_fee: float,
    arv_multiplier: float = 0.7,
) -> MAOBreakdown:
    """Maximum allowable offer: ARV x multiplier - repairs - fee, floored at 0."""
    mao = arv * arv_multiplier - repairs - wholesale_fee
    return MAOBreakdown(
        arv=arv,
        arv_multiplier=arv_multiplier,
        repairs=repairs,
        wholesale_fee=wholesale_fee,
        mao=max(0.0, mao),
    )


def calculate_equity_percent(arv: float, mortgage_balance: Optional[float]) -> float:
    if mortgage_balance is None or arv <= 0:
        return 0.0
    equity = arv - mortgage_balance
    return max(0.0, equity / arv * 100)


def calculate_deal_grade(
    equity_percent: float,
    motivation: Motivation,
    condition: Condition,
) -> DealGradeResult:
    reasons: List[str] = []
    score = 0

    if equity_percent >= 30:
        score += 40
        reasons.append("High equity (30%+)")
    elif equity_percent >= 20:
        score += 25
        reasons.append("Moderate equity (20-30%)")
    elif equity_percent >= 10:
        score += 10
        reasons.append("Low equity (10-20%)")
    else:
        reasons.append("Very low equity (<10%)")

    if motivation == Motivation.high:
        score += 35
        reasons.append("Highly motivated seller")
    elif motivation == Motivation.medium:
        score += 20
        reasons.append("Moderately motivated seller")
    elif motivation == Motivation.low:
        score += 5
        reasons.append("Low motivation")
    else:
        score += 10
        reasons.append("Motivation unknown")

    if condition in (Condition.excellent, Condition.good):
        score += 25
        reasons.append(f"Property in {condition.value} condition")
    elif condition == Condition.fair:
        score += 15
        reasons.append("Property in fair condition")
    elif condition == Condition.poor:
        score += 10
        reasons.append("Property in poor condition (higher rehab)")
    else:
        score += 12
        reasons.append("Property condition unknown")

    if score >= 80:
        grade = DealGrade.A
    elif score >= 60:
        grade = DealGrade.B
    elif score >= 40:
        grade = DealGrade.C
    else:
        grade = DealGrade.F

    return DealGradeResult(grade=grade, score=score, reasons=reasons)


def calculate_rehab_estimate(sqft: float, condition: Condition) -> RehabEstimate:
    lo, hi = REHAB_COST_PER_SQFT[condition]
    cost_per_sqft = (lo + hi) / 2
    return RehabEstimate(
        low=int(round(sqft * lo)),
        medium=int(round(sqft * cost_per_sqft)),
        high=int(round(sqft * hi)),
        cost_per_sqft=cost_per_sqft,
        condition=condition,
    )


def calculate_dscr(
    monthly_rent: float,
    vacancy_rate: float,
    piti: float,
    management_percent: float,
    maintenance_percent: float,
) -> float:
    """
    Debt-service coverage on a monthly basis.

    Management and maintenance are charged on gross rent; vacancy only
    reduces income. Returns 0.0 when there are no expenses to cover.
    """
    effective_rent = monthly_rent * (1 - vacancy_rate)
    total_expenses = piti + monthly_rent * management_percent + monthly_rent * maintenance_percent
    if total_expenses <= 0:
        return 0.0
    return effective_rent / total_expenses


def calculate_arv(comps: Sequence[Comp]) -> Tuple[float, int]:
    """
    Weighted ARV from comps (closest-first, weight 1/(i+1)) and a 0-100
    confidence that drops as the comp values spread apart.
    """
    if not comps:
        return 0.0, 0

    weights = [1 / (i + 1) for i in range(len(comps))]
    total_weight = sum(weights)
    weighted = sum(c.adjusted_value * w for c, w in zip(comps, weights))
    arv = float(round(weighted / total_weight))
    if arv <= 0:
        return 0.0, 0

    values = [c.adjusted_value for c in comps]
    dispersion = (max(values) - min(values)) / arv
    confidence = max(0.0, min(100.0, 100 - dispersion * 200))
    return arv, int(round(confidence))


def calculate_profit_projection(
    arv: float,
    mao: float,
    wholesale_fee: float,
    repairs: float,
) -> ProfitProjection:
    buyer_purchase_price = mao + wholesale_fee
    holding_costs = int(round(arv * HOLDING_COST_RATE))
    closing_costs = int(round(arv * CLOSING_COST_RATE))

    estimated_profit = arv - buyer_purchase_price - repairs - holding_costs - closing_costs
    total_investment = buyer_purchase_price + repairs + holding_costs + closing_costs
    roi = estimated_profit / total_investment * 100 if total_investment > 0 else 0.0

    return ProfitProjection(
        assignment_fee=wholesale_fee,
        estimated_profit=int(round(estimated_profit)),
        roi=round(roi, 1),
        holding_costs=holding_costs,
        closing_costs=closing_costs,
    )
