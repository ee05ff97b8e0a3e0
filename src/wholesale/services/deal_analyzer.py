from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from wholesale.adapters.comps_mock import MockCompsProvider
from wholesale.adapters.config import config
from wholesale.adapters.logging_utils import get_logger
from wholesale.domain.finance import (
    Comp,
    MAOBreakdown,
    ProfitProjection,
    RehabEstimate,
    calculate_arv,
    calculate_deal_grade,
    calculate_equity_percent,
    calculate_mao,
    calculate_profit_projection,
    calculate_rehab_estimate,
)
from wholesale.domain.ports import CompsProvider
from wholesale.domain.types import Condition, DealGrade, Motivation

logger = get_logger(__name__)

_default_comps: CompsProvider = MockCompsProvider()


@dataclass(frozen=True)
class DealAnalysis:
    arv: float
    arv_confidence: int
    comps: List[Comp]
    rehab_estimate: RehabEstimate
    mao_breakdown: MAOBreakdown
    grade: DealGrade
    grade_reasons: List[str]
    profit_projection: ProfitProjection
    equity_percent: float
    mortgage_balance: Optional[float]
    asking_price: Optional[float]
    asking_above_mao: bool = False


def analyze_deal(
    *,
    address: str,
    condition: Condition = Condition.unknown,
    motivation: Motivation = Motivation.unknown,
    sqft: float = 1500.0,
    wholesale_fee: float | None = None,
    mortgage_balance: float | None = None,
    asking_price: float | None = None,
    comps_provider: CompsProvider | None = None,
    arv_multiplier: float | None = None,
) -> DealAnalysis:
    """
    Quick wholesale underwriting for a single address.

    Flow: comps -> ARV -> rehab (medium band) -> MAO -> equity -> grade -> profit.
    """
    provider = comps_provider or _default_comps
    fee = config.DEFAULT_WHOLESALE_FEE if wholesale_fee is None else wholesale_fee
    multiplier = config.DEFAULT_ARV_MULTIPLIER if arv_multiplier is None else arv_multiplier

    comps = provider.fetch_comps(address)
    arv, confidence = calculate_arv(comps)

    rehab = calculate_rehab_estimate(sqft, condition)
    repairs = float(rehab.medium)

    mao = calculate_mao(arv, repairs, fee, arv_multiplier=multiplier)
    equity_percent = calculate_equity_percent(arv, mortgage_balance)
    grade = calculate_deal_grade(equity_percent, motivation, condition)
    profit = calculate_profit_projection(arv, mao.mao, fee, repairs)

    reasons = list(grade.reasons)
    asking_above_mao = asking_price is not None and mao.mao > 0 and asking_price > mao.mao
    if asking_above_mao:
        reasons.append(f"Asking price (${asking_price:,.0f}) is above MAO (${mao.mao:,.0f})")
        logger.info(
            "asking_above_mao",
            extra={"context": {"address": address, "asking_price": asking_price, "mao": mao.mao}},
        )

    return DealAnalysis(
        arv=arv,
        arv_confidence=confidence,
        comps=comps,
        rehab_estimate=rehab,
        mao_breakdown=mao,
        grade=grade.grade,
        grade_reasons=reasons,
        profit_projection=profit,
        equity_percent=equity_percent,
        mortgage_balance=mortgage_balance,
        asking_price=asking_price,
        asking_above_mao=asking_above_mao,
    )
