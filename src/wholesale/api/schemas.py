# src/wholesale/api/schemas.py
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wholesale.domain.compliance import (
    ComplianceCheckInput,
    ComplianceSeverity,
    DisclosurePlacement,
)
from wholesale.domain.exit_strategy import StrategyInput
from wholesale.domain.types import (
    Condition,
    DailyTaskType,
    DealGrade,
    DealStrategy,
    DistressType,
    HeatCategory,
    Motivation,
    RiskLevel,
    TierRecommendation,
)


class CamelModel(BaseModel):
    """
    Wire models are camelCase (matches the web client); Python code uses
    snake_case field names. Both are accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    @classmethod
    def from_domain(cls, obj: Any):
        return cls.model_validate(dataclasses.asdict(obj))


# --------------------------------------------
# Exit strategy
# --------------------------------------------

# ceiling on money inputs; keeps every derived metric a finite float
MAX_AMOUNT = 1e12

KnownCondition = Literal["excellent", "good", "fair", "poor"]
KnownMotivation = Literal["high", "medium", "low"]


class StrategyInputRequest(CamelModel):
    arv: float = Field(ge=0, le=MAX_AMOUNT, description="After-repair value")
    purchase_price: float = Field(ge=0, le=MAX_AMOUNT)
    repairs: float = Field(ge=0, le=MAX_AMOUNT)
    mortgage_balance: float = Field(ge=0, le=MAX_AMOUNT)
    interest_rate: float = Field(ge=0, le=30, description="Percent, e.g. 4.5")
    property_condition: KnownCondition
    seller_motivation: KnownMotivation
    seller_needs_cash: bool
    user_liquid_capital: float = Field(ge=0, le=MAX_AMOUNT)

    def to_domain(self) -> StrategyInput:
        return StrategyInput(
            arv=self.arv,
            purchase_price=self.purchase_price,
            repairs=self.repairs,
            mortgage_balance=self.mortgage_balance,
            interest_rate=self.interest_rate,
            property_condition=Condition(self.property_condition),
            seller_motivation=Motivation(self.seller_motivation),
            seller_needs_cash=self.seller_needs_cash,
            user_liquid_capital=self.user_liquid_capital,
        )


class StrategyInputOut(CamelModel):
    arv: float
    purchase_price: float
    repairs: float
    mortgage_balance: float
    interest_rate: float
    property_condition: Condition
    seller_motivation: Motivation
    seller_needs_cash: bool
    user_liquid_capital: float


class DealMetricsOut(CamelModel):
    equity: float
    total_cost: float
    spread: float
    spread_ratio: float
    equity_ratio: float
    mortgage_to_arv: float


class Tier1Out(CamelModel):
    equity_percent: float
    spread_percent: float
    passes_equity_test: bool
    recommendation: TierRecommendation


class Tier2Out(CamelModel):
    has_existing_debt: bool
    interest_rate: float
    is_low_rate: bool
    recommendation: Optional[DealStrategy] = None


class Tier3Out(CamelModel):
    is_retail_condition: bool
    wants_market_value: bool
    recommendation: Optional[DealStrategy] = None


class StrategyRecommendationOut(CamelModel):
    strategy: DealStrategy
    rank: int
    score: int
    pros: list[str]
    cons: list[str]
    requirements: list[str]
    reasons: list[str]
    estimated_profit: int
    risk_level: RiskLevel
    time_to_close: str


class ExitStrategyResponse(CamelModel):
    input: StrategyInputOut
    metrics: DealMetricsOut
    tier1_result: Tier1Out
    tier2_result: Optional[Tier2Out] = None
    tier3_result: Optional[Tier3Out] = None
    recommendations: list[StrategyRecommendationOut]
    warnings: list[str]


# --------------------------------------------
# Deal analyzer / comps
# --------------------------------------------

class AnalyzeRequest(CamelModel):
    address: str = Field(min_length=1)
    asking_price: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    mortgage_balance: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT)
    condition: Condition = Condition.unknown
    motivation: Motivation = Motivation.unknown
    wholesale_fee: float = Field(default=10_000.0, ge=0, le=MAX_AMOUNT)
    sqft: float = Field(default=1_500.0, ge=100, le=1_000_000)


class CompOut(CamelModel):
    address: str
    sale_price: float
    sale_date: str
    sqft: float
    price_per_sqft: float
    distance: float
    adjusted_value: float


class RehabEstimateOut(CamelModel):
    low: int
    medium: int
    high: int
    cost_per_sqft: float
    condition: Condition


class MAOBreakdownOut(CamelModel):
    arv: float
    arv_multiplier: float
    repairs: float
    wholesale_fee: float
    mao: float


class ProfitProjectionOut(CamelModel):
    assignment_fee: float
    estimated_profit: int
    roi: float
    holding_costs: int
    closing_costs: int


class DealAnalysisResponse(CamelModel):
    arv: float
    arv_confidence: int
    comps: list[CompOut]
    rehab_estimate: RehabEstimateOut
    mao_breakdown: MAOBreakdownOut
    grade: DealGrade
    grade_reasons: list[str]
    profit_projection: ProfitProjectionOut
    equity_percent: float
    mortgage_balance: Optional[float] = None
    asking_price: Optional[float] = None
    asking_above_mao: bool = False


# --------------------------------------------
# Compliance
# --------------------------------------------

class ComplianceCheckRequest(CamelModel):
    state: str = Field(min_length=2, max_length=2, description="2-letter state code")
    strategy: DealStrategy
    distress_indicators: list[str] = Field(default_factory=list)
    deals_this_year: int = Field(default=0, ge=0)
    property_in_foreclosure: bool = False

    @field_validator("state")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()

    def to_domain(self) -> ComplianceCheckInput:
        return ComplianceCheckInput(
            state=self.state,
            strategy=self.strategy,
            distress_indicators=list(self.distress_indicators),
            deals_this_year=self.deals_this_year,
            property_in_foreclosure=self.property_in_foreclosure,
        )


class ComplianceViolationOut(CamelModel):
    rule_id: str
    rule_name: str
    message: str
    severity: ComplianceSeverity
    remediation: str


class ComplianceWarningOut(CamelModel):
    type: str
    message: str
    learn_more_url: Optional[str] = None


class RequiredDisclosureOut(CamelModel):
    id: str
    name: str
    triggered_by: list[Union[DealStrategy, str]]
    content: str
    placement: DisclosurePlacement


class ComplianceCheckResponse(CamelModel):
    deal_id: Optional[str] = None
    state: str
    strategy: DealStrategy
    passed: bool
    violations: list[ComplianceViolationOut]
    warnings: list[ComplianceWarningOut]
    required_disclosures: list[RequiredDisclosureOut]
    checked_at: str


class StateSummary(CamelModel):
    code: str
    name: str
    has_restrictions: bool
    rules_count: int
    disclosures_count: int


class StatesResponse(CamelModel):
    states: list[StateSummary]


# --------------------------------------------
# Dashboard
# --------------------------------------------

class DashboardStatsOut(CamelModel):
    leads_this_week: int
    leads_change: float
    calls_today: int
    calls_change: float
    deals_in_pipeline: int
    deals_change: float
    revenue_this_month: float
    revenue_change: float


class PipelineStageOut(CamelModel):
    id: str
    name: str
    count: int
    value: float


class HeatAlertOut(CamelModel):
    id: str
    lead_id: str
    lead_name: str
    category: HeatCategory
    message: str
    created_at: str


class DailyTaskOut(CamelModel):
    id: str
    type: DailyTaskType
    title: str
    description: Optional[str] = None
    lead_id: Optional[str] = None
    deal_id: Optional[str] = None
    due_at: str
    completed: bool


# --------------------------------------------
# Lead heat score
# --------------------------------------------

class DistressIndicatorIn(CamelModel):
    type: DistressType
    date_recorded: datetime


class HeatScoreRequest(CamelModel):
    indicators: list[DistressIndicatorIn] = Field(default_factory=list)


class DistressIndicatorOut(CamelModel):
    type: DistressType
    weight: float
    date_recorded: datetime
    decayed_weight: float


class HeatScoreResponse(CamelModel):
    heat_score: float
    heat_category: HeatCategory
    indicators: list[DistressIndicatorOut]
