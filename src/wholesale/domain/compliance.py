# src/wholesale/domain/compliance.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from wholesale.domain.types import DealStrategy


class ComplianceCategory(str, Enum):
    licensing = "licensing"
    disclosure = "disclosure"
    contract = "contract"
    foreclosure = "foreclosure"
    creative_finance = "creative_finance"
    assignment = "assignment"


class ComplianceSeverity(str, Enum):
    error = "error"
    warning = "warning"
    info = "info"


class DisclosurePlacement(str, Enum):
    contract = "contract"
    separate_form = "separate_form"
    verbal = "verbal"


# Disclosures can be triggered by a strategy or by a situation tag such as
# "foreclosure", "distressed" or "option_contract".
Trigger = Union[DealStrategy, str]


@dataclass(frozen=True)
class ComplianceRule:
    id: str
    name: str
    description: str
    category: ComplianceCategory
    severity: ComplianceSeverity


@dataclass(frozen=True)
class RequiredDisclosure:
    id: str
    name: str
    triggered_by: Tuple[Trigger, ...]
    content: str
    placement: DisclosurePlacement


@dataclass(frozen=True)
class StrategyRestriction:
    strategy: DealStrategy
    allowed: bool
    conditions: Optional[str] = None
    alternative_strategy: Optional[DealStrategy] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class StateCompliance:
    state: str
    state_name: str
    rules: Tuple[ComplianceRule, ...] = ()
    disclosures: Tuple[RequiredDisclosure, ...] = ()
    restrictions: Tuple[StrategyRestriction, ...] = ()


@dataclass(frozen=True)
class ComplianceCheckInput:
    state: str
    strategy: DealStrategy
    distress_indicators: List[str] = field(default_factory=list)
    deals_this_year: int = 0
    property_in_foreclosure: bool = False


@dataclass(frozen=True)
class ComplianceViolation:
    rule_id: str
    rule_name: str
    message: str
    severity: ComplianceSeverity
    remediation: str


@dataclass(frozen=True)
class ComplianceWarning:
    type: str
    message: str
    learn_more_url: Optional[str] = None


@dataclass(frozen=True)
class ComplianceCheck:
    deal_id: Optional[str]
    state: str
    strategy: DealStrategy
    passed: bool
    violations: List[ComplianceViolation]
    warnings: List[ComplianceWarning]
    required_disclosures: List[RequiredDisclosure]
    checked_at: str         # ISO-8601 UTC
