# src/wholesale/services/compliance.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from wholesale.adapters.logging_utils import get_logger
from wholesale.adapters.state_compliance import StaticComplianceSource
from wholesale.domain.compliance import (
    ComplianceCategory,
    ComplianceCheck,
    ComplianceCheckInput,
    ComplianceSeverity,
    ComplianceViolation,
    ComplianceWarning,
    RequiredDisclosure,
    StateCompliance,
)
from wholesale.domain.ports import ComplianceSource
from wholesale.domain.types import DealStrategy

logger = get_logger(__name__)

_default_source: ComplianceSource = StaticComplianceSource()

_FORECLOSURE_SCRUTINY_STATES = {"CA", "WA"}
_CREATIVE_FINANCE_STATES = {"TX", "OK"}
_CREATIVE_STRATEGIES = {DealStrategy.seller_finance, DealStrategy.subject_to}


def _is_triggered(
    disclosure: RequiredDisclosure,
    strategy: DealStrategy,
    property_in_foreclosure: bool,
    is_distressed: bool,
) -> bool:
    for trigger in disclosure.triggered_by:
        if trigger == strategy:
            return True
        if trigger == "foreclosure" and property_in_foreclosure:
            return True
        if trigger == "distressed" and is_distressed:
            return True
    return False


def _restriction_checks(
    sc: StateCompliance,
    strategy: DealStrategy,
) -> Tuple[List[ComplianceViolation], List[ComplianceWarning]]:
    violations: List[ComplianceViolation] = []
    warnings: List[ComplianceWarning] = []

    for restriction in sc.restrictions:
        if restriction.strategy != strategy:
            continue
        if not restriction.allowed:
            remediation = (
                f"Use {restriction.alternative_strategy.value} instead."
                if restriction.alternative_strategy
                else "Consult with a local real estate attorney."
            )
            violations.append(
                ComplianceViolation(
                    rule_id=f"{sc.state.lower()}-restriction-{strategy.value}",
                    rule_name=f"{strategy.value} Restriction",
                    message=f"{strategy.value} is restricted in {sc.state_name}. {restriction.conditions or ''}".strip(),
                    severity=ComplianceSeverity.error,
                    remediation=remediation,
                )
            )
        elif restriction.conditions:
            warnings.append(
                ComplianceWarning(
                    type="conditional_strategy",
                    message=f"{strategy.value} is conditionally allowed: {restriction.conditions}",
                )
            )

    return violations, warnings


def check_compliance(
    inp: ComplianceCheckInput,
    source: ComplianceSource | None = None,
    now: Optional[datetime] = None,
) -> ComplianceCheck:
    """
    Check one strategy against one state's wholesaling rules.

    Unknown states pass with a `no_data` warning: we do not know the rules,
    which is different from knowing there are none.
    """
    source = source or _default_source
    state = inp.state.strip().upper()
    strategy = inp.strategy
    checked_at = (now or datetime.now(timezone.utc)).isoformat()

    sc = source.get_state_compliance(state)
    if sc is None:
        return ComplianceCheck(
            deal_id=None,
            state=state,
            strategy=strategy,
            passed=True,
            violations=[],
            warnings=[
                ComplianceWarning(
                    type="no_data",
                    message=(
                        f"No compliance data available for {state}. Proceed with caution "
                        "and consult local regulations."
                    ),
                )
            ],
            required_disclosures=[],
            checked_at=checked_at,
        )

    violations: List[ComplianceViolation] = []
    warnings: List[ComplianceWarning] = []

    # 1) Illinois licensing trigger
    if state == "IL" and strategy == DealStrategy.assignment and inp.deals_this_year >= 1:
        violations.append(
            ComplianceViolation(
                rule_id="il-license-001",
                rule_name="Real Estate License Requirement",
                message=(
                    "Illinois requires a real estate license after completing 1 wholesale deal "
                    f"per year. You have completed {inp.deals_this_year} deals this year."
                ),
                severity=ComplianceSeverity.error,
                remediation=(
                    "Use double close instead of assignment, or obtain an Illinois real "
                    "estate license."
                ),
            )
        )

    # 2) Foreclosure purchase statutes
    if state in _FORECLOSURE_SCRUTINY_STATES and inp.property_in_foreclosure:
        warnings.append(
            ComplianceWarning(
                type="foreclosure_scrutiny",
                message=(
                    f"{sc.state_name} has strict regulations on foreclosure purchases. Extra "
                    "documentation and disclosures required."
                ),
            )
        )
        for rule in sc.rules:
            if rule.category == ComplianceCategory.foreclosure and rule.severity == ComplianceSeverity.error:
                violations.append(
                    ComplianceViolation(
                        rule_id=rule.id,
                        rule_name=rule.name,
                        message=rule.description,
                        severity=rule.severity,
                        remediation=(
                            "Ensure all required disclosures are provided and cancellation "
                            "rights are honored."
                        ),
                    )
                )

    # 3) Executory-contract style creative finance
    if strategy in _CREATIVE_STRATEGIES and state in _CREATIVE_FINANCE_STATES:
        for rule in sc.rules:
            if rule.category == ComplianceCategory.creative_finance and rule.severity == ComplianceSeverity.error:
                warnings.append(
                    ComplianceWarning(
                        type="creative_finance",
                        message=f"{rule.name}: {rule.description}",
                    )
                )

    # 4) Per-strategy restrictions
    r_violations, r_warnings = _restriction_checks(sc, strategy)
    violations.extend(r_violations)
    warnings.extend(r_warnings)

    # 5) Disclosures
    is_distressed = bool(inp.distress_indicators)
    required = [
        d
        for d in sc.disclosures
        if _is_triggered(d, strategy, inp.property_in_foreclosure, is_distressed)
    ]

    result = ComplianceCheck(
        deal_id=None,
        state=state,
        strategy=strategy,
        passed=not violations,
        violations=violations,
        warnings=warnings,
        required_disclosures=required,
        checked_at=checked_at,
    )

    if violations:
        logger.info(
            "compliance_violations",
            extra={"context": {"state": state, "strategy": strategy.value, "rule_ids": [v.rule_id for v in violations]}},
        )
    return result


def is_strategy_allowed_in_state(
    state: str,
    strategy: DealStrategy,
    source: ComplianceSource | None = None,
) -> Tuple[bool, Optional[str]]:
    sc = (source or _default_source).get_state_compliance(state)
    if sc is None:
        return True, None

    restriction = next((r for r in sc.restrictions if r.strategy == strategy), None)
    if restriction is None:
        return True, None

    if restriction.allowed:
        return True, restriction.conditions
    return False, restriction.notes or "Strategy not allowed in this state"


def get_required_disclosures_for_strategy(
    state: str,
    strategy: DealStrategy,
    property_in_foreclosure: bool = False,
    source: ComplianceSource | None = None,
) -> List[RequiredDisclosure]:
    sc = (source or _default_source).get_state_compliance(state)
    if sc is None:
        return []
    return [
        d
        for d in sc.disclosures
        if _is_triggered(d, strategy, property_in_foreclosure, is_distressed=False)
    ]
