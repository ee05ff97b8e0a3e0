from wholesale.adapters.state_compliance import (
    StaticComplianceSource,
    get_all_states,
    get_state_compliance,
    get_states_with_restrictions,
)
from wholesale.domain.compliance import ComplianceCheckInput
from wholesale.domain.types import DealStrategy
from wholesale.services.compliance import (
    check_compliance,
    get_required_disclosures_for_strategy,
    is_strategy_allowed_in_state,
)


def _check(state, strategy, fixed_now, **kwargs):
    inp = ComplianceCheckInput(
        state=state,
        strategy=strategy,
        distress_indicators=kwargs.pop("distress_indicators", []),
        deals_this_year=kwargs.pop("deals_this_year", 0),
        property_in_foreclosure=kwargs.pop("property_in_foreclosure", False),
    )
    return check_compliance(inp, now=fixed_now)


def test_unknown_state_passes_with_no_data_warning(fixed_now):
    result = _check("ZZ", DealStrategy.assignment, fixed_now)

    assert result.passed is True
    assert result.state == "ZZ"
    assert [w.type for w in result.warnings] == ["no_data"]
    assert result.required_disclosures == []
    assert result.checked_at == fixed_now.isoformat()


def test_illinois_repeat_assignment_needs_a_license(fixed_now):
    result = _check("IL", DealStrategy.assignment, fixed_now, deals_this_year=2)

    assert result.passed is False
    assert [v.rule_id for v in result.violations] == [
        "il-license-001",
        "il-restriction-assignment",
    ]
    assert "completed 2 deals this year" in result.violations[0].message
    assert result.violations[1].remediation == "Use double_close instead."


def test_illinois_first_assignment_still_hits_the_restriction(fixed_now):
    result = _check("IL", DealStrategy.assignment, fixed_now)

    assert [v.rule_id for v in result.violations] == ["il-restriction-assignment"]


def test_illinois_double_close_is_clean(fixed_now):
    result = _check("IL", DealStrategy.double_close, fixed_now, deals_this_year=5)

    assert result.passed is True
    assert result.violations == []
    assert result.warnings == []


def test_california_foreclosure_subject_to(fixed_now):
    result = _check("CA", DealStrategy.subject_to, fixed_now, property_in_foreclosure=True)

    assert result.passed is False
    assert [v.rule_id for v in result.violations] == ["ca-equity-001", "ca-cancel-001"]
    assert [w.type for w in result.warnings] == ["foreclosure_scrutiny", "conditional_strategy"]
    assert [d.id for d in result.required_disclosures] == ["ca-disc-001", "ca-disc-002"]


def test_california_without_foreclosure_is_clean(fixed_now):
    result = _check("CA", DealStrategy.assignment, fixed_now)

    assert result.passed is True
    assert result.required_disclosures == []


def test_texas_seller_finance_warns_but_passes(fixed_now):
    result = _check("tx", DealStrategy.seller_finance, fixed_now)

    assert result.state == "TX"
    assert result.passed is True
    assert [w.type for w in result.warnings] == ["creative_finance", "conditional_strategy"]
    assert [d.id for d in result.required_disclosures] == ["tx-disc-001"]


def test_texas_assignment_needs_fee_disclosure(fixed_now):
    result = _check("TX", DealStrategy.assignment, fixed_now)

    assert [d.id for d in result.required_disclosures] == ["tx-disc-002"]
    assert result.warnings == []


def test_oklahoma_rule_is_only_a_warning_severity(fixed_now):
    result = _check("OK", DealStrategy.subject_to, fixed_now)

    assert result.passed is True
    assert result.warnings == []
    assert [d.id for d in result.required_disclosures] == ["ok-disc-001"]


def test_washington_distressed_seller_triggers_notice(fixed_now):
    result = _check("WA", DealStrategy.assignment, fixed_now, distress_indicators=["vacancy"])

    assert result.passed is True
    assert [d.id for d in result.required_disclosures] == ["wa-disc-001"]


def test_is_strategy_allowed_in_state():
    assert is_strategy_allowed_in_state("IL", DealStrategy.assignment) == (
        False,
        "Use double close to avoid licensing issues",
    )
    assert is_strategy_allowed_in_state("TX", DealStrategy.seller_finance) == (
        True,
        "Requires full Property Code Chapter 5 compliance",
    )
    assert is_strategy_allowed_in_state("TX", DealStrategy.assignment) == (True, None)
    assert is_strategy_allowed_in_state("ZZ", DealStrategy.assignment) == (True, None)


def test_required_disclosures_ignore_distress():
    ca = get_required_disclosures_for_strategy("CA", DealStrategy.assignment, property_in_foreclosure=True)

    assert [d.id for d in ca] == ["ca-disc-001", "ca-disc-002"]
    assert get_required_disclosures_for_strategy("WA", DealStrategy.assignment) == []
    assert get_required_disclosures_for_strategy("ZZ", DealStrategy.assignment) == []


def test_state_rule_book():
    assert get_all_states() == ["TX", "IL", "OK", "NC", "CA", "WA"]
    assert get_states_with_restrictions() == ["TX", "IL", "CA"]
    assert get_state_compliance(" nc ").state_name == "North Carolina"
    assert get_state_compliance("NY") is None


def test_custom_rule_book_source(fixed_now):
    source = StaticComplianceSource({"TX": get_state_compliance("TX")})
    inp = ComplianceCheckInput(
        state="IL",
        strategy=DealStrategy.assignment,
        distress_indicators=[],
        deals_this_year=3,
        property_in_foreclosure=False,
    )

    result = check_compliance(inp, source=source, now=fixed_now)

    assert result.passed is True
    assert result.warnings[0].type == "no_data"
