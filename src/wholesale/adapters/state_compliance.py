# src/wholesale/adapters/state_compliance.py
"""
Static wholesaling rule book for the states we have researched.

Anything not listed here is "no data", not "no rules": callers are expected
to surface that to the user rather than treat the state as clean.
"""
from __future__ import annotations

from wholesale.domain.compliance import (
    ComplianceCategory,
    ComplianceRule,
    ComplianceSeverity,
    DisclosurePlacement,
    RequiredDisclosure,
    StateCompliance,
    StrategyRestriction,
)
from wholesale.domain.types import DealStrategy

TX = StateCompliance(
    state="TX",
    state_name="Texas",
    rules=(
        ComplianceRule(
            id="tx-executory-001",
            name="Executory Contract Disclosure",
            description=(
                "Texas Property Code Chapter 5 requires specific disclosures for executory "
                "contracts (wraps, seller finance, contract for deed)"
            ),
            category=ComplianceCategory.creative_finance,
            severity=ComplianceSeverity.error,
        ),
        ComplianceRule(
            id="tx-assignment-001",
            name="Assignment Notice Requirement",
            description="Seller must be notified of intent to assign the contract",
            category=ComplianceCategory.assignment,
            severity=ComplianceSeverity.warning,
        ),
    ),
    disclosures=(
        RequiredDisclosure(
            id="tx-disc-001",
            name="Texas Property Code Chapter 5 Disclosure",
            triggered_by=(DealStrategy.seller_finance, DealStrategy.subject_to),
            content=(
                "IMPORTANT NOTICE: This is an executory contract. Under Texas Property Code "
                "Chapter 5, you have specific rights and protections. The seller must: "
                "(1) provide annual accounting statements, (2) record the contract, "
                "(3) provide copies of all documents. You have the right to cancel this "
                "contract within 14 days of signing."
            ),
            placement=DisclosurePlacement.contract,
        ),
        RequiredDisclosure(
            id="tx-disc-002",
            name="Assignment Fee Disclosure",
            triggered_by=(DealStrategy.assignment,),
            content=(
                "NOTICE: This contract may be assigned to a third party. The assignor intends "
                "to receive an assignment fee upon the sale of this property."
            ),
            placement=DisclosurePlacement.contract,
        ),
    ),
    restrictions=(
        StrategyRestriction(
            strategy=DealStrategy.seller_finance,
            allowed=True,
            conditions="Requires full Property Code Chapter 5 compliance",
            notes="High documentation burden - consider double close instead",
        ),
    ),
)

IL = StateCompliance(
    state="IL",
    state_name="Illinois",
    rules=(
        ComplianceRule(
            id="il-license-001",
            name="Real Estate License Requirement",
            description=(
                "Illinois requires a real estate license after completing more than "
                "1 wholesale deal per year"
            ),
            category=ComplianceCategory.licensing,
            severity=ComplianceSeverity.error,
        ),
    ),
    restrictions=(
        StrategyRestriction(
            strategy=DealStrategy.assignment,
            allowed=False,
            conditions="Only allowed for first deal of the year without license",
            alternative_strategy=DealStrategy.double_close,
            notes="Use double close to avoid licensing issues",
        ),
    ),
)

OK = StateCompliance(
    state="OK",
    state_name="Oklahoma",
    rules=(
        ComplianceRule(
            id="ok-predatory-001",
            name="Predatory Lending Disclosure",
            description=(
                "Oklahoma requires disclosure for creative financing to protect against "
                "predatory practices"
            ),
            category=ComplianceCategory.creative_finance,
            severity=ComplianceSeverity.warning,
        ),
    ),
    disclosures=(
        RequiredDisclosure(
            id="ok-disc-001",
            name="Oklahoma Creative Finance Disclosure",
            triggered_by=(DealStrategy.subject_to, DealStrategy.seller_finance),
            content=(
                "OKLAHOMA DISCLOSURE: This transaction involves creative financing. You are "
                "advised to seek independent legal counsel before signing. The terms of this "
                "agreement may affect your property rights and credit."
            ),
            placement=DisclosurePlacement.separate_form,
        ),
    ),
)

NC = StateCompliance(
    state="NC",
    state_name="North Carolina",
    rules=(
        ComplianceRule(
            id="nc-option-001",
            name="Option to Purchase Requirements",
            description="North Carolina has specific requirements for Option to Purchase agreements",
            category=ComplianceCategory.contract,
            severity=ComplianceSeverity.warning,
        ),
    ),
    disclosures=(
        RequiredDisclosure(
            id="nc-disc-001",
            name="NC Option Agreement Notice",
            triggered_by=("option_contract",),
            content=(
                "NOTICE: This Option to Purchase agreement must comply with North Carolina "
                "General Statutes. The optionee has the right to exercise this option within "
                "the specified time period."
            ),
            placement=DisclosurePlacement.contract,
        ),
    ),
)

CA = StateCompliance(
    state="CA",
    state_name="California",
    rules=(
        ComplianceRule(
            id="ca-equity-001",
            name="Equity Skimming Protection",
            description=(
                "California Civil Code protects homeowners from equity skimming schemes in "
                "foreclosure situations"
            ),
            category=ComplianceCategory.foreclosure,
            severity=ComplianceSeverity.error,
        ),
        ComplianceRule(
            id="ca-cancel-001",
            name="5-Day Cancellation Right",
            description="California requires a 5-day right to cancel for foreclosure purchases",
            category=ComplianceCategory.foreclosure,
            severity=ComplianceSeverity.error,
        ),
    ),
    disclosures=(
        RequiredDisclosure(
            id="ca-disc-001",
            name="California 5-Day Cancellation Notice",
            triggered_by=("foreclosure",),
            content=(
                "IMPORTANT NOTICE: You have the right to cancel this contract within 5 business "
                "days of signing. To cancel, you must provide written notice to the purchaser. "
                "This right cannot be waived. [California Civil Code Section 1695.5]"
            ),
            placement=DisclosurePlacement.separate_form,
        ),
        RequiredDisclosure(
            id="ca-disc-002",
            name="California Equity Purchaser Notice",
            triggered_by=("foreclosure",),
            content=(
                "WARNING: This property is in foreclosure. Under California law, the purchaser "
                "must: (1) provide fair market value for the property, (2) not engage in any "
                "fraudulent or deceptive practices, (3) comply with all notice requirements. "
                "Violation of these provisions may result in criminal penalties."
            ),
            placement=DisclosurePlacement.contract,
        ),
    ),
    restrictions=(
        StrategyRestriction(
            strategy=DealStrategy.subject_to,
            allowed=True,
            conditions="Extra scrutiny required for foreclosure properties",
            notes="Recommend legal review for all California foreclosure deals",
        ),
    ),
)

WA = StateCompliance(
    state="WA",
    state_name="Washington",
    rules=(
        ComplianceRule(
            id="wa-distressed-001",
            name="Distressed Home Purchaser Act",
            description="Washington RCW 61.34 regulates purchases of distressed homes",
            category=ComplianceCategory.foreclosure,
            severity=ComplianceSeverity.error,
        ),
    ),
    disclosures=(
        RequiredDisclosure(
            id="wa-disc-001",
            name="Washington Distressed Property Notice",
            triggered_by=("foreclosure", "distressed"),
            content=(
                "NOTICE TO HOMEOWNER: Under Washington State Law (RCW 61.34), you have specific "
                "rights when selling a distressed property. You may cancel this transaction "
                "within a certain time period. The purchaser must provide you with this notice "
                "in writing."
            ),
            placement=DisclosurePlacement.separate_form,
        ),
    ),
)

STATE_COMPLIANCE_MAP: dict[str, StateCompliance] = {
    sc.state: sc for sc in (TX, IL, OK, NC, CA, WA)
}


class StaticComplianceSource:
    """ComplianceSource backed by the in-module rule book."""

    def __init__(self, table: dict[str, StateCompliance] | None = None) -> None:
        self._table = table if table is not None else STATE_COMPLIANCE_MAP

    def get_state_compliance(self, state: str) -> StateCompliance | None:
        return self._table.get(state.strip().upper())

    def all_states(self) -> list[str]:
        return list(self._table)


_default_source = StaticComplianceSource()


def get_state_compliance(state: str) -> StateCompliance | None:
    return _default_source.get_state_compliance(state)


def get_all_states() -> list[str]:
    return _default_source.all_states()


def get_states_with_restrictions() -> list[str]:
    return [code for code, sc in STATE_COMPLIANCE_MAP.items() if sc.restrictions]
