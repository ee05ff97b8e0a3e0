from wholesale.adapters.comps_mock import MockCompsProvider
from wholesale.domain.finance import Comp
from wholesale.domain.types import Condition, DealGrade, Motivation
from wholesale.services.deal_analyzer import analyze_deal


class FixedComps:
    def __init__(self, values):
        self._values = values

    def fetch_comps(self, address):
        return [
            Comp(
                address=f"{i} Comp Ln",
                sale_price=v,
                sale_date="2026-01-15T00:00:00+00:00",
                sqft=1500,
                price_per_sqft=round(v / 1500),
                distance=0.1 * (i + 1),
                adjusted_value=v,
            )
            for i, v in enumerate(self._values)
        ]


def test_mock_comps_are_stable_per_address(fixed_now):
    provider = MockCompsProvider(clock=lambda: fixed_now)

    first = provider.fetch_comps("123 Main St")
    again = provider.fetch_comps("  123 MAIN ST ")
    other = provider.fetch_comps("456 Side Ave")

    assert first == again
    assert first != other
    assert len(first) == 4
    assert [c.distance for c in first] == sorted(c.distance for c in first)
    assert all(c.adjusted_value > 0 for c in first)


def test_analyze_with_known_comps():
    result = analyze_deal(
        address="1 Known St",
        condition=Condition.fair,
        motivation=Motivation.high,
        sqft=1_000,
        wholesale_fee=10_000,
        mortgage_balance=60_000,
        comps_provider=FixedComps([200_000, 200_000]),
    )

    assert result.arv == 200_000
    assert result.arv_confidence == 100
    assert result.rehab_estimate.medium == 40_000
    assert result.mao_breakdown.repairs == 40_000
    # 0.7 * 200k - 40k - 10k
    assert round(result.mao_breakdown.mao) == 90_000
    assert result.equity_percent == 70
    assert result.grade == DealGrade.A
    assert result.profit_projection.holding_costs == 6_000


def test_analyze_without_mortgage_grades_on_zero_equity():
    result = analyze_deal(
        address="2 Known St",
        motivation=Motivation.low,
        comps_provider=FixedComps([150_000]),
    )

    assert result.equity_percent == 0
    assert result.mortgage_balance is None
    assert result.grade == DealGrade.F


def test_analyze_is_deterministic_for_an_address(fixed_now):
    provider = MockCompsProvider(clock=lambda: fixed_now)

    a = analyze_deal(address="789 Oak", comps_provider=provider)
    b = analyze_deal(address="789 Oak", comps_provider=provider)

    assert a == b
    assert a.arv > 0
    assert 0 <= a.arv_confidence <= 100


def test_asking_price_above_mao_is_reported():
    result = analyze_deal(
        address="3 Known St",
        condition=Condition.fair,
        sqft=1_000,
        asking_price=120_000,
        comps_provider=FixedComps([200_000]),
    )

    assert result.asking_above_mao is True
    assert result.grade_reasons[-1] == "Asking price ($120,000) is above MAO ($90,000)"


def test_asking_price_under_mao_adds_no_reason():
    result = analyze_deal(
        address="3 Known St",
        condition=Condition.fair,
        sqft=1_000,
        asking_price=80_000,
        comps_provider=FixedComps([200_000]),
    )

    assert result.asking_above_mao is False
    assert len(result.grade_reasons) == 3
