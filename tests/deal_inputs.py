# tests/deal_inputs.py
"""
Canned StrategyInput builders shared by the exit-strategy tests.

Each builder takes keyword overrides so a test can nudge one field
without restating the whole deal.
"""
from dataclasses import replace

from wholesale.domain.exit_strategy import StrategyInput
from wholesale.domain.types import Condition, Motivation


def motivated_seller_fair_house(**overrides) -> StrategyInput:
    """
    30% spread, 60% equity, 5% loan. Classic assignment.
    """
    base = StrategyInput(
        arv=200_000,
        purchase_price=120_000,
        repairs=20_000,
        mortgage_balance=80_000,
        interest_rate=5.0,
        property_condition=Condition.fair,
        seller_motivation=Motivation.high,
        seller_needs_cash=True,
        user_liquid_capital=5_000,
    )
    return replace(base, **overrides)


def underwater_poor_house(**overrides) -> StrategyInput:
    """
    Negative spread, ~6.7% equity, 8% loan. Nothing works.
    """
    base = StrategyInput(
        arv=150_000,
        purchase_price=150_000,
        repairs=30_000,
        mortgage_balance=140_000,
        interest_rate=8.0,
        property_condition=Condition.poor,
        seller_motivation=Motivation.low,
        seller_needs_cash=False,
        user_liquid_capital=0,
    )
    return replace(base, **overrides)


def low_rate_good_house(**overrides) -> StrategyInput:
    """
    10% spread, 25% equity on a 3.5% loan, light repairs. Creative path.
    """
    base = StrategyInput(
        arv=200_000,
        purchase_price=170_000,
        repairs=10_000,
        mortgage_balance=150_000,
        interest_rate=3.5,
        property_condition=Condition.good,
        seller_motivation=Motivation.low,
        seller_needs_cash=False,
        user_liquid_capital=0,
    )
    return replace(base, **overrides)


def free_and_clear_house(**overrides) -> StrategyInput:
    """
    No mortgage at all, thin spread. Seller-finance territory.
    """
    base = StrategyInput(
        arv=200_000,
        purchase_price=175_000,
        repairs=5_000,
        mortgage_balance=0,
        interest_rate=0.0,
        property_condition=Condition.fair,
        seller_motivation=Motivation.medium,
        seller_needs_cash=False,
        user_liquid_capital=0,
    )
    return replace(base, **overrides)
