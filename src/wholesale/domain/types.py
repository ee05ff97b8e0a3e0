# src/wholesale/domain/types.py
from __future__ import annotations

from enum import Enum


class DealStrategy(str, Enum):
    assignment = "assignment"
    double_close = "double_close"
    wholetail = "wholetail"
    subject_to = "subject_to"
    morby_method = "morby_method"
    novation = "novation"
    seller_finance = "seller_finance"


class Condition(str, Enum):
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"
    unknown = "unknown"


class Motivation(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"
    unknown = "unknown"


class DealGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    F = "F"


class RiskLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TierRecommendation(str, Enum):
    standard = "standard"
    creative = "creative"
    pass_ = "pass"


class HeatCategory(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH_PRIORITY = "HIGH_PRIORITY"
    STREET_WORK = "STREET_WORK"


class DistressType(str, Enum):
    foreclosure = "foreclosure"
    nod = "nod"
    utility_shutoff = "utility_shutoff"
    demolition = "demolition"
    code_violation = "code_violation"
    tax_delinquency = "tax_delinquency"
    probate = "probate"
    eviction = "eviction"
    bankruptcy = "bankruptcy"
    divorce = "divorce"
    vacancy = "vacancy"
    expired_listing = "expired_listing"
    absentee_owner = "absentee_owner"


class DailyTaskType(str, Enum):
    call = "call"
    follow_up = "follow_up"
    review = "review"
    other = "other"
