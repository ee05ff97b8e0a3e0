# src/wholesale/domain/heat.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from wholesale.domain.types import DistressType, HeatCategory

DISTRESS_WEIGHTS: dict[DistressType, int] = {
    DistressType.foreclosure: 10,
    DistressType.nod: 10,
    DistressType.utility_shutoff: 10,
    DistressType.demolition: 9,
    DistressType.code_violation: 8,
    DistressType.tax_delinquency: 7,
    DistressType.probate: 7,
    DistressType.eviction: 6,
    DistressType.bankruptcy: 5,
    DistressType.divorce: 5,
    DistressType.vacancy: 4,
    DistressType.expired_listing: 3,
    DistressType.absentee_owner: 2,
}

FRESH_WINDOW = timedelta(days=90)
STALE_DECAY = 0.5

CRITICAL_MIN_SCORE = 15.0
HIGH_PRIORITY_MIN_SCORE = 8.0


@dataclass(frozen=True)
class DistressIndicator:
    type: DistressType
    weight: float
    date_recorded: datetime
    decayed_weight: float


def _as_utc(ts: datetime) -> datetime:
    # naive timestamps are treated as UTC
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def calculate_time_decay(date_recorded: datetime, now: Optional[datetime] = None) -> float:
    now = _as_utc(now or datetime.now(timezone.utc))
    age = now - _as_utc(date_recorded)
    return 1.0 if age < FRESH_WINDOW else STALE_DECAY


def calculate_heat_score(indicators: Iterable[DistressIndicator]) -> float:
    return float(sum(i.decayed_weight for i in indicators))


def calculate_heat_score_from_raw(
    raw: Sequence[Tuple[DistressType, datetime]],
    now: Optional[datetime] = None,
) -> Tuple[float, List[DistressIndicator]]:
    now = now or datetime.now(timezone.utc)
    processed: List[DistressIndicator] = []
    for distress_type, recorded in raw:
        weight = float(DISTRESS_WEIGHTS[distress_type])
        processed.append(
            DistressIndicator(
                type=distress_type,
                weight=weight,
                date_recorded=recorded,
                decayed_weight=weight * calculate_time_decay(recorded, now),
            )
        )
    return calculate_heat_score(processed), processed


def get_heat_category(score: float) -> HeatCategory:
    if score >= CRITICAL_MIN_SCORE:
        return HeatCategory.CRITICAL
    if score >= HIGH_PRIORITY_MIN_SCORE:
        return HeatCategory.HIGH_PRIORITY
    return HeatCategory.STREET_WORK
