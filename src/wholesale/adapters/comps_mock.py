# src/wholesale/adapters/comps_mock.py
from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, List

from wholesale.adapters.logging_utils import get_logger
from wholesale.domain.finance import Comp

logger = get_logger(__name__)


@dataclass
class MockCompsConfig:
    """
    Knobs for the synthetic comp generator.

    Each template is (street, days_ago, price_band, sqft_band, min_distance, distance_band):
    price = base * (1 - band/2 + u*band), same shape for sqft and distance.
    """
    base_price_min: float = 250_000.0
    base_price_range: float = 150_000.0
    base_sqft_min: float = 1_400.0
    base_sqft_range: float = 400.0
    templates: tuple = (
        ("Oak St", 30, 0.10, 0.10, 0.3, 0.2),
        ("Maple Ave", 60, 0.20, 0.20, 0.5, 0.3),
        ("Pine Rd", 90, 0.30, 0.30, 0.7, 0.5),
        ("Elm Blvd", 45, 0.24, 0.16, 0.4, 0.4),
    )


class MockCompsProvider:
    """
    Deterministic stand-in for a sold-comps API.

    The RNG is seeded from the address, so the same address always yields
    the same comps (and therefore the same ARV) for a given as-of date.
    """

    def __init__(
        self,
        cfg: MockCompsConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.cfg = cfg or MockCompsConfig()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @staticmethod
    def _seed(address: str) -> int:
        digest = hashlib.sha256(address.strip().lower().encode("utf-8")).hexdigest()
        return int(digest[:16], 16)

    def fetch_comps(self, address: str) -> List[Comp]:
        rng = random.Random(self._seed(address))
        cfg = self.cfg
        as_of = self._clock()

        base_price = cfg.base_price_min + rng.random() * cfg.base_price_range
        base_sqft = cfg.base_sqft_min + rng.random() * cfg.base_sqft_range

        comps: List[Comp] = []
        for street, days_ago, price_band, sqft_band, min_dist, dist_band in cfg.templates:
            house_no = int(rng.random() * 9000 + 1000)
            price = round(base_price * (1 - price_band / 2 + rng.random() * price_band))
            sqft = round(base_sqft * (1 - sqft_band / 2 + rng.random() * sqft_band))
            distance = round(min_dist + rng.random() * dist_band, 2)
            comps.append(
                Comp(
                    address=f"{house_no} {street}",
                    sale_price=float(price),
                    sale_date=(as_of - timedelta(days=days_ago)).isoformat(),
                    sqft=float(sqft),
                    price_per_sqft=float(round(price / sqft)),
                    distance=distance,
                    adjusted_value=float(price),
                )
            )

        # closest first, matches the ARV weighting
        comps.sort(key=lambda c: c.distance)
        logger.debug("mock_comps_generated", extra={"context": {"address": address, "n": len(comps)}})
        return comps
