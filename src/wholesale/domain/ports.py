# src/wholesale/domain/ports.py
from __future__ import annotations

from typing import Protocol

from wholesale.domain.compliance import StateCompliance
from wholesale.domain.dashboard import DailyTask, DashboardStats, HeatAlert, PipelineStage
from wholesale.domain.finance import Comp


# ----------------------------
# State compliance rule book
# ----------------------------

class ComplianceSource(Protocol):
    def get_state_compliance(self, state: str) -> StateCompliance | None:
        ...

    def all_states(self) -> list[str]:
        ...


# ----------------------------
# Comparable sales
# ----------------------------

class CompsProvider(Protocol):
    def fetch_comps(self, address: str) -> list[Comp]:
        ...


# ----------------------------
# Dashboard data
# ----------------------------

class DashboardDataProvider(Protocol):
    def fetch_stats(self) -> DashboardStats:
        ...

    def fetch_alerts(self) -> list[HeatAlert]:
        ...

    def fetch_tasks(self) -> list[DailyTask]:
        ...

    def fetch_pipeline(self) -> list[PipelineStage]:
        ...
