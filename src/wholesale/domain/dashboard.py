# src/wholesale/domain/dashboard.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wholesale.domain.types import DailyTaskType, HeatCategory


@dataclass(frozen=True)
class DashboardStats:
    leads_this_week: int
    leads_change: float      # percent vs. previous period
    calls_today: int
    calls_change: float
    deals_in_pipeline: int
    deals_change: float
    revenue_this_month: float
    revenue_change: float


@dataclass(frozen=True)
class PipelineStage:
    id: str
    name: str
    count: int
    value: float


@dataclass(frozen=True)
class HeatAlert:
    id: str
    lead_id: str
    lead_name: str
    category: HeatCategory
    message: str
    created_at: str


@dataclass(frozen=True)
class DailyTask:
    id: str
    type: DailyTaskType
    title: str
    description: Optional[str]
    lead_id: Optional[str]
    deal_id: Optional[str]
    due_at: str
    completed: bool
