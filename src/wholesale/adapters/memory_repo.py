from datetime import datetime, timedelta, timezone
from typing import Callable

from wholesale.domain.dashboard import DailyTask, DashboardStats, HeatAlert, PipelineStage
from wholesale.domain.ports import DashboardDataProvider
from wholesale.domain.types import DailyTaskType, HeatCategory

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryDashboardProvider(DashboardDataProvider):
    """
    Fixture-backed dashboard data until a CRM store exists.

    Timestamps are derived from `clock` so tests can pin them.
    """

    def __init__(
        self,
        *,
        stats: DashboardStats | None = None,
        pipeline: list[PipelineStage] | None = None,
        clock: Clock = _utcnow,
    ) -> None:
        self._clock = clock
        self._stats = stats or DashboardStats(
            leads_this_week=47,
            leads_change=12.5,
            calls_today=18,
            calls_change=-5.2,
            deals_in_pipeline=12,
            deals_change=8.3,
            revenue_this_month=42_500.0,
            revenue_change=23.1,
        )
        self._pipeline = pipeline if pipeline is not None else [
            PipelineStage(id="new", name="New Leads", count=23, value=0.0),
            PipelineStage(id="contacted", name="Contacted", count=15, value=0.0),
            PipelineStage(id="qualified", name="Qualified", count=8, value=185_000.0),
            PipelineStage(id="under_contract", name="Under Contract", count=4, value=92_000.0),
            PipelineStage(id="closing", name="Closing", count=2, value=47_000.0),
        ]

    def fetch_stats(self) -> DashboardStats:
        return self._stats

    def fetch_pipeline(self) -> list[PipelineStage]:
        return list(self._pipeline)

    def fetch_alerts(self) -> list[HeatAlert]:
        now = self._clock()
        rows = [
            ("1", "lead-001", "1234 Oak Street", HeatCategory.CRITICAL,
             "Foreclosure auction in 5 days", timedelta(0)),
            ("2", "lead-002", "567 Maple Ave", HeatCategory.CRITICAL,
             "Owner returned call, ready to negotiate", timedelta(hours=1)),
            ("3", "lead-003", "890 Pine Road", HeatCategory.HIGH_PRIORITY,
             "Tax lien + code violations stacking", timedelta(hours=2)),
            ("4", "lead-004", "321 Elm Court", HeatCategory.HIGH_PRIORITY,
             "Probate filed last week", timedelta(days=1)),
            ("5", "lead-005", "654 Birch Lane", HeatCategory.STREET_WORK,
             "Vacant 6+ months, absentee owner", timedelta(days=2)),
        ]
        return [
            HeatAlert(
                id=alert_id,
                lead_id=lead_id,
                lead_name=name,
                category=category,
                message=message,
                created_at=(now - age).isoformat(),
            )
            for alert_id, lead_id, name, category, message, age in rows
        ]

    def fetch_tasks(self) -> list[DailyTask]:
        # everything is due at 17:00 on the current day
        due = self._clock().replace(hour=17, minute=0, second=0, microsecond=0).isoformat()
        return [
            DailyTask(
                id="1",
                type=DailyTaskType.call,
                title="Call back John Smith",
                description="Expressed interest yesterday, wants offer",
                lead_id="lead-001",
                deal_id=None,
                due_at=due,
                completed=False,
            ),
            DailyTask(
                id="2",
                type=DailyTaskType.follow_up,
                title="Send contract to 567 Maple Ave",
                description="Agreed on terms, waiting for signature",
                lead_id="lead-002",
                deal_id="deal-001",
                due_at=due,
                completed=False,
            ),
            DailyTask(
                id="3",
                type=DailyTaskType.review,
                title="Review comps for Pine Road deal",
                description=None,
                lead_id="lead-003",
                deal_id=None,
                due_at=due,
                completed=True,
            ),
            DailyTask(
                id="4",
                type=DailyTaskType.call,
                title="Cold call batch - Foreclosure list",
                description="15 leads from county records",
                lead_id=None,
                deal_id=None,
                due_at=due,
                completed=False,
            ),
            DailyTask(
                id="5",
                type=DailyTaskType.other,
                title="Update CRM with call notes",
                description=None,
                lead_id=None,
                deal_id=None,
                due_at=due,
                completed=False,
            ),
        ]
