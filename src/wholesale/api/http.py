# src/wholesale/api/http.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wholesale.adapters.comps_mock import MockCompsProvider
from wholesale.adapters.config import config
from wholesale.adapters.logging_utils import get_logger
from wholesale.adapters.memory_repo import InMemoryDashboardProvider
from wholesale.adapters.state_compliance import StaticComplianceSource
from wholesale.domain.heat import calculate_heat_score_from_raw, get_heat_category
from wholesale.domain.ports import ComplianceSource, CompsProvider, DashboardDataProvider
from wholesale.services.compliance import check_compliance
from wholesale.services.deal_analyzer import analyze_deal
from wholesale.services.exit_strategy import evaluate_exit_strategy
from .schemas import (
    AnalyzeRequest,
    CompOut,
    ComplianceCheckRequest,
    ComplianceCheckResponse,
    DailyTaskOut,
    DashboardStatsOut,
    DealAnalysisResponse,
    DistressIndicatorOut,
    ExitStrategyResponse,
    HeatAlertOut,
    HeatScoreRequest,
    HeatScoreResponse,
    PipelineStageOut,
    StateSummary,
    StatesResponse,
    StrategyInputRequest,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api")


def _failure(message: str, exc: Exception) -> JSONResponse:
    logger.error(message, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": message})


# -----------------------------
# Dependencies (set up in create_app)
# -----------------------------
def get_dashboard(request: Request) -> DashboardDataProvider:
    return request.app.state.dashboard


def get_comps(request: Request) -> CompsProvider:
    return request.app.state.comps


def get_compliance_source(request: Request) -> ComplianceSource:
    return request.app.state.compliance


# -----------------------------
# Deals
# -----------------------------
@router.post("/deals/exit-strategy", response_model=ExitStrategyResponse)
def exit_strategy(payload: StrategyInputRequest) -> Any:
    try:
        analysis = evaluate_exit_strategy(payload.to_domain())
        return ExitStrategyResponse.from_domain(analysis)
    except Exception as e:
        return _failure("Analysis failed", e)


@router.post("/deals/analyze", response_model=DealAnalysisResponse)
def analyze(payload: AnalyzeRequest, comps: CompsProvider = Depends(get_comps)) -> Any:
    try:
        result = analyze_deal(
            address=payload.address,
            condition=payload.condition,
            motivation=payload.motivation,
            sqft=payload.sqft,
            wholesale_fee=payload.wholesale_fee,
            mortgage_balance=payload.mortgage_balance,
            asking_price=payload.asking_price,
            comps_provider=comps,
        )
        return DealAnalysisResponse.from_domain(result)
    except Exception as e:
        return _failure("Analysis failed", e)


@router.get("/deals/comps", response_model=list[CompOut])
def list_comps(
    address: str | None = Query(None),
    comps: CompsProvider = Depends(get_comps),
) -> Any:
    if not address or not address.strip():
        return JSONResponse(status_code=400, content={"error": "Address is required"})
    try:
        return [CompOut.from_domain(c) for c in comps.fetch_comps(address)]
    except Exception as e:
        return _failure("Failed to fetch comps", e)


# -----------------------------
# Compliance
# -----------------------------
@router.post("/compliance/check", response_model=ComplianceCheckResponse)
def compliance_check(
    payload: ComplianceCheckRequest,
    source: ComplianceSource = Depends(get_compliance_source),
) -> Any:
    try:
        result = check_compliance(payload.to_domain(), source=source)
        return ComplianceCheckResponse.from_domain(result)
    except Exception as e:
        return _failure("Compliance check failed", e)


@router.get("/compliance/states", response_model=StatesResponse)
def compliance_states(source: ComplianceSource = Depends(get_compliance_source)) -> Any:
    try:
        out: list[StateSummary] = []
        for code in source.all_states():
            sc = source.get_state_compliance(code)
            out.append(
                StateSummary(
                    code=code,
                    name=sc.state_name if sc else code,
                    has_restrictions=bool(sc and sc.restrictions),
                    rules_count=len(sc.rules) if sc else 0,
                    disclosures_count=len(sc.disclosures) if sc else 0,
                )
            )
        return StatesResponse(states=out)
    except Exception as e:
        return _failure("Failed to fetch states", e)


# -----------------------------
# Dashboard
# -----------------------------
@router.get("/dashboard/stats", response_model=DashboardStatsOut)
def dashboard_stats(dashboard: DashboardDataProvider = Depends(get_dashboard)) -> Any:
    try:
        return DashboardStatsOut.from_domain(dashboard.fetch_stats())
    except Exception as e:
        return _failure("Failed to fetch dashboard stats", e)


@router.get("/dashboard/alerts", response_model=list[HeatAlertOut])
def dashboard_alerts(dashboard: DashboardDataProvider = Depends(get_dashboard)) -> Any:
    try:
        return [HeatAlertOut.from_domain(a) for a in dashboard.fetch_alerts()]
    except Exception as e:
        return _failure("Failed to fetch alerts", e)


@router.get("/dashboard/tasks", response_model=list[DailyTaskOut])
def dashboard_tasks(dashboard: DashboardDataProvider = Depends(get_dashboard)) -> Any:
    try:
        return [DailyTaskOut.from_domain(t) for t in dashboard.fetch_tasks()]
    except Exception as e:
        return _failure("Failed to fetch tasks", e)


@router.get("/dashboard/pipeline", response_model=list[PipelineStageOut])
def dashboard_pipeline(dashboard: DashboardDataProvider = Depends(get_dashboard)) -> Any:
    try:
        return [PipelineStageOut.from_domain(s) for s in dashboard.fetch_pipeline()]
    except Exception as e:
        return _failure("Failed to fetch pipeline", e)


# -----------------------------
# Leads
# -----------------------------
@router.post("/leads/heat-score", response_model=HeatScoreResponse)
def heat_score(payload: HeatScoreRequest) -> Any:
    try:
        raw = [(i.type, i.date_recorded) for i in payload.indicators]
        score, processed = calculate_heat_score_from_raw(raw)
        return HeatScoreResponse(
            heat_score=score,
            heat_category=get_heat_category(score),
            indicators=[DistressIndicatorOut.from_domain(p) for p in processed],
        )
    except Exception as e:
        return _failure("Heat score calculation failed", e)


# -----------------------------
# App factory
# -----------------------------
def create_app(
    *,
    dashboard: DashboardDataProvider | None = None,
    comps: CompsProvider | None = None,
    compliance: ComplianceSource | None = None,
) -> FastAPI:
    app = FastAPI(title=config.API_TITLE)

    app.state.dashboard = dashboard or InMemoryDashboardProvider()
    app.state.comps = comps or MockCompsProvider()
    app.state.compliance = compliance or StaticComplianceSource()

    @app.exception_handler(RequestValidationError)
    async def _validation_failed(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": "Validation failed", "details": jsonable_encoder(exc.errors())},
        )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router)
    return app


app = create_app()
