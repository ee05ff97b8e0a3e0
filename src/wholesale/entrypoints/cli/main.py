from __future__ import annotations

from typing import List, Optional

import typer
from loguru import logger
from pydantic import ValidationError

from wholesale.adapters.state_compliance import (
    get_all_states,
    get_state_compliance,
    get_states_with_restrictions,
)
from wholesale.api.schemas import (
    AnalyzeRequest,
    ComplianceCheckRequest,
    ComplianceCheckResponse,
    DealAnalysisResponse,
    ExitStrategyResponse,
    StrategyInputRequest,
)
from wholesale.domain.finance import calculate_dscr
from wholesale.services.compliance import check_compliance
from wholesale.services.deal_analyzer import analyze_deal
from wholesale.services.exit_strategy import evaluate_exit_strategy

app = typer.Typer(help="Wholesale deal desk (exit strategies, deal analysis, compliance).")


def _invalid(err: ValidationError) -> typer.Exit:
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"])
        typer.echo(f"invalid {loc}: {e['msg']}", err=True)
    return typer.Exit(code=2)


@app.command("exit-strategy")
def exit_strategy_cmd(
    arv: float = typer.Option(..., help="After-repair value"),
    purchase_price: float = typer.Option(..., help="Contract purchase price"),
    repairs: float = typer.Option(0.0, help="Estimated repairs"),
    mortgage_balance: float = typer.Option(0.0, help="Existing mortgage balance"),
    interest_rate: float = typer.Option(0.0, help="Existing loan rate, percent"),
    condition: str = typer.Option("fair", help="excellent|good|fair|poor"),
    motivation: str = typer.Option("medium", help="high|medium|low"),
    seller_needs_cash: bool = typer.Option(False, "--seller-needs-cash/--seller-no-cash"),
    capital: float = typer.Option(0.0, help="Your liquid capital"),
) -> None:
    """
    Rank exit strategies for a deal and print the analysis as JSON.
    """
    try:
        req = StrategyInputRequest(
            arv=arv,
            purchase_price=purchase_price,
            repairs=repairs,
            mortgage_balance=mortgage_balance,
            interest_rate=interest_rate,
            property_condition=condition,
            seller_motivation=motivation,
            seller_needs_cash=seller_needs_cash,
            user_liquid_capital=capital,
        )
    except ValidationError as err:
        raise _invalid(err) from err

    analysis = evaluate_exit_strategy(req.to_domain())
    logger.info(
        "exit strategy evaluated",
        strategies=[r.strategy.value for r in analysis.recommendations],
    )
    typer.echo(ExitStrategyResponse.from_domain(analysis).model_dump_json(by_alias=True, indent=2))


@app.command("analyze")
def analyze_cmd(
    address: str = typer.Option(..., help="Subject property address"),
    condition: str = typer.Option("unknown", help="excellent|good|fair|poor|unknown"),
    motivation: str = typer.Option("unknown", help="high|medium|low|unknown"),
    sqft: float = typer.Option(1500.0, help="Living area"),
    wholesale_fee: float = typer.Option(10_000.0, help="Target assignment fee"),
    mortgage_balance: Optional[float] = typer.Option(None, help="Existing mortgage balance"),
) -> None:
    """
    Comps, ARV, MAO and grade for one address.
    """
    try:
        req = AnalyzeRequest(
            address=address,
            condition=condition,
            motivation=motivation,
            sqft=sqft,
            wholesale_fee=wholesale_fee,
            mortgage_balance=mortgage_balance,
        )
    except ValidationError as err:
        raise _invalid(err) from err

    result = analyze_deal(
        address=req.address,
        condition=req.condition,
        motivation=req.motivation,
        sqft=req.sqft,
        wholesale_fee=req.wholesale_fee,
        mortgage_balance=req.mortgage_balance,
    )
    logger.info("deal analyzed", address=req.address, grade=result.grade.value)
    typer.echo(DealAnalysisResponse.from_domain(result).model_dump_json(by_alias=True, indent=2))


@app.command("dscr")
def dscr_cmd(
    rent: float = typer.Option(..., min=0, help="Monthly rent"),
    piti: float = typer.Option(..., min=0, help="Monthly principal, interest, taxes, insurance"),
    vacancy: float = typer.Option(0.05, min=0, max=1, help="Vacancy rate, 0-1"),
    management: float = typer.Option(0.10, min=0, max=1, help="Management, share of rent"),
    maintenance: float = typer.Option(0.05, min=0, max=1, help="Maintenance, share of rent"),
) -> None:
    """
    Debt-service coverage for a buy-and-hold exit.
    """
    value = calculate_dscr(rent, vacancy, piti, management, maintenance)
    logger.info("dscr computed", dscr=round(value, 4))
    typer.echo(f"{value:.2f}")


@app.command("compliance")
def compliance_cmd(
    state: str = typer.Option(..., help="2-letter state code"),
    strategy: str = typer.Option(..., help="assignment|double_close|wholetail|subject_to|morby_method|novation|seller_finance"),
    deals_this_year: int = typer.Option(0, help="Wholesale deals closed this year"),
    foreclosure: bool = typer.Option(False, "--foreclosure", help="Property is in foreclosure"),
    distress: List[str] = typer.Option([], "--distress", help="Distress indicator(s)"),
) -> None:
    """
    Check one strategy against a state's wholesaling rules. Exits 1 on violations.
    """
    try:
        req = ComplianceCheckRequest(
            state=state,
            strategy=strategy,
            deals_this_year=deals_this_year,
            property_in_foreclosure=foreclosure,
            distress_indicators=distress,
        )
    except ValidationError as err:
        raise _invalid(err) from err

    result = check_compliance(req.to_domain())
    typer.echo(ComplianceCheckResponse.from_domain(result).model_dump_json(by_alias=True, indent=2))
    if not result.passed:
        logger.warning("compliance violations", state=result.state, n=len(result.violations))
        raise typer.Exit(code=1)


@app.command("states")
def states_cmd() -> None:
    """
    List states with compliance data.
    """
    restricted = set(get_states_with_restrictions())
    for code in get_all_states():
        sc = get_state_compliance(code)
        flag = " (restrictions)" if code in restricted else ""
        typer.echo(f"{code}  {sc.state_name if sc else code}{flag}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    logger.info("starting api", host=host, port=port)
    uvicorn.run("wholesale.api.http:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
