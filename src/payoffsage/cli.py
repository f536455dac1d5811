"""Command-line entry points for PayoffSage."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from .config import BaseConfig
from .engine import (
    ErrorKind,
    PayoffResult,
    RetirementResult,
    SimulationError,
    project_retirement,
    simulate_payoff,
)
from .logging_config import get_logger, setup_logging
from .models import Strategy, debt_from_dict, policy_from_dict, profile_from_dict
from .services.debts import compare_strategies, debt_breakdown, interest_saved_vs_minimum
from .services.retirement import (
    ALLOCATION_PROFILES,
    NEST_EGG_MODELS,
    additional_monthly_contribution,
    allocation_for,
    resolve_model,
)

logger = get_logger(__name__)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}") from exc


def _load_debt_file(path: Path) -> tuple[list, dict]:
    """Accept either a bare list of debts or ``{"debts": [...], "policy": {...}}``."""

    payload = _load_json(path)
    if isinstance(payload, list):
        raw_debts, raw_policy = payload, {}
    elif isinstance(payload, dict):
        raw_debts, raw_policy = payload.get("debts", []), payload.get("policy", {}) or {}
    else:
        raise click.BadParameter(f"{path} must contain a list of debts or an object.")
    try:
        return [debt_from_dict(item) for item in raw_debts], raw_policy
    except (ValueError, AttributeError) as exc:
        raise click.BadParameter(str(exc)) from exc


def _emit(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def _fail(error: SimulationError) -> None:
    _emit(error.to_dict())
    logger.warning("Simulation failed", extra={"kind": error.kind.value, "reason": error.message})
    click.get_current_context().exit(2 if error.kind is ErrorKind.INVALID_INPUT else 1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Debt payoff and retirement projections."""

    config = BaseConfig()
    setup_logging(config, verbose=verbose)
    ctx.obj = config


@main.command("payoff")
@click.argument("debts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in Strategy]),
    default=None,
    help="Priority rule (defaults to configuration)",
)
@click.option("--extra", type=float, default=None, help="Extra monthly payment")
@click.option("--roll-minimums/--no-roll-minimums", default=None, help="Roll freed minimums forward")
@click.option("--max-months", type=int, default=None, help="Simulation horizon in months")
@click.option("--start-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--chart", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write a balance chart PNG")
@click.pass_obj
def payoff_command(
    config: BaseConfig,
    debts_file: Path,
    strategy: str | None,
    extra: float | None,
    roll_minimums: bool | None,
    max_months: int | None,
    start_date,
    chart: Path | None,
) -> None:
    """Simulate paying off the debts in DEBTS_FILE."""

    debts, raw_policy = _load_debt_file(debts_file)
    try:
        file_policy = policy_from_dict(raw_policy) if raw_policy else None
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    base = file_policy or config.default_policy()
    policy = config.default_policy(
        strategy=strategy or base.strategy,
        extra_monthly_payment=extra if extra is not None else base.extra_monthly_payment,
        roll_minimums_forward=roll_minimums if roll_minimums is not None else base.roll_minimums_forward,
        max_months=max_months if max_months is not None else base.max_months,
        start_date=start_date.date() if start_date else base.start_date,
    )

    outcome = simulate_payoff(debts, policy)
    if isinstance(outcome, SimulationError):
        if chart and isinstance(outcome.partial, PayoffResult):
            from .charts import debt_payoff_chart_png

            debt_payoff_chart_png(outcome.partial, chart)
        _fail(outcome)
        return

    logger.info(
        "Payoff simulated",
        extra={"debts": len(debts), "months": outcome.total_months, "strategy": policy.strategy},
    )
    data = outcome.to_dict()
    data["debts"] = debt_breakdown(debts, outcome)
    data["interest_saved_vs_minimum"] = interest_saved_vs_minimum(debts, policy)
    if chart:
        from .charts import debt_payoff_chart_png

        data["chart"] = str(debt_payoff_chart_png(outcome, chart))
    _emit(data)


@main.command("compare")
@click.argument("debts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--extra", type=float, default=None, help="Extra monthly payment")
@click.pass_obj
def compare_command(config: BaseConfig, debts_file: Path, extra: float | None) -> None:
    """Compare avalanche and snowball for the debts in DEBTS_FILE."""

    debts, raw_policy = _load_debt_file(debts_file)
    try:
        base = policy_from_dict(raw_policy) if raw_policy else config.default_policy()
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    if extra is not None:
        base = config.default_policy(
            strategy=base.strategy,
            extra_monthly_payment=extra,
            roll_minimums_forward=base.roll_minimums_forward,
            max_months=base.max_months,
            start_date=base.start_date,
        )
    comparison = compare_strategies(debts, base)
    _emit(comparison.to_dict())


@main.command("retire")
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--model", type=click.Choice(sorted(NEST_EGG_MODELS)), default="level",
              help="How the required nest egg is computed")
@click.option("--chart", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write a balance-by-age chart PNG")
@click.option("--risk-profile", type=click.Choice(sorted(ALLOCATION_PROFILES)), default=None,
              help="Include the suggested asset allocation")
@click.pass_obj
def retire_command(
    config: BaseConfig,
    profile_file: Path,
    model: str,
    chart: Path | None,
    risk_profile: str | None,
) -> None:
    """Project the retirement profile in PROFILE_FILE."""

    payload = _load_json(profile_file)
    if not isinstance(payload, dict):
        raise click.BadParameter(f"{profile_file} must contain an object.")
    try:
        profile = profile_from_dict(payload)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    outcome = project_retirement(profile, resolve_model(model))
    result = outcome.partial if isinstance(outcome, SimulationError) else outcome
    if chart and isinstance(result, RetirementResult):
        from .charts import retirement_chart_png

        retirement_chart_png(result, chart)
    if isinstance(outcome, SimulationError):
        _fail(outcome)
        return

    logger.info("Retirement projected", extra={"on_track": outcome.on_track})
    data = outcome.to_dict()
    data["additional_monthly_contribution"] = additional_monthly_contribution(profile, outcome)
    if risk_profile:
        data["allocation"] = allocation_for(risk_profile)
    if chart:
        data["chart"] = str(chart)
    _emit(data)


if __name__ == "__main__":  # pragma: no cover
    main()
