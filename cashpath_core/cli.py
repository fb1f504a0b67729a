from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cashpath_core.domain.models import Plan, ProjectionConfig, ProjectionResult
from cashpath_core.io import config as config_io
from cashpath_core.io import export
from cashpath_core.io import plan as plan_io
from cashpath_core.services import projection, summary

app = typer.Typer(help="Cash position projection over a fixed horizon of days.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _save_json(path: Path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def _resolve_config(
    config: Optional[Path],
    horizon: Optional[int],
    today: Optional[str],
    scenario: Optional[str],
) -> ProjectionConfig:
    base = config_io.load_projection_config(config) if config else ProjectionConfig()
    horizon_days = horizon if horizon is not None else base.horizon_days
    if horizon_days < 1:
        raise typer.BadParameter("Horizon must be at least 1 day", param_hint="--horizon")
    try:
        today_date = plan_io.parse_date(today, "--today") if today else base.today
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--today") from exc
    return ProjectionConfig(
        horizon_days=horizon_days,
        today=today_date,
        scenario_id=scenario if scenario is not None else base.scenario_id,
    )


def _run(plan_path: Path, conf: ProjectionConfig) -> tuple[Plan, ProjectionResult]:
    plan = plan_io.select_scenario(plan_io.load_plan(plan_path), conf.scenario_id)
    result = projection.build_projection(
        plan.accounts,
        plan.paychecks,
        plan.credit_cards,
        plan.life_events,
        horizon_days=conf.horizon_days,
        today=conf.today,
    )
    return plan, result


@app.command()
def project(
    plan: Path = typer.Option(..., help="Plan JSON file or directory of per-table CSVs"),
    scenario: Optional[str] = typer.Option(None, help="Scenario id to project"),
    horizon: Optional[int] = typer.Option(None, help="Days to project (default 120)"),
    today: Optional[str] = typer.Option(None, help="Projection start date, YYYY-MM-DD"),
    config: Optional[Path] = typer.Option(None, help="Projection config JSON"),
    out: Optional[Path] = typer.Option(None, help="Output path for projection JSON"),
    csv: Optional[Path] = typer.Option(None, help="Output path for the daily series as CSV"),
):
    """Project the daily running balance."""
    conf = _resolve_config(config, horizon, today, scenario)
    _, result = _run(plan, conf)
    payload = export.projection_to_dict(result)
    if csv:
        export.write_projection_csv(result, csv)
        typer.echo(f"Daily series written to {csv}")
    if out:
        _save_json(out, payload)
        typer.echo(f"Projection written to {out}")
    elif not csv:
        typer.echo(json.dumps(payload, indent=2))


@app.command("summary")
def summary_cmd(
    plan: Path = typer.Option(..., help="Plan JSON file or directory of per-table CSVs"),
    scenario: Optional[str] = typer.Option(None, help="Scenario id to project"),
    horizon: Optional[int] = typer.Option(None, help="Days to project (default 120)"),
    today: Optional[str] = typer.Option(None, help="Projection start date, YYYY-MM-DD"),
    config: Optional[Path] = typer.Option(None, help="Projection config JSON"),
):
    """Show headline figures: current balance, 30 day delta, lowest and ending balance."""
    conf = _resolve_config(config, horizon, today, scenario)
    scoped, result = _run(plan, conf)
    stats = summary.summarize(result, scoped.start_balance)

    console = Console()
    table = Table(title=f"Cash projection ({stats.days} days)")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Current balance", summary.format_currency(stats.starting_balance))
    table.add_row("Projected 30d delta", summary.format_currency(stats.delta_30d))
    lowest_style = "red" if stats.lowest_balance < 0 else "green"
    table.add_row(
        "Lowest balance",
        f"[{lowest_style}]{summary.format_currency(stats.lowest_balance)}[/{lowest_style}]",
    )
    table.add_row("Lowest on", stats.lowest_date.isoformat() if stats.lowest_date else "-")
    table.add_row("Ending balance", summary.format_currency(stats.ending_balance))
    console.print(table)


@app.command()
def scenarios(
    plan: Path = typer.Option(..., help="Plan JSON file or directory of per-table CSVs"),
):
    """List scenarios in a plan with their entity counts."""
    loaded = plan_io.load_plan(plan)
    if not loaded.scenarios:
        typer.echo("No scenarios defined in plan.")
        return
    console = Console()
    table = Table(title="Scenarios")
    for column in ("id", "name", "accounts", "paychecks", "cards", "life events"):
        table.add_column(column)
    for s in loaded.scenarios:
        scoped = loaded.for_scenario(s.id)
        table.add_row(
            s.id,
            s.name,
            str(len(scoped.accounts)),
            str(len(scoped.paychecks)),
            str(len(scoped.credit_cards)),
            str(len(scoped.life_events)),
        )
    console.print(table)


if __name__ == "__main__":
    app()
