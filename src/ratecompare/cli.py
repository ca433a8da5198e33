"""Command-line interface for electricity rate plan comparison."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .aggregate import plan_totals
from .collectors import IMPORTERS
from .collectors.common import DEFAULT_LOCALE, ImportResult
from .config import resolve_rates
from .errors import RateCompareError
from .holidays import known_years
from .pipeline import price_samples, summarize

console = Console()

SUMMARY_COLUMNS = [
    ("Month", "cyan"),
    ("IsWinter", None),
    ("kWh", None),
    ("Tiered", "bold"),
    ("Tier1kWh", "dim"),
    ("Tier2kWh", "dim"),
    ("TOU", "bold"),
    ("TOUkWhOffPeak", "dim"),
    ("TOUkWhMidPeak", "dim"),
    ("TOUkWhPeak", "dim"),
    ("ULO", "bold"),
    ("ULOkWh", "dim"),
    ("ULOkWhOffPeak", "dim"),
    ("ULOkWhMidPeak", "dim"),
    ("ULOkWhPeak", "dim"),
    ("Best", "green"),
]


def setup_logging(verbose: bool) -> None:
    """Send log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


RATE_COLUMNS = ("TOURate", "ULORate")
COST_COLUMNS = ("TOUCost", "ULOCost")


def _format_cell(value, column: str = "") -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        if column in RATE_COLUMNS:
            return f"{value:.3f}"
        if column in COST_COLUMNS:
            return f"{value:,.4f}"
        return f"{value:,.2f}"
    return str(value)


@click.group()
@click.option("--rates", "rates_path", type=click.Path(exists=True, dir_okay=False), help="Path to rates.yaml")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.version_option(package_name="ratecompare")
@click.pass_context
def cli(ctx, rates_path, verbose):
    """Compare what hourly usage would cost under tiered, TOU and ULO plans."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["rates_path"] = Path(rates_path) if rates_path else None


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "input_format",
    type=click.Choice(sorted(IMPORTERS)),
    default="interval",
    show_default=True,
    help="Layout of the input CSV",
)
@click.option("--raw", is_flag=True, help="Show every priced sample instead of monthly totals")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--strict", is_flag=True, help="Fail on malformed rows instead of skipping them")
@click.option("--locale", default=DEFAULT_LOCALE, show_default=True, help="Locale for month names in dates")
@click.pass_context
def compare(ctx, files, input_format, raw, as_json, strict, locale):
    """Price usage from one or more CSV FILES under each rate plan."""
    try:
        rates = resolve_rates(ctx.obj["rates_path"])
        parse_csv = IMPORTERS[input_format]

        result = ImportResult()
        for path in files:
            result.extend(parse_csv(Path(path), locale=locale, strict=strict))

        if raw:
            rows = [p.as_row() for p in price_samples(result.samples, rates)]
        else:
            summaries = summarize(result.samples, rates)
            rows = [s.as_row() for s in summaries]
    except RateCompareError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        ctx.exit(1)

    if as_json:
        console.print_json(data=rows)
        return

    if result.skipped:
        console.print(f"[yellow]Skipped {result.skipped} malformed row(s)[/yellow]")

    if not rows:
        console.print("[yellow]No usage samples found[/yellow]")
        return

    if raw:
        _print_raw(rows)
    else:
        _print_summary(rows)
        _print_totals(summaries)


def _print_summary(rows: list[dict]) -> None:
    table = Table(title="Monthly Plan Comparison")
    for name, style in SUMMARY_COLUMNS:
        table.add_column(name, style=style, justify="left" if name in ("Month", "Best") else "right")
    for row in rows:
        table.add_row(*(_format_cell(row[name]) for name, _ in SUMMARY_COLUMNS))
    console.print(table)


def _print_raw(rows: list[dict]) -> None:
    table = Table(title="Priced Samples")
    for name in rows[0]:
        table.add_column(name, style="cyan" if name == "Timestamp" else None)
    for row in rows:
        table.add_row(*(_format_cell(v, name) for name, v in row.items()))
    console.print(table)


def _print_totals(summaries) -> None:
    totals = plan_totals(summaries)
    console.print(
        f"\n{totals.months} month(s), {totals.kwh:,.2f} kWh: "
        f"Tiered ${totals.tiered:,.2f}, TOU ${totals.tou:,.2f}, ULO ${totals.ulo:,.2f}"
    )
    console.print(f"[green]Cheapest overall: {totals.best.value}[/green]")


@cli.command("rates")
@click.pass_context
def show_rates(ctx):
    """Show the active electricity rates."""
    try:
        rates = resolve_rates(ctx.obj["rates_path"])
    except RateCompareError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        ctx.exit(1)

    table = Table(title="Electricity Rates")
    table.add_column("Plan", style="cyan")
    table.add_column("Band")
    table.add_column("$/kWh", justify="right")

    table.add_row("TOU", "Off-peak", f"{rates.off_peak:.3f}")
    table.add_row("TOU", "Mid-peak", f"{rates.mid_peak:.3f}")
    table.add_row("TOU", "On-peak", f"{rates.on_peak:.3f}")
    table.add_row("ULO", "Ultra-low overnight", f"{rates.ulo:.3f}")
    table.add_row("ULO", "Weekend off-peak", f"{rates.off_peak:.3f}")
    table.add_row("ULO", "Mid-peak", f"{rates.mid_peak:.3f}")
    table.add_row("ULO", "On-peak", f"{rates.ulo_on_peak:.3f}")
    table.add_row("Tiered", f"Tier 1 (first {rates.tier_threshold_winter:g} kWh winter)", f"{rates.tier1:.3f}")
    table.add_row("Tiered", f"Tier 1 (first {rates.tier_threshold_summer:g} kWh summer)", f"{rates.tier1:.3f}")
    table.add_row("Tiered", "Tier 2", f"{rates.tier2:.3f}")

    console.print(table)
    years = known_years()
    console.print(f"[dim]Holiday calendar covers {years[0]}-{years[-1]}[/dim]")


if __name__ == "__main__":
    cli()
