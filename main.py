"""Sheet Bet Analytics - Main Entry Point."""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from src.api import SheetError
from src.data import DashboardView, RecordStore
from src.models.schemas import FilterState, OutcomeKind
from src.utils import export_records_to_csv


console = Console()

RESULT_COLORS = {
    OutcomeKind.WIN: "green",
    OutcomeKind.LOSS: "red",
    OutcomeKind.VOID: "white",
    OutcomeKind.PENDING: "yellow",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Betting performance report from a shared spreadsheet")
    parser.add_argument("sheet_url", nargs="?", help="Shared Google Sheets link (defaults to DEFAULT_SHEET_URL)")
    parser.add_argument("--demo", action="store_true", help="Use generated demo data instead of a sheet")
    parser.add_argument("--seed", type=int, default=None, help="Seed for demo data")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--competition", default="all")
    parser.add_argument("--tipster", default="all")
    parser.add_argument("--result", default="all", choices=["all", "WIN", "LOSS", "VOID", "PENDING"])
    parser.add_argument("--date", default="", help="Exact date, YYYY-MM-DD")
    parser.add_argument(
        "--export", metavar="DIR", nargs="?", const="", default=None,
        help="Export filtered records to CSV (defaults to EXPORT_DIR)",
    )
    parser.add_argument("--serve", action="store_true", help="Run the web dashboard instead")
    return parser.parse_args(argv)


def display_view(view: DashboardView):
    """Print KPIs and the current table page."""
    kpis = view.kpis
    pl_color = "green" if kpis.total_profit >= 0 else "red"
    roi_color = "green" if kpis.roi >= 0 else "red"
    win_color = "green" if kpis.win_rate >= 50 else "red"

    console.print(Panel.fit(
        f"[bold]Total Bets:[/bold] {kpis.total_bets}\n"
        f"[bold]Total Profit:[/bold] [{pl_color}]{kpis.total_profit:+.2f}u[/{pl_color}]\n"
        f"[bold]ROI:[/bold] [{roi_color}]{kpis.roi:+.2f}%[/{roi_color}]\n"
        f"[bold]Win Rate:[/bold] [{win_color}]{kpis.win_rate:.2f}%[/{win_color}]\n"
        f"[bold]Avg Odds:[/bold] {kpis.avg_odds:.2f}\n"
        f"[bold]Bankroll Growth:[/bold] {kpis.current_bankroll_growth:+.2f}%",
        title="Performance",
        border_style="blue",
    ))

    if view.distribution:
        console.print(" | ".join(f"{s.name}: {s.value}" for s in view.distribution))

    page = view.page
    table = Table(title=f"Records | page {page.page}/{max(page.total_pages, 1)} | {page.total_items} found")
    table.add_column("Date", style="cyan")
    table.add_column("Competition", style="white")
    table.add_column("Match", style="white")
    table.add_column("Market", style="blue")
    table.add_column("Tipster", style="magenta")
    table.add_column("Units", justify="right")
    table.add_column("Odds", justify="right", style="yellow")
    table.add_column("Result")
    table.add_column("Profit", justify="right")

    for bet in page.items:
        color = RESULT_COLORS[bet.result]
        profit_color = "green" if bet.profit_units > 0 else ("red" if bet.profit_units < 0 else "white")
        table.add_row(
            bet.date,
            bet.competition,
            f"{bet.home} vs {bet.away}",
            bet.market,
            bet.tipster,
            f"{bet.units:g}",
            f"{bet.odds:.2f}",
            f"[{color}]{bet.result.value}[/{color}]",
            f"[{profit_color}]{bet.profit_units:+.2f}[/{profit_color}]",
        )

    console.print()
    console.print(table)


async def main(args: argparse.Namespace) -> int:
    """Load data and print the report. Returns the exit code."""
    settings = get_settings()

    console.print("[bold blue]Sheet Bet Analytics[/bold blue]\n")
    store = RecordStore()

    if args.demo:
        store.load_demo(seed=args.seed)
        console.print("[yellow]Using demo data[/yellow]")
    else:
        url = args.sheet_url or settings.default_sheet_url
        try:
            await store.load_sheet(url)
        except SheetError as e:
            console.print(f"[red]Error: {e}[/red]")
            return 1

    filters = FilterState(
        competition=args.competition,
        tipster=args.tipster,
        result=args.result,
        date=args.date,
    )
    view = store.view(filters, args.page)
    display_view(view)

    if args.export is not None:
        path = export_records_to_csv(view.records, args.export or settings.export_dir)
        console.print(f"\n[green]Exported {len(view.records)} records to {path}[/green]")

    return 0


def run(argv: list[str] | None = None) -> int:
    """Command line entry point."""
    args = parse_args(argv)

    if args.serve:
        from src.web.app import run_server
        run_server()
        return 0

    return asyncio.run(main(args))


if __name__ == "__main__":
    sys.exit(run())
