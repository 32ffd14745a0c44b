"""Render the sales report to the console and export it to disk."""

import json
import math
from dataclasses import asdict
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from parlor.domains.sales.models import RejectedRecord, SalesReport
from parlor.utils.io import write_text_file
from parlor.utils.transforms import format_number

type FilePath = str | Path
type ReportFormat = str  # "json" | "text"

DEFAULT_CURRENCY = "₹"
REPORT_TITLE = "ICE CREAM PARLOR SALES ANALYSIS REPORT"


def _money(amount: float, symbol: str) -> str:
    return f"{symbol}{amount:.2f}"


def _section(console: Console, title: str) -> None:
    console.print()
    console.print(Rule(f"[bold]{title}[/bold]", align="left"))


def _render_rejection(console: Console, record: RejectedRecord) -> None:
    console.print(f"Line {record.line_number}:")
    console.print(f"  Date: {escape(record.date)}, SKU: {escape(record.item)}")
    console.print(
        f"  Unit Price: {format_number(record.unit_price)}, "
        f"Quantity: {format_number(record.quantity)}, "
        f"Total: {format_number(record.total_price)}"
    )
    console.print("  Errors:")
    for error in record.errors:
        console.print(f"    - {escape(error)}")


def render_report(
    report: SalesReport,
    console: Console | None = None,
    currency_symbol: str = DEFAULT_CURRENCY,
) -> None:
    """Print all six report sections."""
    console = console or Console()

    console.print(Rule(f"[bold]{REPORT_TITLE}[/bold]"))

    _section(console, "1. TOTAL SALES OF THE STORE")
    console.print(f"Total Revenue: {_money(report.total_sales, currency_symbol)}")

    _section(console, "2. MONTH-WISE SALES TOTALS")
    monthly = Table(show_header=True, header_style="bold cyan")
    monthly.add_column("Month")
    monthly.add_column("Revenue", justify="right")
    for month, amount in report.monthly_sales.items():
        monthly.add_row(month, _money(amount, currency_symbol))
    console.print(monthly)

    _section(console, "3. MOST POPULAR ITEM (BY QUANTITY) EACH MONTH")
    for month, popular in report.popular_items.items():
        stats = popular.order_stats
        console.print(f"{month}: {escape(popular.item)}")
        console.print(f"  Total Quantity Sold: {popular.total_quantity}")
        console.print(
            f"  Order Stats - Min: {stats.min}, Max: {stats.max}, "
            f"Avg: {format_number(stats.average)}"
        )

    _section(console, "4. ITEMS GENERATING MOST REVENUE EACH MONTH")
    for month, leader in report.revenue_leaders.items():
        console.print(f"{month}: {escape(leader.item)} ({_money(leader.revenue, currency_symbol)})")

    _section(console, "5. MONTH-TO-MONTH GROWTH PER ITEM (%)")
    for month, items in report.growth.items():
        console.print(f"Growth from previous month to {month}:")
        for item, value in items.items():
            console.print(f"  {escape(item)}: {value}")

    _section(console, "6. DATA INCONSISTENCIES DETECTED")
    if not report.rejected_records:
        console.print("[green]No data inconsistencies found! All records are valid.[/green]")
    else:
        console.print(f"Found {report.rejected_count} inconsistent record(s):")
        for record in report.rejected_records:
            console.print()
            _render_rejection(console, record)

    console.print(Rule())


def _json_number(value: float) -> float | None:
    return None if isinstance(value, float) and math.isnan(value) else value


def report_to_dict(report: SalesReport) -> dict:
    """Plain-data view of the report, safe for ``json.dumps``."""
    return {
        "summary": {
            "records": report.record_count,
            "valid": report.valid_count,
            "rejected": report.rejected_count,
        },
        "total_sales": report.total_sales,
        "monthly_sales": dict(report.monthly_sales),
        "popular_items": {m: asdict(p) for m, p in report.popular_items.items()},
        "revenue_leaders": {m: asdict(r) for m, r in report.revenue_leaders.items()},
        "growth": {m: dict(items) for m, items in report.growth.items()},
        "rejected_records": [
            {
                "line_number": r.line_number,
                "date": r.date,
                "item": r.item,
                "unit_price": _json_number(r.unit_price),
                "quantity": _json_number(r.quantity),
                "total_price": _json_number(r.total_price),
                "errors": list(r.errors),
            }
            for r in report.rejected_records
        ],
    }


def write_report(
    report: SalesReport,
    path: FilePath,
    fmt: ReportFormat = "json",
    currency_symbol: str = DEFAULT_CURRENCY,
) -> Path:
    """Write the report to ``path`` as JSON or as the plain-text console rendering."""
    match fmt:
        case "json":
            content = json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)
        case "text":
            buf = Console(width=100, force_terminal=False, color_system=None)
            with buf.capture() as capture:
                render_report(report, buf, currency_symbol=currency_symbol)
            content = capture.get()
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    return write_text_file(content, path)
