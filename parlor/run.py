"""Main report runner: reads the sales CSV, prints the report, optionally exports it."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from parlor.config import load_report_config
from parlor.domains import sales

console = Console()


def _print_validation(result: dict, path: Path) -> bool:
    table = Table(title="Validation Results")
    table.add_column("Source")
    table.add_column("Valid")
    table.add_column("Details")

    match result:
        case {"status": "ok", "row_count": rows, "rejected": rejected}:
            table.add_row(str(path), "[green]✓[/green]", f"{rows} valid rows, {rejected} rejected")
            ok = True
        case {"status": "error", "message": msg}:
            table.add_row(str(path), "[red]✗[/red]", msg)
            ok = False
        case _:
            table.add_row(str(path), "[red]✗[/red]", "Unknown validation result")
            ok = False

    console.print(table)
    return ok


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the parlor sales report")
    parser.add_argument("data", nargs="?", type=Path, help="Sales CSV file (default from config)")
    parser.add_argument("--env", default="default", help="Configuration environment")
    parser.add_argument("--header", action="store_true", default=None, help="Skip the first non-blank line")
    parser.add_argument("--export", action="store_true", help="Also write the report under the output directory")
    parser.add_argument("--output", type=Path, help="Also write the report to this file")
    parser.add_argument("--format", choices=["json", "text"], help="Export format for --output")
    parser.add_argument("--validate", action="store_true", help="Only validate, don't report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_report_config(args.env)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    path = args.data or config.data_path
    has_header = config.has_header if args.header is None else args.header

    if args.validate:
        if not _print_validation(sales.validate(path, has_header=has_header), path):
            sys.exit(1)
        return

    try:
        report = sales.run(path, has_header=has_header)
    except (OSError, UnicodeDecodeError) as exc:
        console.print("[red]Error: Could not read or process the file[/red]")
        console.print(f"[red]Error details: {exc}[/red]")
        sys.exit(1)

    console.print(f"Processed {report.record_count} total records")
    console.print(f"Valid records: {report.valid_count}")
    console.print(f"Invalid records: {report.rejected_count}")

    sales.render_report(report, console, currency_symbol=config.currency_symbol)

    if args.output or args.export:
        fmt = args.format or config.output_format
        suffix = "json" if fmt == "json" else "txt"
        sales.write_report(
            report,
            args.output or config.output_dir / f"sales_report.{suffix}",
            fmt=fmt,
            currency_symbol=config.currency_symbol,
        )


if __name__ == "__main__":
    main()
