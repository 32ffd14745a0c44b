import io
import json

import pytest
from rich.console import Console

from parlor.domains.sales.export import render_report, report_to_dict, write_report
from parlor.domains.sales.report import build_report


def render(report, **kwargs) -> str:
    buf = io.StringIO()
    console = Console(file=buf, width=120, force_terminal=False, color_system=None)
    render_report(report, console, **kwargs)
    return buf.getvalue()


def test_render_includes_every_section(sample_csv):
    output = render(build_report(sample_csv))

    assert "1. TOTAL SALES OF THE STORE" in output
    assert "Total Revenue: ₹40.00" in output
    assert "₹18.00" in output
    assert "Total Quantity Sold: 4" in output
    assert "Order Stats - Min: 1, Max: 3, Avg: 2" in output
    assert "2024-01: Choco, Vanilla Swirl (₹10.00)" in output
    assert "Growth from previous month to 2024-02:" in output
    assert "Vanilla: 25%" in output
    assert "Found 2 inconsistent record(s):" in output
    assert "Line 7:" in output
    assert "- Date is malformed" in output


def test_render_uses_configured_currency(sample_csv):
    output = render(build_report(sample_csv), currency_symbol="$")

    assert "Total Revenue: $40.00" in output


def test_render_reports_clean_input():
    output = render(build_report("2024-01-01,[bold]Mint,3.00,1,3.00\n"))

    assert "No data inconsistencies found! All records are valid." in output
    assert "[bold]Mint" in output


def test_report_to_dict_is_json_safe():
    report = build_report("2024-01-01,Mint,3.00,abc,3.00\n")

    payload = json.loads(json.dumps(report_to_dict(report)))

    assert payload["summary"] == {"records": 1, "valid": 0, "rejected": 1}
    assert payload["rejected_records"][0]["quantity"] is None
    assert payload["rejected_records"][0]["errors"][0] == "Quantity is < 1"


def test_write_report_json(sample_csv, tmp_path):
    path = write_report(build_report(sample_csv), tmp_path / "out" / "report.json")

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["total_sales"] == 40.0
    assert payload["popular_items"]["2024-01"]["order_stats"] == {"min": 1, "max": 3, "average": 2.0}
    assert payload["growth"]["2024-02"]["Choco, Vanilla Swirl"] == "Discontinued"


def test_write_report_text(sample_csv, tmp_path):
    path = write_report(build_report(sample_csv), tmp_path / "report.txt", fmt="text")

    assert "Total Revenue: ₹40.00" in path.read_text(encoding="utf-8")


def test_write_report_rejects_unknown_format(sample_csv, tmp_path):
    with pytest.raises(ValueError, match="Unsupported output format"):
        write_report(build_report(sample_csv), tmp_path / "report.xml", fmt="xml")
