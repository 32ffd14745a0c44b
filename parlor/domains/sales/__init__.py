"""Sales domain pipeline: ingestion, validation, aggregation, and reporting."""

from pathlib import Path

from parlor.domains.sales.ingest import load_sales_text
from parlor.domains.sales.transform import classify_records
from parlor.domains.sales.aggregate import records_to_frame
from parlor.domains.sales.models import VALID_SALES_SCHEMA, SalesReport
from parlor.domains.sales.report import assemble_report, build_report
from parlor.domains.sales.export import render_report, write_report
from parlor.utils.validators import validate_dataframe


def validate(path: str | Path = "data.csv", has_header: bool = False) -> dict:
    """Check that the sales file is readable and its valid rows honor the schema."""
    try:
        classified = classify_records(load_sales_text(path), has_header=has_header)
    except (OSError, UnicodeDecodeError) as exc:
        return {"status": "error", "message": str(exc)}

    result = validate_dataframe(records_to_frame(classified.valid), VALID_SALES_SCHEMA)
    match result:
        case {"valid": True}:
            return {
                "status": "ok",
                "row_count": len(classified.valid),
                "rejected": len(classified.rejected),
            }
        case {"valid": False, "errors": errs}:
            return {"status": "error", "message": "; ".join(errs[:3])}


def run(path: str | Path = "data.csv", has_header: bool = False) -> SalesReport:
    """Read the sales file and build the report. ``OSError`` propagates to the caller."""
    text = load_sales_text(path)
    return build_report(text, has_header=has_header)
