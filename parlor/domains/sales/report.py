"""Assemble the sales report from the aggregated views and the rejections."""

import logging
from collections.abc import Sequence

from parlor.domains.sales.aggregate import (
    growth_by_month,
    monthly_sales,
    popular_item_by_month,
    records_to_frame,
    revenue_leader_by_month,
    total_sales,
)
from parlor.domains.sales.models import RejectedRecord, SalesRecord, SalesReport
from parlor.domains.sales.transform import classify_records

logger = logging.getLogger(__name__)


def assemble_report(
    valid: Sequence[SalesRecord],
    rejected: Sequence[RejectedRecord],
) -> SalesReport:
    """Run every reducer over the same snapshot of valid records."""
    valid = tuple(valid)
    frame = records_to_frame(valid)

    report = SalesReport(
        total_sales=total_sales(frame),
        monthly_sales=monthly_sales(frame),
        popular_items=popular_item_by_month(frame),
        revenue_leaders=revenue_leader_by_month(frame),
        growth=growth_by_month(frame),
        valid_records=valid,
        rejected_records=tuple(rejected),
    )

    logger.info(
        f"Report assembled: {report.valid_count} valid, {report.rejected_count} rejected, "
        f"{len(report.monthly_sales)} months"
    )
    return report


def build_report(text: str, has_header: bool = False) -> SalesReport:
    """Raw CSV text in, finished report out."""
    classified = classify_records(text, has_header=has_header)
    return assemble_report(classified.valid, classified.rejected)
