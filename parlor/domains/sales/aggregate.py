"""Fold valid sales records into the monthly report views.

Every reducer rebuilds its result from the records it is given. Grouping
uses ``sort=False`` throughout so months and items come out in the order
they were first seen, which is what decides ties.
"""

import logging
from collections.abc import Sequence
from dataclasses import asdict

import pandas as pd

from parlor.domains.sales.models import (
    DISCONTINUED,
    FRAME_COLUMNS,
    NEW_ITEM,
    ItemGrowth,
    MonthKey,
    MonthlySales,
    OrderStats,
    PopularItem,
    RevenueLeader,
    SalesRecord,
    month_of,
)
from parlor.utils.transforms import format_percent, round_half_up

logger = logging.getLogger(__name__)

type SalesFrame = pd.DataFrame
type Records = Sequence[SalesRecord] | SalesFrame


def records_to_frame(records: Sequence[SalesRecord]) -> SalesFrame:
    """Tabular view of the valid records with a derived ``month`` column.

    ``quantity`` keeps its inferred dtype: counts past the int64 range fall
    back to object rather than overflowing.
    """
    df = pd.DataFrame([asdict(r) for r in records], columns=FRAME_COLUMNS)
    df = df.astype({
        "date": object,
        "item": object,
        "unit_price": "float64",
        "total_price": "float64",
        "line_number": "int64",
    })
    df["month"] = [month_of(d) for d in df["date"]]
    return df


def _as_frame(records: Records) -> SalesFrame:
    if isinstance(records, pd.DataFrame):
        return records
    return records_to_frame(records)


def _item_totals(month_df: SalesFrame, value_col: str) -> pd.Series:
    return month_df.groupby("item", sort=False)[value_col].sum()


def _strict_leader(totals: pd.Series) -> tuple[str, float]:
    """Scan from zero, replacing the leader only on a strictly greater total.

    Ties keep the item seen first. A month whose totals are all zero has no
    leader and yields ``("", 0)``.
    """
    leader, best = "", 0
    for item, value in totals.items():
        if value > best:
            leader, best = item, value
    return leader, best


def total_sales(records: Records) -> float:
    df = _as_frame(records)
    return float(df["total_price"].sum())


def monthly_sales(records: Records) -> MonthlySales:
    """Revenue per month, keyed in first-seen month order."""
    df = _as_frame(records)
    totals = df.groupby("month", sort=False)["total_price"].sum()
    return {month: float(amount) for month, amount in totals.items()}


def popular_item_by_month(records: Records) -> dict[MonthKey, PopularItem]:
    """Item with the highest summed quantity per month, first-seen wins ties."""
    df = _as_frame(records)
    result: dict[MonthKey, PopularItem] = {}

    for month, month_df in df.groupby("month", sort=False):
        item, total_quantity = _strict_leader(_item_totals(month_df, "quantity"))
        orders = [int(q) for q in month_df.loc[month_df["item"] == item, "quantity"]]

        result[month] = PopularItem(
            item=item,
            total_quantity=int(total_quantity),
            order_stats=OrderStats(
                min=min(orders),
                max=max(orders),
                average=round_half_up(sum(orders) / len(orders)),
            ),
        )

    return result


def revenue_leader_by_month(records: Records) -> dict[MonthKey, RevenueLeader]:
    """Item with the highest summed revenue per month, first-seen wins ties."""
    df = _as_frame(records)
    result: dict[MonthKey, RevenueLeader] = {}

    for month, month_df in df.groupby("month", sort=False):
        item, revenue = _strict_leader(_item_totals(month_df, "total_price"))
        result[month] = RevenueLeader(item=item, revenue=float(revenue))

    return result


def _classify_growth(prev: float, curr: float) -> str | None:
    match (prev, curr):
        case (p, c) if p == 0 and c > 0:
            return NEW_ITEM
        case (p, c) if p > 0 and c == 0:
            return DISCONTINUED
        case (p, c) if p > 0:
            return format_percent((c - p) / p * 100)
        case _:
            return None


def growth_by_month(records: Records) -> dict[MonthKey, ItemGrowth]:
    """Month-over-month revenue growth per item.

    Months are compared in chronological order ("YYYY-MM" sorts lexically).
    The first month has nothing to compare against and is left out, as is
    any item with no revenue in either month of a pair.
    """
    df = _as_frame(records)
    revenue_by_month = {
        month: _item_totals(month_df, "total_price").to_dict()
        for month, month_df in df.groupby("month", sort=False)
    }
    months = sorted(revenue_by_month)

    result: dict[MonthKey, ItemGrowth] = {}
    for prev_month, curr_month in zip(months, months[1:]):
        prev_revenue = revenue_by_month[prev_month]
        curr_revenue = revenue_by_month[curr_month]

        items = list(curr_revenue) + [i for i in prev_revenue if i not in curr_revenue]
        growth: ItemGrowth = {}
        for item in items:
            value = _classify_growth(prev_revenue.get(item, 0.0), curr_revenue.get(item, 0.0))
            if value is not None:
                growth[item] = value
        result[curr_month] = growth

    logger.debug(f"Computed growth for {len(result)} month transitions")
    return result
