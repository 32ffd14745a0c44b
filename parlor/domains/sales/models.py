"""Record types and pandera schemas for the parlor sales report."""

from dataclasses import dataclass, field

from pandera import Check, Column, DataFrameSchema

type MonthKey = str  # "YYYY-MM"
type GrowthValue = str  # "New Item" | "Discontinued" | "<pct>%"
type MonthlySales = dict[MonthKey, float]
type ItemGrowth = dict[str, GrowthValue]

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
PRICE_TOLERANCE = 0.01

NEW_ITEM = "New Item"
DISCONTINUED = "Discontinued"

FRAME_COLUMNS = ["date", "item", "unit_price", "quantity", "total_price", "line_number"]


def month_of(date: str) -> MonthKey:
    return date[:7]


@dataclass(frozen=True)
class SalesRecord:
    date: str
    item: str
    unit_price: float
    quantity: int
    total_price: float
    line_number: int

    @property
    def month(self) -> MonthKey:
        return month_of(self.date)


@dataclass(frozen=True)
class RejectedRecord:
    """A line that failed one or more rules.

    Numeric fields are parsed best-effort and may be NaN.
    """

    date: str
    item: str
    unit_price: float
    quantity: int | float
    total_price: float
    line_number: int
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ClassifiedRecords:
    valid: tuple[SalesRecord, ...]
    rejected: tuple[RejectedRecord, ...]


@dataclass(frozen=True)
class OrderStats:
    min: int
    max: int
    average: float


@dataclass(frozen=True)
class PopularItem:
    item: str
    total_quantity: int
    order_stats: OrderStats


@dataclass(frozen=True)
class RevenueLeader:
    item: str
    revenue: float


@dataclass(frozen=True)
class SalesReport:
    total_sales: float
    monthly_sales: MonthlySales
    popular_items: dict[MonthKey, PopularItem]
    revenue_leaders: dict[MonthKey, RevenueLeader]
    growth: dict[MonthKey, ItemGrowth]
    valid_records: tuple[SalesRecord, ...]
    rejected_records: tuple[RejectedRecord, ...]

    @property
    def valid_count(self) -> int:
        return len(self.valid_records)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected_records)

    @property
    def record_count(self) -> int:
        return self.valid_count + self.rejected_count


def _prices_reconcile(df):
    return (df["unit_price"] * df["quantity"] - df["total_price"]).abs() <= PRICE_TOLERANCE


# Contract for the tabular view of valid records
VALID_SALES_SCHEMA = DataFrameSchema(
    columns={
        "date": Column(str, Check.str_matches(DATE_PATTERN)),
        "item": Column(str),
        "unit_price": Column(float, Check.ge(0)),
        "quantity": Column(int, Check.ge(1)),
        "total_price": Column(float, Check.ge(0)),
        "line_number": Column(int, Check.ge(1), unique=True),
    },
    checks=[Check(_prices_reconcile, error="unit_price * quantity != total_price")],
    strict=False,
    coerce=True,
)
