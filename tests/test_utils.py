import pandas as pd

from parlor.domains.sales.aggregate import records_to_frame
from parlor.domains.sales.models import VALID_SALES_SCHEMA, SalesRecord
from parlor.utils.transforms import format_number, format_percent, round_half_up
from parlor.utils.validators import validate_dataframe


def test_round_half_up_on_decimal_representation():
    assert round_half_up(2.675) == 2.68
    assert round_half_up(2.125) == 2.13
    assert round_half_up(-12.345) == -12.35
    assert round_half_up(-0.001) == 0.0


def test_format_number_matches_plain_printing():
    assert format_number(6.0) == "6"
    assert format_number(5) == "5"
    assert format_number(9.3) == "9.3"
    assert format_number(float("nan")) == "NaN"


def test_format_percent_drops_trailing_zeros():
    assert format_percent(50.0) == "50%"
    assert format_percent(12.5) == "12.5%"
    assert format_percent(-33.33333) == "-33.33%"
    assert format_percent(-0.001) == "0%"


def test_schema_accepts_valid_records():
    frame = records_to_frame([SalesRecord("2024-01-01", "Mint", 3.0, 2, 6.0, 1)])

    assert validate_dataframe(frame, VALID_SALES_SCHEMA)["valid"] is True


def test_schema_reports_broken_records():
    frame = records_to_frame([
        SalesRecord("2024-01-01", "Mint", 3.0, 0, 6.0, 10),
        SalesRecord("2024-01-02", "Mint", 3.0, 2, 7.0, 12),
    ])

    result = validate_dataframe(frame, VALID_SALES_SCHEMA)

    assert result["valid"] is False
    assert result["status"] == "error"
    assert any(err.startswith("Line 10: quantity = 0 failed") for err in result["errors"])
    assert any(err.startswith("Line 12:") for err in result["errors"])


def test_schema_validation_on_empty_frame():
    assert isinstance(records_to_frame([]), pd.DataFrame)
    assert validate_dataframe(records_to_frame([]), VALID_SALES_SCHEMA)["valid"] is True
