"""Schema checks over the tabular view of sales records, using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

type ValidationResult = dict[str, str | bool | list[str]]


def _source_line(df: pd.DataFrame, index) -> str:
    """Point a failure back at its input line when the frame carries one."""
    if "line_number" in df.columns:
        lines = df.loc[df.index == index, "line_number"]
        if len(lines):
            return f"Line {lines.iloc[0]}"
    return f"Row {index}"


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate every row at once and describe each failure by input line."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for failure in e.failure_cases.to_dict("records"):
            match failure:
                case {"column": str(col), "check": check, "index": idx, "failure_case": val} if pd.notna(idx):
                    errors.append(f"{_source_line(df, idx)}: {col} = {val!r} failed {check}")
                case {"column": str(col), "check": check}:
                    errors.append(f"Column {col} failed {check}")
                case {"check": check, "index": idx} if pd.notna(idx):
                    errors.append(f"{_source_line(df, idx)}: failed {check}")
                case {"check": check}:
                    errors.append(f"Schema failed {check}")
        return {"valid": False, "status": "error", "errors": errors}
