"""Parse raw point-of-sale lines and split them into valid and rejected records."""

import logging
import re
from datetime import date as calendar_date

import numpy as np

from parlor.domains.sales.models import (
    DATE_PATTERN,
    PRICE_TOLERANCE,
    ClassifiedRecords,
    RejectedRecord,
    SalesRecord,
)
from parlor.utils.transforms import format_number

logger = logging.getLogger(__name__)

DELIMITER = ","
NUMERIC_FIELDS = 3

_DATE_RE = re.compile(DATE_PATTERN, re.ASCII)
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")

type RawFields = tuple[str, str, str | None, str | None, str | None]


def _parse_decimal(raw: str | None) -> float:
    """Leading numeric prefix of ``raw`` as a float, NaN when there is none."""
    if raw is None:
        return np.nan
    found = _DECIMAL_PREFIX.match(raw)
    return float(found.group(1)) if found else np.nan


def _parse_quantity(raw: str | None) -> int | float:
    if raw is None:
        return np.nan
    found = _INTEGER_PREFIX.match(raw)
    if not found:
        return np.nan
    digits = found.group(1)
    try:
        quantity = int(digits)
        float(quantity)
    except (OverflowError, ValueError):
        # Too many digits to multiply against a price
        return -np.inf if digits.startswith("-") else np.inf
    return quantity


def split_line(line: str) -> RawFields:
    """Split a line into date, item and the three trailing numeric fields.

    Everything between the first field and the last three is the item
    identifier, rejoined with the delimiter so ``Choco, Vanilla Swirl``
    survives intact. Short lines right-align whatever trailing fields exist
    onto the numeric slots and leave the rest as ``None``.
    """
    parts = line.split(DELIMITER)
    date, rest = parts[0], parts[1:]

    if len(rest) > NUMERIC_FIELDS:
        item = DELIMITER.join(rest[:-NUMERIC_FIELDS])
        numeric = rest[-NUMERIC_FIELDS:]
    else:
        item = ""
        numeric = [None] * (NUMERIC_FIELDS - len(rest)) + rest

    unit_price, quantity, total_price = numeric
    return date, item, unit_price, quantity, total_price


def _is_calendar_date(value: str) -> bool:
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        calendar_date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_record(
    date: str,
    unit_price: float,
    quantity: int | float,
    total_price: float,
) -> list[str]:
    """Check one record against every business rule.

    Rules are independent, so a record can collect several errors. NaN
    fails every numeric rule.
    """
    errors = []

    if not _is_calendar_date(date):
        errors.append("Date is malformed")

    if not quantity >= 1:
        errors.append("Quantity is < 1")

    if not unit_price >= 0:
        errors.append("Unit Price is < 0")

    if not total_price >= 0:
        errors.append("Total Price is < 0")

    expected = unit_price * quantity
    if not abs(expected - total_price) <= PRICE_TOLERANCE:
        errors.append(
            f"Unit Price * Quantity != Total Price "
            f"(Expected: {format_number(expected)}, Got: {format_number(total_price)})"
        )

    return errors


def parse_line(line: str, line_number: int) -> SalesRecord | RejectedRecord:
    """Turn one non-blank line into a valid record or a rejection."""
    date, item, raw_unit, raw_quantity, raw_total = split_line(line)
    unit_price = _parse_decimal(raw_unit)
    quantity = _parse_quantity(raw_quantity)
    total_price = _parse_decimal(raw_total)

    errors = validate_record(date, unit_price, quantity, total_price)
    match errors:
        case []:
            return SalesRecord(
                date=date,
                item=item,
                unit_price=unit_price,
                quantity=quantity,
                total_price=total_price,
                line_number=line_number,
            )
        case _:
            return RejectedRecord(
                date=date,
                item=item,
                unit_price=unit_price,
                quantity=quantity,
                total_price=total_price,
                line_number=line_number,
                errors=tuple(errors),
            )


def classify_records(text: str, has_header: bool = False) -> ClassifiedRecords:
    """Main parsing entrypoint. Classifies every non-blank line of ``text``.

    Surrounding blank lines are trimmed off first, so the first record is
    line 1. Blank lines between records are skipped but still counted.
    """
    valid: list[SalesRecord] = []
    rejected: list[RejectedRecord] = []
    header_pending = has_header

    for line_number, raw_line in enumerate(text.strip().split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue
        if header_pending:
            header_pending = False
            logger.debug(f"Skipping header on line {line_number}: {line!r}")
            continue

        match parse_line(line, line_number):
            case SalesRecord() as record:
                valid.append(record)
            case RejectedRecord() as record:
                logger.warning(f"Line {line_number} rejected: {'; '.join(record.errors)}")
                rejected.append(record)

    logger.info(f"Classified {len(valid) + len(rejected)} records: {len(valid)} valid, {len(rejected)} rejected")
    return ClassifiedRecords(valid=tuple(valid), rejected=tuple(rejected))
