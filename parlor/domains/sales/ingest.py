"""Ingest raw point-of-sale CSV text from disk."""

import logging
from pathlib import Path

from rich.console import Console

from parlor.utils.io import read_text_file

type FilePath = str | Path

logger = logging.getLogger(__name__)
console = Console()

DEFAULT_DATA_FILE = Path("data.csv")


def load_sales_text(path: FilePath = DEFAULT_DATA_FILE) -> str:
    """Read the sales CSV as one string.

    Raises ``FileNotFoundError`` (or another ``OSError``) when the file is
    missing or unreadable. Nothing downstream runs in that case.
    """
    path = Path(path)
    console.print(f"  [cyan]Reading {path}...[/cyan]")
    text = read_text_file(path)

    line_count = sum(1 for line in text.splitlines() if line.strip())
    logger.info(f"Loaded {line_count:,} non-blank lines from {path.name}")
    return text
