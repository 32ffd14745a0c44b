"""File I/O utilities for reading sales input and writing report output."""

import logging
import tomllib
from pathlib import Path

from rich.console import Console

type FilePath = str | Path

logger = logging.getLogger(__name__)
console = Console()


def read_text_file(path: FilePath, encoding: str = "utf-8") -> str:
    """Read a whole text file. Missing or unreadable files raise ``OSError``."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    text = path.read_text(encoding=encoding)
    logger.info(f"Read {len(text):,} characters from {path}")
    return text


def write_text_file(content: str, path: FilePath) -> Path:
    """Write text to ``path``, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    console.print(f"  Wrote {len(content):,} characters to {path}")
    return path


def load_tool_settings(path: FilePath, tool: str) -> dict:
    """Return the ``[tool.<tool>]`` table of a pyproject-style TOML file.

    A missing file or table gives an empty dict.
    """
    path = Path(path)
    if not path.is_file():
        return {}
    with open(path, "rb") as f:
        settings = tomllib.load(f).get("tool", {}).get(tool, {})
    logger.debug(f"Loaded {len(settings)} [tool.{tool}] settings from {path}")
    return settings
