"""Report configuration and environment setup."""

from dataclasses import dataclass, replace
from pathlib import Path

from parlor.utils.io import load_tool_settings

type ConfigDict = dict[str, str | bool]

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@dataclass(frozen=True)
class ReportConfig:
    data_path: Path
    output_dir: Path
    currency_symbol: str
    has_header: bool
    output_format: str


def get_env_config(pyproject: Path = PYPROJECT) -> ConfigDict:
    """Read the ``[tool.parlor]`` table from pyproject.toml, if there is one."""
    return load_tool_settings(pyproject, "parlor")


def load_report_config(env: str = "default", pyproject: Path = PYPROJECT) -> ReportConfig:
    match env:
        case "default":
            config = ReportConfig(
                data_path=Path("data.csv"),
                output_dir=Path("output"),
                currency_symbol="₹",
                has_header=False,
                output_format="json",
            )
        case "development":
            config = ReportConfig(
                data_path=Path("data/sample.csv"),
                output_dir=Path("output/dev"),
                currency_symbol="₹",
                has_header=False,
                output_format="text",
            )
        case other:
            raise ValueError(f"Unknown environment: {other}")

    overrides = {}
    for key, value in get_env_config(pyproject).items():
        match key:
            case "data_path" | "output_dir":
                overrides[key] = Path(value)
            case "currency_symbol" | "output_format":
                overrides[key] = str(value)
            case "has_header":
                overrides[key] = bool(value)
            case unknown:
                raise ValueError(f"Unknown [tool.parlor] setting: {unknown}")

    return replace(config, **overrides)
