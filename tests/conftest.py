import pytest

SAMPLE_CSV = """\
2024-01-05,Vanilla,2.00,3,6.00
2024-01-07,Choco, Vanilla Swirl,5.00,2,10.00

2024-01-10,Vanilla,2.00,1,2.00
2024-02-01,Vanilla,2.00,5,10.00
2024-02-03,Mint,3.00,4,12.00
2024-13-01,Mint,3.00,1,3.00
2024-02-09,Mint,3.00,2,5.00
"""


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
