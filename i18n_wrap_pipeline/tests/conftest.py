from pathlib import Path

import pytest

from i18n_wrap.parser import SourceParser
from i18n_wrap.table_loader import NamespaceStringTable

LANDING = {"Landing": {"heroTitle": "Your Favorite Flavors"}}


def write(tmp_path: Path, name: str, content: str) -> Path:
    p = tmp_path / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    return p


@pytest.fixture
def parse():
    parser = SourceParser("tsx")
    return parser.parse


@pytest.fixture
def landing_table() -> NamespaceStringTable:
    return NamespaceStringTable.from_extract_map(LANDING)
