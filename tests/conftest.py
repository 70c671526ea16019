"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

CLIENTS_CSV = """\
ID,Страна,Город,Сегмент
c-1,Казахстан,Алматы,Mass
c-2,Казахстан,Астана,VIP
c-3,Россия,Москва,Mass
c-4,Казахстан,,Mass
c-5,Kazahstan,Караганда,Mass
"""

MANAGERS_CSV = """\
ID,Офис,Количество клиентов,Статус
m-1,Отдел 1,0,
m-2,Отдел 2,3,VIP
m-3,Отдел 3,1,
m-4,Отдел 3,0,
"""

OFFICES_CSV = """\
ID,Широта,Долгота
Отдел 1,43.238949,76.945465
Отдел 2,51.128207,71.430411
Отдел 3,49.806406,73.085485
"""


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory with a small, consistent set of CSV tables."""
    (tmp_path / "clients.csv").write_text(CLIENTS_CSV, encoding="utf-8")
    (tmp_path / "managers.csv").write_text(MANAGERS_CSV, encoding="utf-8")
    (tmp_path / "offices.csv").write_text(OFFICES_CSV, encoding="utf-8")
    return tmp_path
