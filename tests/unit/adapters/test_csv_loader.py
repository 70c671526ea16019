"""Tests for CSV loader functions."""

import csv
import tempfile
from pathlib import Path

from distributor.adapters.csv_loader import loader
from distributor.adapters.csv_loader.loader import load_clients, load_managers, load_offices
from distributor.adapters.csv_loader.normalizer import normalize_column_name


def _write_csv(rows: list[dict], path: Path, encoding: str = "utf-8-sig", delimiter: str = ",") -> None:
    """Helper to write a test CSV file."""
    if not rows:
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys(), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(rows)


def test_load_clients_basic():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "clients.csv"
        _write_csv([
            {"ID": "c-1", "Страна": "Казахстан", "Город": "Алматы", "Сегмент": "Mass"},
            {"ID": "c-2", "Страна": "Россия", "Город": "Москва", "Сегмент": "VIP клиент"},
            {"ID": "c-3", "Страна": "Казахстан", "Город": "", "Сегмент": "vip"},
        ], csv_path)

        clients = load_clients(csv_path)
        assert [c.id for c in clients] == ["c-1", "c-2", "c-3"]
        assert clients[0].country == "Казахстан"
        assert clients[0].city == "Алматы"
        assert clients[0].is_vip is False
        assert clients[1].is_vip is True
        assert clients[2].city == ""
        assert clients[2].is_vip is True


def test_load_clients_skips_rows_without_id():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "clients.csv"
        _write_csv([
            {"id": "", "country": "Казахстан", "city": "Алматы", "segment": ""},
            {"id": "c-2", "country": "Казахстан", "city": "Астана", "segment": ""},
        ], csv_path)

        clients = load_clients(csv_path)
        assert [c.id for c in clients] == ["c-2"]


def test_load_managers_parses_load_and_vip():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "managers.csv"
        _write_csv([
            {"ID": "m-1", "Офис": " Отдел 1 ", "Количество клиентов": "4", "Навыки": "VIP, KZ"},
            {"ID": "m-2", "Офис": "Отдел 2", "Количество клиентов": "abc", "Навыки": ""},
            {"ID": "m-3", "Офис": "Отдел 2", "Количество клиентов": "7.0", "Навыки": "ENG"},
        ], csv_path)

        managers = load_managers(csv_path)
        assert [m.id for m in managers] == ["m-1", "m-2", "m-3"]
        assert managers[0].office_id == "Отдел 1"
        assert managers[0].initial_client_count == 4
        assert managers[0].is_vip is True
        assert managers[1].initial_client_count == 0
        assert managers[1].is_vip is False
        assert managers[2].initial_client_count == 7
        assert managers[2].clients == []


def test_load_offices_with_coordinates():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "offices.csv"
        _write_csv([
            {"ID": "Отдел 1", "Широта": "43.238", "Долгота": "76.945"},
            {"ID": "Отдел 2", "Широта": "51,128", "Долгота": "71,430"},
        ], csv_path, delimiter=";")

        offices = load_offices(csv_path)
        assert len(offices) == 2
        assert offices[0].id == "Отдел 1"
        assert offices[0].location.latitude == 43.238
        assert offices[0].location.longitude == 76.945
        assert offices[1].location.latitude == 51.128


def test_load_offices_unparsable_coordinate_keeps_office():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "offices.csv"
        _write_csv([
            {"id": "Отдел 1", "latitude": "43.2", "longitude": "n/a"},
            {"id": "Отдел 2", "latitude": "", "longitude": "71.4"},
        ], csv_path)

        offices = load_offices(csv_path)
        assert [o.id for o in offices] == ["Отдел 1", "Отдел 2"]
        assert offices[0].location is None
        assert offices[1].location is None


def test_semicolon_delimiter_sniffing_for_excel_ru():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "managers.csv"
        csv_path.write_text(
            "ID;Офис;Количество клиентов;Статус\nm-1;Отдел 1;2;VIP\n",
            encoding="utf-8-sig",
        )

        managers = load_managers(csv_path)
        assert len(managers) == 1
        assert managers[0].office_id == "Отдел 1"
        assert managers[0].initial_client_count == 2
        assert managers[0].is_vip is True


def test_column_aliases_survive_header_normalization():
    aliases = (
        loader.ID_COLUMNS + loader.COUNTRY_COLUMNS + loader.CITY_COLUMNS
        + loader.SEGMENT_COLUMNS + loader.OFFICE_COLUMNS + loader.CLIENT_COUNT_COLUMNS
        + loader.LATITUDE_COLUMNS + loader.LONGITUDE_COLUMNS
    )
    for alias in aliases:
        assert normalize_column_name(alias) == alias
