"""CSV loader — reads client, manager and office tables into domain entities."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from distributor.adapters.csv_loader.normalizer import (
    clean_string,
    is_vip_marker,
    normalize_column_name,
)
from distributor.domain.entities.client import Client
from distributor.domain.entities.manager import Manager
from distributor.domain.entities.office import Office
from distributor.domain.value_objects.coordinate import Coordinate

logger = logging.getLogger(__name__)

ID_COLUMNS = ("id", "идентификатор", "guid", "guid_клиента")
COUNTRY_COLUMNS = ("country", "страна")
CITY_COLUMNS = ("city", "город", "населённый_пункт", "населенный_пункт")
SEGMENT_COLUMNS = ("segment", "status", "сегмент", "сегмент_клиента", "статус", "skills", "навыки")
OFFICE_COLUMNS = ("office", "office_id", "офис", "отдел", "филиал")
CLIENT_COUNT_COLUMNS = (
    "client_count",
    "clients",
    "количество_клиентов",
    "клиентов",
    "current_load",
)
LATITUDE_COLUMNS = ("latitude", "lat", "широта")
LONGITUDE_COLUMNS = ("longitude", "lon", "lng", "долгота")


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Try to detect delimiter (comma/semicolon/tab) to support Excel RU exports."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    delims = [",", ";", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect

    return csv.excel


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts with normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = []
        for raw_row in reader:
            row = {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            if any(row.values()):
                rows.append(row)

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def _pick(row: dict[str, str | None], columns: tuple[str, ...]) -> str | None:
    for column in columns:
        value = row.get(column)
        if value:
            return value
    return None


def _parse_float(value: str | None) -> float | None:
    """Safely parse a float from a string."""
    if not value:
        return None
    try:
        return float(value.replace(",", ".").strip())
    except ValueError:
        return None


def _parse_int(value: str | None) -> int:
    if not value:
        return 0
    try:
        # handle "4", "4.0"
        return max(0, int(float(value.replace(",", ".").strip())))
    except ValueError:
        return 0


def load_clients(file_path: Path) -> list[Client]:
    """Load the clients CSV.

    Expected columns (after normalization):
        id, страна (country), город (city), сегмент (segment)
    """
    clients = []
    for line_no, row in enumerate(_read_csv(file_path), start=2):
        client_id = _pick(row, ID_COLUMNS)
        if not client_id:
            logger.warning("%s:%d: client row without id, skipping", file_path.name, line_no)
            continue
        clients.append(Client(
            id=client_id,
            country=_pick(row, COUNTRY_COLUMNS) or "",
            city=_pick(row, CITY_COLUMNS) or "",
            is_vip=is_vip_marker(_pick(row, SEGMENT_COLUMNS)),
        ))
    logger.info("Parsed %d clients (%d VIP)", len(clients), sum(c.is_vip for c in clients))
    return clients


def load_managers(file_path: Path) -> list[Manager]:
    """Load the managers CSV.

    Expected columns (after normalization):
        id, офис (office), количество_клиентов (client_count), статус (segment)
    """
    managers = []
    for line_no, row in enumerate(_read_csv(file_path), start=2):
        manager_id = _pick(row, ID_COLUMNS)
        if not manager_id:
            logger.warning("%s:%d: manager row without id, skipping", file_path.name, line_no)
            continue
        managers.append(Manager(
            id=manager_id,
            office_id=_pick(row, OFFICE_COLUMNS) or "",
            initial_client_count=_parse_int(_pick(row, CLIENT_COUNT_COLUMNS)),
            is_vip=is_vip_marker(_pick(row, SEGMENT_COLUMNS)),
        ))
    logger.info("Parsed %d managers", len(managers))
    return managers


def load_offices(file_path: Path) -> list[Office]:
    """Load the offices CSV.

    Expected columns (after normalization):
        id, широта (latitude), долгота (longitude)

    If either coordinate cannot be parsed the office is kept without a location.
    """
    offices = []
    for line_no, row in enumerate(_read_csv(file_path), start=2):
        office_id = _pick(row, ID_COLUMNS + OFFICE_COLUMNS)
        if not office_id:
            logger.warning("%s:%d: office row without id, skipping", file_path.name, line_no)
            continue
        lat = _parse_float(_pick(row, LATITUDE_COLUMNS))
        lon = _parse_float(_pick(row, LONGITUDE_COLUMNS))
        location = Coordinate(latitude=lat, longitude=lon) if lat is not None and lon is not None else None
        offices.append(Office(id=office_id, location=location))
    logger.info(
        "Parsed %d offices (%d with coords)",
        len(offices), sum(o.location is not None for o in offices),
    )
    return offices
