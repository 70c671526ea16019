"""Tests for the distribute command-line tool."""

from __future__ import annotations

import json

import pytest

from distributor.application.ports.geocoder_port import GeocoderPort
from distributor.domain.value_objects.coordinate import Coordinate
from distributor.tools import distribute


class FakeGeocoder(GeocoderPort):
    async def locate_city(self, city, language):
        if city == "Караганда":
            return Coordinate(latitude=49.806406, longitude=73.085485)
        return None


@pytest.fixture(autouse=True)
def fake_geocoder(monkeypatch):
    monkeypatch.setattr(distribute, "build_geocoder", lambda config: FakeGeocoder())


def test_cli_writes_result(data_dir):
    output = data_dir / "out.json"

    code = distribute.main(["--data-dir", str(data_dir), "--output", str(output)])

    assert code == 0
    allocations = json.loads(output.read_text(encoding="utf-8"))
    by_client = {a["client_id"]: a["manager_id"] for a in allocations}
    # Алматы is not resolved by the fake, so c-1 joins the foreign-client pool
    assert by_client == {"c-1": "m-1", "c-2": "m-2", "c-3": "m-1", "c-4": "m-1", "c-5": "m-4"}


def test_cli_missing_data_dir(tmp_path):
    code = distribute.main(["--data-dir", str(tmp_path / "nope"), "--output", str(tmp_path / "r.json")])
    assert code == 1


def test_cli_configuration_error(data_dir):
    (data_dir / "managers.csv").write_text("ID,Офис\nm-9,Отдел 99\n", encoding="utf-8")

    code = distribute.main(["--data-dir", str(data_dir), "--output", str(data_dir / "r.json")])

    assert code == 2
    assert not (data_dir / "r.json").exists()
