"""Tests del dataset loader.

Ejecutar:
    pytest tests/test_loader.py -v
"""

import json

import pytest

from isens_coop.common.errors import ArchiveLoadError
from isens_coop.core.domain import FIELD_LABELS, TelemetrySample
from isens_coop.core.loader import (
    MISSING_TIMESTAMP,
    load_archive,
    normalize_record,
    normalize_records,
    read_archive_file,
)


# =============================================================================
# NORMALIZACIÓN
# =============================================================================

class TestNormalizeRecord:
    """Extracción de los seis campos etiquetados."""

    def test_well_formed_record(self, record_factory):
        sample = normalize_record(record_factory(time="08:00", temp=33, humidity=70, co2=1300, nh3=6, pm25=40))

        assert sample == TelemetrySample(
            time="08:00", temp=33.0, humidity=70.0, co2=1300.0, nh3=6.0, pm25=40.0
        )
        assert isinstance(sample.temp, float)

    def test_field_labels_contract(self):
        """Las etiquetas son el contrato con el archivo; no deben cambiar."""
        assert FIELD_LABELS == {
            "time": "Timestamp",
            "temp": "Temperature (°C)",
            "humidity": "Humidity (%)",
            "co2": "CO₂ (ppm)",
            "nh3": "Ammonia (ppm)",
            "pm25": "PM2.5 (µg/m³)",
        }

    def test_numeric_strings_are_coerced(self, record_factory):
        sample = normalize_record(record_factory(temp="31.5", co2=" 1100 "))

        assert sample.temp == 31.5
        assert sample.co2 == 1100.0

    def test_timestamp_coerced_to_text(self, record_factory):
        sample = normalize_record(record_factory(time=800))
        assert sample.time == "800"

    @pytest.mark.parametrize("raw, expected", [(1700000000.0, "1700000000"), (8.5, "8.5"), ("08:00", "08:00")])
    def test_integral_float_timestamp_has_no_decimal(self, record_factory, raw, expected):
        assert normalize_record(record_factory(time=raw)).time == expected

    def test_missing_numeric_field_becomes_zero(self, record_factory):
        record = record_factory()
        del record["Ammonia (ppm)"]

        sample = normalize_record(record)

        assert sample.nh3 == 0.0
        assert sample.temp == 28.0

    @pytest.mark.parametrize("bad", ["abc", None, "", float("nan"), float("inf"), [1, 2]])
    def test_non_numeric_value_becomes_zero(self, record_factory, bad):
        sample = normalize_record(record_factory(pm25=bad))
        assert sample.pm25 == 0.0

    def test_missing_timestamp_placeholder(self, record_factory):
        record = record_factory()
        del record["Timestamp"]

        assert normalize_record(record).time == MISSING_TIMESTAMP

    def test_non_mapping_record_degrades(self):
        sample = normalize_record(None)

        assert sample.time == MISSING_TIMESTAMP
        assert (sample.temp, sample.humidity, sample.co2, sample.nh3, sample.pm25) == (0.0,) * 5


class TestNormalizeRecords:
    """Ningún registro se descarta y el orden se preserva."""

    def test_order_preserved(self, record_factory):
        records = [record_factory(time=t) for t in ("08:00", "08:10", "08:20")]
        assert [s.time for s in normalize_records(records)] == ["08:00", "08:10", "08:20"]

    def test_malformed_records_are_kept(self, record_factory):
        records = [record_factory(), {"garbage": True}, record_factory(temp="n/a")]

        samples = normalize_records(records)

        assert len(samples) == 3
        assert samples[1].time == MISSING_TIMESTAMP
        assert samples[2].temp == 0.0

    def test_empty_input(self):
        assert normalize_records([]) == []
        assert normalize_records(None) == []


# =============================================================================
# LECTURA DE ARCHIVO
# =============================================================================

class TestReadArchiveFile:
    """Lectura con pandas desde JSON y CSV."""

    def test_json_archive(self, tmp_path, record_factory):
        path = tmp_path / "broiler_data.json"
        path.write_text(
            json.dumps([record_factory(time="08:00"), record_factory(time="08:10", temp=33)], ensure_ascii=False),
            encoding="utf-8",
        )

        samples = load_archive(path)

        assert [s.time for s in samples] == ["08:00", "08:10"]
        assert samples[1].temp == 33.0

    def test_json_missing_field_in_one_record(self, tmp_path, record_factory):
        partial = record_factory(time="08:10")
        del partial["CO₂ (ppm)"]
        del partial["Timestamp"]
        path = tmp_path / "data.json"
        path.write_text(json.dumps([record_factory(), partial], ensure_ascii=False), encoding="utf-8")

        samples = load_archive(path)

        assert len(samples) == 2
        assert samples[1].co2 == 0.0
        assert samples[1].time == MISSING_TIMESTAMP

    def test_json_numeric_timestamp_kept_with_gaps(self, tmp_path, record_factory):
        """Un timestamp numérico conserva su texto aunque otro registro no lo tenga."""
        path = tmp_path / "data.json"
        path.write_text(
            json.dumps([record_factory(time=1700000000), {"Temperature (°C)": 29}], ensure_ascii=False),
            encoding="utf-8",
        )

        samples = load_archive(path)

        assert samples[0].time == "1700000000"
        assert samples[1].time == MISSING_TIMESTAMP
        assert samples[1].temp == 29.0

    def test_csv_archive(self, tmp_path):
        path = tmp_path / "data.csv"
        header = ",".join(FIELD_LABELS.values())
        path.write_text(f"{header}\n08:00,29.5,70,1250,,38\n", encoding="utf-8")

        samples = load_archive(path)

        assert len(samples) == 1
        assert samples[0].time == "08:00"
        assert samples[0].co2 == 1250.0
        assert samples[0].nh3 == 0.0

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ArchiveLoadError):
            read_archive_file(tmp_path / "nope.json")

    def test_unsupported_format_raises(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("hello", encoding="utf-8")

        with pytest.raises(ArchiveLoadError):
            read_archive_file(path)

    def test_corrupt_json_raises(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ArchiveLoadError):
            read_archive_file(path)
