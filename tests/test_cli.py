"""Tests del modo --simulate de la CLI.

Ejecutar:
    pytest tests/test_cli.py -v
"""

import json
import logging

import pytest

from isens_coop.cli import main


@pytest.fixture
def archive_file(tmp_path, record_factory):
    path = tmp_path / "broiler_data.json"
    records = [record_factory(time=f"08:{i:02d}") for i in range(4)]
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return path


class TestSimulate:
    """Replay offline con ManualTicker."""

    def test_simulate_runs_n_ticks(self, archive_file, caplog):
        caplog.set_level(logging.INFO)

        main(["--archive", str(archive_file), "--simulate", "5"])

        assert "Simulation finished after 5 ticks" in caplog.text
        assert "time=08:00" in caplog.text

    def test_simulate_missing_archive(self, tmp_path, caplog):
        caplog.set_level(logging.INFO)

        main(["--archive", str(tmp_path / "missing.json"), "--simulate", "3"])

        assert "nothing to simulate" in caplog.text

    def test_rejects_non_positive_tick(self, archive_file):
        with pytest.raises(SystemExit):
            main(["--archive", str(archive_file), "--tick-seconds", "0", "--simulate", "1"])
