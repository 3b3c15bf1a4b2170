"""Tests for the offline population report CLI."""
import json
import sys

import pytest

from scripts import population_report


@pytest.fixture
def snapshot(tmp_path):
    rows = [
        {"user_id": f"u{i}", "answers": [{"questionId": 12, "value": 1 if i < 5 else 7}]}
        for i in range(10)
    ]
    rows.append("not an object")
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["population_report.py", *argv])
    population_report.main()


class TestPopulationReport:

    def test_load_snapshot_skips_non_objects(self, snapshot):
        submissions = population_report.load_snapshot(snapshot)
        assert len(submissions) == 10
        assert submissions[0].user_id == "u0"

    def test_load_snapshot_rejects_non_list(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(SystemExit):
            population_report.load_snapshot(path)

    def test_stats_json(self, monkeypatch, capsys, snapshot):
        _run(monkeypatch, "stats", str(snapshot), "--json")
        payload = json.loads(capsys.readouterr().out)
        assert [s["question_id"] for s in payload["statistics"]] == [12]
        assert payload["summary"]["high_variance_question_ids"] == [12]

    def test_stats_table(self, monkeypatch, capsys, snapshot):
        _run(monkeypatch, "stats", str(snapshot))
        out = capsys.readouterr().out
        assert "Respondents:           10" in out

    def test_distribution_json(self, monkeypatch, capsys, snapshot):
        _run(monkeypatch, "distribution", str(snapshot), "-q", "12", "--json")
        rows = json.loads(capsys.readouterr().out)
        assert rows[0] == {"value": 1, "count": 5, "percentage": 50.0}
        assert rows[6]["count"] == 5

    def test_distribution_unknown_question(self, monkeypatch, snapshot):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "distribution", str(snapshot), "-q", "99")
        assert exc.value.code == 1

    def test_numeric_user_ids(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "numeric.json"
        rows = [{"user_id": i, "answers": [{"questionId": 3, "value": 5}]} for i in range(3)]
        path.write_text(json.dumps(rows), encoding="utf-8")
        assert [s.user_id for s in population_report.load_snapshot(path)] == ["0", "1", "2"]
        _run(monkeypatch, "stats", str(path), "--json")
        payload = json.loads(capsys.readouterr().out)
        assert payload["summary"]["respondent_count"] == 3
