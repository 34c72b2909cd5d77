import json

from cli import main

SNAPSHOT = {
    "locations": [{"id": "L1", "name": "Block A"}],
    "staff": [{"id": "s1", "name": "Kumar", "location_id": "L1", "category": "Permanent"}],
    "topics": [{"id": "t1", "name": "Kindness"}],
    "verses": [{"id": "v1", "topic_id": "t1", "text": "Verse one"}],
    "sharing_rules": [{"day": "Friday", "location_ids": ["L1"]}],
}


def write_snapshot(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return path


def test_prints_table(tmp_path, capsys):
    assert main([str(write_snapshot(tmp_path)), "--month", "2024-02"]) == 0
    out = capsys.readouterr().out
    assert "02-02-2024" in out
    assert "Kumar" in out


def test_writes_exports(tmp_path):
    snapshot = write_snapshot(tmp_path)
    csv_path = tmp_path / "out.csv"
    xlsx_path = tmp_path / "out.xlsx"
    assert main([str(snapshot), "--month", "2024-02", "--csv", str(csv_path), "--xlsx", str(xlsx_path)]) == 0
    assert csv_path.exists() and xlsx_path.exists()


def test_reports_bad_input(tmp_path):
    assert main([str(tmp_path / "missing.json"), "--month", "2024-02"]) == 2
    assert main([str(write_snapshot(tmp_path)), "--month", "Feb"]) == 2
