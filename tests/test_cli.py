import json

from schemagraph.cli import main


def _write(path, definitions):
    path.write_text(json.dumps({"definitions": definitions}), encoding="utf-8")
    return path


def test_check_clean_schema(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    document = _write(tmp_path / "schema.json", [{"identifier": "user", "name": "User", "interfaces": ["node"]}])

    assert main(["check", str(document)]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["types"] == {"user": "User"}
    assert report["exports"] == ["user"]
    assert report["implementors"] == {"node": ["user"]}
    assert report["errors"] == []


def test_check_reports_errors(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    document = _write(
        tmp_path / "schema.json",
        [{"identifier": "user", "name": "User"}, {"identifier": "account", "name": "User", "line": 9}],
    )

    assert main(["check", str(document)]) == 1

    captured = capsys.readouterr()
    report = json.loads(captured.out)
    assert report["errors"] == [
        {
            "rule": "TypeNamesAreUnique",
            "location": {"file": str(document), "line": 9},
            "data": {"artifact": "Type name", "value": "User"},
        }
    ]
    assert "TypeNamesAreUnique" in captured.err


def test_no_fail_flag(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    document = _write(tmp_path / "schema.json", [{"identifier": "user", "name": "User"}] * 2)
    assert main(["check", "--no-fail", str(document)]) == 0


def test_invalid_document(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    document = tmp_path / "schema.json"
    document.write_text("{not json", encoding="utf-8")

    assert main(["check", str(document)]) == 2
    assert "schemagraph:" in capsys.readouterr().err


def test_missing_document(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["check", str(tmp_path / "absent.json")]) == 2
