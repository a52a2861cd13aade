"""CLI: score and validate receipt files."""

import json
from pathlib import Path

import pytest

from cli import main

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


def test_score_prints_total_and_breakdown(capsys):
    main(["score", str(SAMPLES_DIR / "target.json")])
    out = capsys.readouterr().out
    assert "Total: 28" in out
    assert "item_descriptions: 6" in out


def test_score_json_output(capsys):
    main(["score", str(SAMPLES_DIR / "corner_market.json"), "--json"])
    result = json.loads(capsys.readouterr().out)
    assert result["points"] == 109
    assert result["breakdown"]["round_dollar"] == 50
    assert sum(result["breakdown"].values()) == 109


def test_score_missing_file_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["score", str(tmp_path / "nope.json")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_score_invalid_json_exits_1(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{oops", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["score", str(path)])
    assert exc_info.value.code == 1


def test_validate_ok(capsys):
    main(["validate", str(SAMPLES_DIR / "target.json")])
    assert "OK" in capsys.readouterr().out


def test_validate_reports_errors(tmp_path, capsys):
    path = tmp_path / "receipt.json"
    path.write_text(json.dumps({"retailer": 1, "items": []}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["validate", str(path)])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "retailer: 1 is not of type 'string'" in captured.out
    assert "4 error(s)" in captured.err
