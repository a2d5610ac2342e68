import json
from pathlib import Path

import pandas as pd
import pytest

from application.batch import report_records, score_pairs
from application.engine import LanguageFamilyEngine
from infrastructure.io.datasets import read_table, write_json


def test_score_pairs_report(wide_engine: LanguageFamilyEngine) -> None:
    df = pd.DataFrame(
        {
            "guess": ["en-US", "en-GB", "de-DE", "en", "xx"],
            "correct": ["en-US", "en-US", "en-US", "fi", "en"],
        }
    )
    out = score_pairs(wide_engine, df)
    records = report_records(out)

    assert [r["verdict"] for r in records] == ["correct", "base_match", "wrong", "wrong", "wrong"]
    assert [r["status"] for r in records] == ["ready", "ready", "ready", "ready", "unresolvable"]
    assert [r["score"] for r in records] == [100, 99, 67, 0, None]
    assert records[1]["siblings"]
    assert not records[2]["siblings"]
    assert records[2]["shared_prefix"] == ["Indo-European", "Germanic", "West Germanic"]
    assert records[2]["guess_branch"] == ["German"]
    assert records[4]["unresolved"] == ["xx"]


def test_score_pairs_when_not_ready() -> None:
    out = score_pairs(LanguageFamilyEngine(), pd.DataFrame({"guess": ["de"], "correct": ["en"]}))
    record = report_records(out)[0]
    assert record["status"] == "not_ready"
    assert record["score"] is None


def test_score_pairs_missing_column(wide_engine: LanguageFamilyEngine) -> None:
    with pytest.raises(KeyError):
        score_pairs(wide_engine, pd.DataFrame({"guess": ["en"]}))


def test_read_table_and_write_json(tmp_path: Path) -> None:
    pairs = tmp_path / "pairs.csv"
    pairs.write_text("guess,correct\nen,\n", encoding="utf-8")
    df = read_table(pairs)
    assert df.loc[0, "correct"] == ""

    out = write_json(tmp_path / "nested" / "report.json", {"ok": True})
    assert json.loads(out.read_text(encoding="utf-8")) == {"ok": True}

    notes = tmp_path / "notes.txt"
    notes.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        read_table(notes)


def test_cyclic_ancestry_is_reported_per_row(caplog: pytest.LogCaptureFixture) -> None:
    engine = LanguageFamilyEngine.from_text(
        "ID,Name,ISO639P3code,Level,Parent_ID\n"
        "a1,A,aaa,language,b1\n"
        "b1,B,,family,a1\n"
        "eng1234,English,eng,language,\n"
    )
    df = pd.DataFrame({"guess": ["en", "aaa"], "correct": ["en", "en"]})

    with caplog.at_level("WARNING"):
        records = report_records(score_pairs(engine, df))

    assert [r["status"] for r in records] == ["ready", "cycle_detected"]
    assert records[0]["score"] == 100
    assert records[1]["score"] is None
    assert records[1]["common_ancestor"] is None
    assert records[1]["shared_prefix"] == []
    assert "parent cycle at node a1" in caplog.text
