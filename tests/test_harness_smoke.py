import csv
import json
from pathlib import Path

from apps.cli.run import main
from flames.harness import run_batch, run_case, summarize, write_csv


def test_run_case_smoke():
    r = run_case("Naren", "Priya")
    assert r["result"] == "M" and r["label"] == "Marriage"
    assert r["remainder_count"] == 6
    assert r["eliminated"] == ["S", "F", "A", "L", "E"]
    assert r["time_ms"] >= 0


def test_run_batch_sample_and_summary():
    pairs = [("Naren", "Priya"), ("John", "John"), ("", "Bob"), ("Alice", "Bob")]
    results = run_batch(pairs)
    assert [r["result"] for r in results] == ["M", "S", "F", "A"]
    assert len(run_batch(pairs, sample=2)) == 2

    s = summarize(results)
    assert s["num_cases"] == 4
    assert s["results"] == {"F": 1, "L": 0, "A": 1, "M": 1, "E": 0, "S": 1}
    assert s["degenerate"] == 1
    assert s["remainder"]["max"] == 8
    assert s["remainder"]["median"] == 4.5


def test_summarize_empty():
    s = summarize([])
    assert s["num_cases"] == 0 and sum(s["results"].values()) == 0


def test_write_csv(tmp_path: Path):
    path = write_csv(run_batch([("Naren", "Priya")]), str(tmp_path / "r.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["common_letters"] == "ar"
    assert rows[0]["elim_1"] == "S" and rows[0]["elim_5"] == "E"


def test_cli_run(tmp_path: Path, capsys):
    pairs = tmp_path / "pairs.txt"
    pairs.write_text("Naren,Priya\nRomeo,Juliet\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    assert main(["--pairs", str(pairs), "--outdir", str(outdir), "--progress", "off"]) == 0

    manifests = list(outdir.glob("*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("*.csv"))) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 2 and manifest["pairs"]["passed"] is True
    assert "pairs=2" in capsys.readouterr().out


def test_cli_strict_fails_on_bad_file(tmp_path: Path):
    pairs = tmp_path / "pairs.txt"
    pairs.write_text("John,John\n", encoding="utf-8")
    assert main(["--pairs", str(pairs), "--outdir", str(tmp_path), "--strict"]) == 1
