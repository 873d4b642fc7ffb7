from pathlib import Path
from flames.datasets import pretty_summary, read_pairs, validate_pairs_file, write_pairs


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_pairs_happy_path(tmp_path: Path):
    f = tmp_path / "pairs.txt"
    _write(f, ["# name pairs", "Naren,Priya", "", "Romeo, Juliet"])

    rep = validate_pairs_file(str(f))
    assert rep["passed"] is True
    assert rep["count"] == 2 and rep["unique_count"] == 2
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "pairs=2" in s and s.endswith("OK")


def test_validate_pairs_flags_errors(tmp_path: Path):
    f = tmp_path / "pairs.txt"
    _write(f, ["Naren,Priya", "justone", "a,b,c", "Jo@n,Mary", "John,john", "naren,PRIYA"])

    rep = validate_pairs_file(str(f))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert rep["identical_pairs"] == 1
    assert rep["count"] == 2 and rep["unique_count"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_pairs_missing_file(tmp_path: Path):
    rep = validate_pairs_file(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_read_write_pairs(tmp_path: Path):
    f = tmp_path / "out" / "pairs.txt"
    write_pairs([("Ann", "Bob"), ("Cy", "Di")], f)
    assert read_pairs(f) == [("Ann", "Bob"), ("Cy", "Di")]
