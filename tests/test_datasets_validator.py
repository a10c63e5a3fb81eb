from pathlib import Path
from packages.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    # N=5; all lowercase alpha; letter-unique answers; answers subset of allowed
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["arise", "count", "lymph"])
    _write(allw, ["arise", "count", "lymph", "sassy", "level"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["answers_subset_allowed"] is True
    assert rep["answers_letter_unique"] is True
    assert rep["allowed"]["repeated_letter_words"] == 2
    assert rep["pairs"]["disjoint_pairs"] == 3
    assert rep["pairs"]["acceptance_rate"] == 1.0
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and "pairs=3" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    # N mismatch and invalid chars should be flagged
    ans = tmp_path / "answers_6.txt"
    allw = tmp_path / "allowed_6.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'planet' is fine
    ans.write_text("planet\ncrane\n???\n", encoding="utf-8")
    allw.write_text("planet\nsettle\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(ans), str(allw))
    assert rep["passed"] is False
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["arise", "count", "lymph"])
    _write(allw, ["arise", "lymph"])  # missing 'count'

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers_subset_allowed"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_repeated_letters(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["arise", "count", "level"])
    _write(allw, ["arise", "count", "level"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers_letter_unique"] is False
    assert any("repeated letters" in msg for msg in rep["issues"])


def test_validate_wordlists_no_disjoint_pair(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["arise", "crane", "stack"])
    _write(allw, ["arise", "crane", "stack"])

    rep = validate_wordlists(5, str(ans), str(allw), max_attempts=50)
    assert rep["passed"] is False
    assert rep["pairs"]["disjoint_pairs"] == 0
    assert rep["pairs"]["exhaustion_probability"] == 1.0
    assert rep["pairs"]["max_attempts"] == 50


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(5, str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
    assert pretty_summary(rep).endswith("FAIL")
