from pathlib import Path
import pytest
from packages.datasets import load_dictionary, read_lines, write_lines, describe_dictionary


def test_load_dictionary_normalizes(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\n  raise \n\n   \nCAT\ncrane\n", encoding="utf-8")
    assert load_dictionary(p) == ["crane", "raise", "cat", "crane"]


def test_read_lines_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


def test_write_lines_roundtrip_and_describe(tmp_path: Path):
    p = write_lines(["crane", "raise", "cat", "crane"], tmp_path / "sub" / "w.txt")
    assert read_lines(p) == ["crane", "raise", "cat", "crane"]

    desc = describe_dictionary(p, 5)
    assert desc["count"] == 4
    assert desc["count_N"] == 2
    assert len(desc["sha256"]) == 64
