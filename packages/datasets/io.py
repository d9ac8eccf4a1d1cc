from __future__ import annotations
import hashlib
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str) -> List[str]:
    """
    Read a one-word-per-line dictionary: strip, lowercase, drop blanks.
    Words are not otherwise checked; mixed lengths are fine (the game
    filters by length itself).
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def sha256_file(p: Path | str) -> str:
    """SHA-256 of a file's raw bytes, for run manifests."""
    h = hashlib.sha256()
    with Path(p).open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def describe_dictionary(p: Path | str, N: int) -> dict:
    """
    Summary recorded in manifests: path, hash, total words and how many
    have length N.
    """
    words = load_dictionary(p)
    return {
        "path": str(p),
        "sha256": sha256_file(p),
        "count": len(words),
        "count_N": len({w for w in words if len(w) == N}),
    }
