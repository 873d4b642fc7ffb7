from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def parse_pair(line: str) -> Tuple[str, str] | None:
    """
    "name1,name2" -> ("name1", "name2"); None for blanks, comments and
    lines without exactly one comma.
    """
    s = line.strip()
    if not s or s.startswith("#"):
        return None
    parts = s.split(",")
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def read_pairs(p: Path | str) -> List[Tuple[str, str]]:
    """All well-formed pairs of a pairs file, in file order."""
    out = []
    for ln in read_lines(p):
        pair = parse_pair(ln)
        if pair is not None:
            out.append(pair)
    return out


def write_pairs(pairs: Iterable[Tuple[str, str]], p: Path | str) -> str:
    """
    Write pairs one per line, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(f"{a},{b}" for a, b in pairs) + "\n", encoding="utf-8")
    return str(p)
