# usage: helper functions for reading inputs and naming outputs
from pathlib import Path
import hashlib
import json


def read_text(p: Path) -> str:
    """Try common encodings; fall back to 'ignore' decoding to salvage bytes."""
    p = Path(p)
    for enc in ("utf-8", "utf-8-sig", "cp1252", "latin-1"):
        try:
            return p.read_text(encoding=enc)
        except UnicodeDecodeError:
            continue
    return p.read_bytes().decode("utf-8", "ignore")


def read_json(p: Path):
    """Load a UTF-8 JSON file."""
    return json.loads(Path(p).read_text(encoding="utf-8"))


def hash_stem(p: Path) -> str:
    """
    Generate a hashed filename stem.

    Example:
        Path("notes.txt") -> "notes_ab12cd"

    The 6 hex chars come from a SHA-1 of the full path, so two files with the
    same name in different folders still get distinct output names.
    """
    stem = p.stem
    h = hashlib.sha1(str(p).encode("utf-8")).hexdigest()[:6]
    return f"{stem}_{h}"
