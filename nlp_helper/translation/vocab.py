# usage: JSON character vocabularies for the character-level translator
from pathlib import Path
from types import MappingProxyType

from ..shared.errors import VocabularyError
from ..shared.io_utils import read_json

ES_CHAR_TO_INT_FILE = "esCharToInt.json"
INT_TO_EN_CHAR_FILE = "intToEnChar.json"


def load_char_to_int(path: Path):
    """Read a {"char": index} map. Keys must be single characters."""
    try:
        raw = read_json(path)
        mapping = {str(k): int(v) for k, v in raw.items()}
    except (AttributeError, TypeError, ValueError) as e:
        raise VocabularyError(f"{path}: expected a {{char: int}} object ({e})") from e
    bad = [k for k in mapping if len(k) != 1]
    if bad:
        raise VocabularyError(f"{path}: keys must be single characters, got {bad[:5]}")
    return MappingProxyType(mapping)


def load_int_to_char(path: Path):
    """Read an {"index": "char"} map; JSON keys are decimal strings."""
    try:
        raw = read_json(path)
        mapping = {int(k): str(v) for k, v in raw.items()}
    except (AttributeError, TypeError, ValueError) as e:
        raise VocabularyError(f"{path}: expected an {{int: char}} object ({e})") from e
    return MappingProxyType(mapping)
