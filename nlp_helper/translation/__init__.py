# Expose the translator entry points at package level.

from .models import CharEncoder, CharDecoder
from .vocab import load_char_to_int, load_int_to_char
from .translator import (
    Es2EnTranslator,
    get_translator,
    spanish_to_english,
    START_TOKEN_INDEX,
    STOP_TOKEN_INDEX,
    MAX_OUT_SEQUENCE_LENGTH,
)

__all__ = [
    "CharEncoder",
    "CharDecoder",
    "load_char_to_int",
    "load_int_to_char",
    "Es2EnTranslator",
    "get_translator",
    "spanish_to_english",
    "START_TOKEN_INDEX",
    "STOP_TOKEN_INDEX",
    "MAX_OUT_SEQUENCE_LENGTH",
]

__version__ = "0.1.0"
