# Import key utilities so they are accessible at package level
from .config import Settings, get_settings, SPACY_MODELS
from .errors import NLPHelperError, ModelLoadError, VocabularyError
from .io_utils import hash_stem, read_text, read_json

# Define what gets exported when `from package import *` is used
__all__ = [
    "Settings",
    "get_settings",
    "SPACY_MODELS",
    "NLPHelperError",
    "ModelLoadError",
    "VocabularyError",
    "hash_stem",
    "read_text",
    "read_json",
]

# Version of this package/module
__version__ = "0.1.0"
