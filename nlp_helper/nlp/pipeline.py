# usage: shared spaCy / NLTK resources (loaded once per process)
import logging
from functools import lru_cache

import nltk

from ..shared.config import get_settings
from ..shared.errors import ModelLoadError

logger = logging.getLogger(__name__)

# NLTK resources used by the fallbacks: (download id, data locator)
NLTK_RESOURCES = {
    "punkt": "tokenizers/punkt",
    "punkt_tab": "tokenizers/punkt_tab",
    "vader_lexicon": "sentiment/vader_lexicon.zip",
}


def ensure_nltk(*packages):
    """Download NLTK data packages that are not installed yet."""
    for pkg in packages:
        try:
            nltk.data.find(NLTK_RESOURCES[pkg])
        except LookupError:
            logger.info("Downloading NLTK resource %s", pkg)
            nltk.download(pkg, quiet=True)


@lru_cache(maxsize=None)
def _load_spacy(name: str):
    try:
        import spacy
        nlp = spacy.load(name)
    except (ImportError, OSError) as e:
        raise ModelLoadError(f"spaCy pipeline {name!r} is not available: {e}") from e
    if "parser" not in nlp.pipe_names and "senter" not in nlp.pipe_names and "sentencizer" not in nlp.pipe_names:
        nlp.add_pipe("sentencizer")
    nlp.max_length = 1_000_000_000
    logger.info("Loaded spaCy pipeline %s (%s)", name, ", ".join(nlp.pipe_names))
    return nlp


def get_nlp(language=None):
    """
    spaCy pipeline for `language` (ISO 639-1 code), or the default one.

    If the language-specific pipeline is not installed, the default pipeline
    is used instead and a warning is logged.
    """
    settings = get_settings()
    name = settings.spacy_model_for(language)
    if name == settings.spacy_model:
        return _load_spacy(name)
    try:
        return _load_spacy(name)
    except ModelLoadError as e:
        logger.warning("%s; using %s", e, settings.spacy_model)
        return _load_spacy(settings.spacy_model)
