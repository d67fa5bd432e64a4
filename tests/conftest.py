"""Shared fixtures for the nlp_helper test suite.

Provides a small rule-based spaCy pipeline (no model download needed) and a
tiny character vocabulary pair for the translator tests.
"""

import pytest
import spacy


# ---------------------------------------------------------------------------
# spaCy fixtures
# ---------------------------------------------------------------------------

PERSON_PATTERNS = [
    {"label": "PERSON", "pattern": "Ada Lovelace"},
    {"label": "PERSON", "pattern": "Charles"},
    {"label": "GPE", "pattern": "London"},
]

LEMMAS = {
    "mice": "mouse",
    "running": "run",
    "went": "go",
    "dog": "dog",
}


@pytest.fixture
def blank_nlp():
    """Blank English pipeline with rule-based sentences, entities and lemmas."""
    nlp = spacy.blank("en")
    nlp.add_pipe("sentencizer")
    ruler = nlp.add_pipe("entity_ruler")
    ruler.add_patterns(PERSON_PATTERNS)
    attrs = nlp.add_pipe("attribute_ruler")
    for word, lemma in LEMMAS.items():
        attrs.add(patterns=[[{"LOWER": word}]], attrs={"LEMMA": lemma})
    return nlp


# ---------------------------------------------------------------------------
# Translator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def es_char_to_int():
    """Source vocabulary: a handful of Spanish characters."""
    return {c: i for i, c in enumerate(" aehlor")}


@pytest.fixture
def int_to_en_char():
    """Target vocabulary; 0 and 1 are the start and stop markers."""
    return {i: c for i, c in enumerate("\t\n hello")}
