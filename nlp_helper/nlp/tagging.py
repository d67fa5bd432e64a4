# usage: person names, lemma search terms and sentences (spaCy -> NLTK fallback)
import logging

from nltk.tokenize import sent_tokenize

from ..shared.errors import ModelLoadError
from .pipeline import ensure_nltk, get_nlp

logger = logging.getLogger(__name__)

# Entity labels that are joined into a single token before tagging
NAME_LABELS = {"PERSON", "PER", "ORG", "GPE", "LOC", "NORP", "FAC"}
PERSON_LABELS = {"PERSON", "PER"}

# Punkt model name per ISO 639-1 code
PUNKT_LANGUAGES = {
    "en": "english",
    "es": "spanish",
    "fr": "french",
    "de": "german",
    "it": "italian",
    "pt": "portuguese",
}


def _keep(token) -> bool:
    """Word tokens only: no whitespace, punctuation or other symbols."""
    if token.is_space or token.is_punct:
        return False
    if token.pos_ in ("SYM", "X", "SPACE", "PUNCT"):
        return False
    if token.is_currency:
        return False
    return any(ch.isalnum() for ch in token.text)


def _join_names(doc):
    """Merge multi-word name entities into one token each."""
    spans = [ent for ent in doc.ents if ent.label_ in NAME_LABELS and len(ent) > 1]
    if spans:
        with doc.retokenize() as retokenizer:
            for span in spans:
                retokenizer.merge(span)
    return doc


def get_people_names(text: str, block=None, *, nlp=None):
    """
    Return every personal name in `text`, in document order.

    If `block` is given it is also called once per name as it is found.
    """
    nlp = nlp or get_nlp()
    names = []
    for ent in nlp(text).ents:
        if ent.label_ not in PERSON_LABELS:
            continue
        names.append(ent.text)
        if block is not None:
            block(ent.text)
    return names


def get_search_terms(text: str, language=None, block=None, *, nlp=None):
    """
    Lower-cased search terms for `text`, one or two per word.

    For each word the lemma is emitted first, followed by the word itself
    when it differs from the lemma. Words without a lemma are emitted as-is.
    Multi-word names count as one word.
    """
    nlp = nlp or get_nlp(language)
    terms = []

    def emit(term):
        terms.append(term)
        if block is not None:
            block(term)

    doc = _join_names(nlp(text))
    for t in doc:
        if not _keep(t):
            continue
        token = t.text.lower()
        lemma = t.lemma_.lower() if t.lemma_ else ""
        if lemma:
            emit(lemma)
            if lemma != token:
                emit(token)
        else:
            emit(token)
    return terms


def _nltk_sentences(text: str, language=None):
    ensure_nltk("punkt", "punkt_tab")
    punkt_language = PUNKT_LANGUAGES.get((language or "en").lower().split("-")[0], "english")
    return [s.strip() for s in sent_tokenize(text, language=punkt_language) if s.strip()]


def get_sentences(text: str, language=None, *, nlp=None):
    """Split `text` into sentences (spaCy, falling back to NLTK punkt)."""
    if not text or not text.strip():
        return []
    try:
        nlp = nlp or get_nlp(language)
        return [s.text.strip() for s in nlp(text).sents if s.text.strip()]
    except ModelLoadError as e:
        logger.warning("%s; falling back to NLTK sentence tokenizer", e)
    except ValueError:
        # pathological token edge case -> NLTK fallback
        logger.warning("spaCy failed to segment text; falling back to NLTK")
    return _nltk_sentences(text, language)
