# Convenience imports: the NLP helpers and the Spanish -> English translator.

from .nlp import (
    get_language,
    get_people_names,
    get_search_terms,
    get_sentences,
    analyze_sentiment,
    get_sentiment_classifier,
    predict_sentiment,
)
from .translation import spanish_to_english
from .shared.errors import NLPHelperError, ModelLoadError, VocabularyError

__all__ = [
    "get_language",
    "get_people_names",
    "get_search_terms",
    "get_sentences",
    "analyze_sentiment",
    "get_sentiment_classifier",
    "predict_sentiment",
    "spanish_to_english",
    "NLPHelperError",
    "ModelLoadError",
    "VocabularyError",
]

__version__ = "0.1.0"
