# Expose the NLP helpers for easier imports when using this package.

from .language import get_language, get_language_probabilities      # langdetect
from .tagging import get_people_names, get_search_terms, get_sentences  # spaCy (NLTK fallback)
from .sentiment import (                                            # VADER score / HF labels
    analyze_sentiment,
    get_sentiment_classifier,
    predict_sentiment,
)

# Define what symbols are exported when `from package import *` is used
__all__ = [
    "get_language",
    "get_language_probabilities",
    "get_people_names",
    "get_search_terms",
    "get_sentences",
    "analyze_sentiment",
    "get_sentiment_classifier",
    "predict_sentiment",
]

# Package version identifier
__version__ = "0.1.0"
