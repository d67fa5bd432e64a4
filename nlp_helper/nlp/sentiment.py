# usage: document sentiment (VADER score) + model-based sentiment labels (HF)
import logging
from functools import lru_cache

from nltk.sentiment import SentimentIntensityAnalyzer
from transformers import pipeline as hf_pipeline

from ..shared.config import get_settings
from ..shared.errors import ModelLoadError
from .pipeline import ensure_nltk

logger = logging.getLogger(__name__)

# HuggingFace pipeline expects max 512 tokens
MAX_CLASSIFIER_CHARS = 512


@lru_cache(maxsize=1)
def _vader():
    ensure_nltk("vader_lexicon")
    return SentimentIntensityAnalyzer()


def analyze_sentiment(text: str):
    """
    Document-level sentiment score in [-1.0, 1.0] (VADER compound).

    Returns None when there is no text to score.
    """
    if not text or not text.strip():
        return None
    return float(_vader().polarity_scores(text)["compound"])


def get_sentiment_classifier(model=None, device=None):
    """
    Build a text-classification pipeline for sentiment labels.

    `model` defaults to the configured sentiment model; `device` to the
    configured device.
    """
    settings = get_settings()
    model = model or settings.sentiment_model
    device = device or settings.device
    try:
        clf = hf_pipeline("text-classification", model=model, device=device)
    except (OSError, ValueError) as e:
        raise ModelLoadError(f"Sentiment model {model!r} could not be loaded: {e}") from e
    logger.info("Loaded sentiment classifier %s on %s", model, device)
    return clf


def predict_sentiment(text: str, sentiment_classifier):
    """Most likely sentiment label for `text`, or None."""
    if not text or not text.strip():
        return None
    out = sentiment_classifier(text[:MAX_CLASSIFIER_CHARS])
    if not out:
        return None
    # top_k=None pipelines nest one list per input
    if isinstance(out[0], list):
        out = out[0]
    if not out:
        return None
    best = max(out, key=lambda x: x["score"])
    return best["label"]
