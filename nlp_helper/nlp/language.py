# usage: dominant-language detection (langdetect)
from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

# Ensure consistent results for langdetect
DetectorFactory.seed = 0


def get_language_probabilities(text: str):
    """Candidate languages for `text` as {iso_code: probability}, best first."""
    if not text or not text.strip():
        return {}
    try:
        candidates = detect_langs(text)
    except LangDetectException:
        # no letters to work with (digits, symbols, ...)
        return {}
    return {c.lang: float(c.prob) for c in sorted(candidates, key=lambda c: -c.prob)}


def get_language(text: str):
    """ISO 639-1 code of the dominant language of `text`, or None."""
    probs = get_language_probabilities(text)
    return next(iter(probs), None)
