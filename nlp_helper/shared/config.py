# usage: runtime settings (environment variables -> frozen Settings)
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict

# --------- DEFAULTS ---------
DEFAULT_SPACY_MODEL = "en_core_web_sm"
DEFAULT_SENTIMENT_MODEL = "distilbert-base-uncased-finetuned-sst-2-english"
DEFAULT_MODEL_DIR = "models"
DEFAULT_DEVICE = "cpu"

# spaCy pipeline per ISO 639-1 language code
SPACY_MODELS: Dict[str, str] = {
    "en": "en_core_web_sm",
    "es": "es_core_news_sm",
    "fr": "fr_core_news_sm",
    "de": "de_core_news_sm",
    "it": "it_core_news_sm",
    "pt": "pt_core_news_sm",
}


@dataclass(frozen=True)
class Settings:
    spacy_model: str = DEFAULT_SPACY_MODEL
    sentiment_model: str = DEFAULT_SENTIMENT_MODEL
    model_dir: Path = Path(DEFAULT_MODEL_DIR)
    device: str = DEFAULT_DEVICE
    spacy_models: Dict[str, str] = field(default_factory=lambda: dict(SPACY_MODELS))

    def spacy_model_for(self, language=None) -> str:
        """spaCy pipeline name for `language`, or the default pipeline."""
        if language:
            return self.spacy_models.get(language.lower().split("-")[0], self.spacy_model)
        return self.spacy_model

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from NLP_HELPER_* environment variables.

        NLP_HELPER_DEVICE=auto resolves to "cuda" when torch sees a GPU.
        """
        env = os.environ if environ is None else environ
        device = env.get("NLP_HELPER_DEVICE", DEFAULT_DEVICE)
        if device == "auto":
            import torch
            device = "cuda" if torch.cuda.is_available() else "cpu"
        return cls(
            spacy_model=env.get("NLP_HELPER_SPACY_MODEL", DEFAULT_SPACY_MODEL),
            sentiment_model=env.get("NLP_HELPER_SENTIMENT_MODEL", DEFAULT_SENTIMENT_MODEL),
            model_dir=Path(env.get("NLP_HELPER_MODEL_DIR", DEFAULT_MODEL_DIR)),
            device=device,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings.from_env()
