# usage: greedy character-level Spanish -> English translation
import logging
import pickle
from functools import lru_cache
from pathlib import Path

import numpy as np
import torch

from ..nlp.tagging import get_sentences
from ..shared.config import get_settings
from ..shared.errors import ModelLoadError, VocabularyError
from .models import decoder_from_state_dict, encoder_from_state_dict
from .vocab import ES_CHAR_TO_INT_FILE, INT_TO_EN_CHAR_FILE, load_char_to_int, load_int_to_char

logger = logging.getLogger(__name__)

START_TOKEN_INDEX = 0
STOP_TOKEN_INDEX = 1
MAX_OUT_SEQUENCE_LENGTH = 60

ENCODER_FILE = "es2en_char_encoder.pt"
DECODER_FILE = "es2en_char_decoder.pt"


def _check_indices(indices, size, what):
    bad = [i for i in indices if not 0 <= i < size]
    if bad:
        raise VocabularyError(f"{what} vocabulary has indices outside 0..{size - 1}: {bad[:5]}")


class Es2EnTranslator:
    """
    Spanish -> English translator around a pretrained encoder/decoder pair.

    The vocabularies and models are fixed after construction; every call to
    `translate` builds its own input buffer and decoder state.
    """

    def __init__(self, es_char_to_int, int_to_en_char, encoder, decoder,
                 *, max_length=MAX_OUT_SEQUENCE_LENGTH, device="cpu"):
        self.es_char_to_int = es_char_to_int
        self.int_to_en_char = int_to_en_char
        self.encoder = encoder
        self.decoder = decoder
        self.max_length = max_length
        self.device = device
        _check_indices(es_char_to_int.values(), self.source_vocab_size, "source")
        _check_indices(int_to_en_char.keys(), self.target_vocab_size, "target")

    @property
    def source_vocab_size(self) -> int:
        return len(self.es_char_to_int)

    @property
    def target_vocab_size(self) -> int:
        return len(self.int_to_en_char)

    def encoder_input(self, text: str):
        """
        One-hot encode `text` as a (len, 1, source_vocab_size) float32 array.

        Characters missing from the source vocabulary are dropped; returns
        None if nothing is left.
        """
        cleaned = [c for c in text if c in self.es_char_to_int]
        if not cleaned:
            return None
        encoder_in = np.zeros((len(cleaned), 1, self.source_vocab_size), dtype=np.float32)
        for i, c in enumerate(cleaned):
            encoder_in[i, 0, self.es_char_to_int[c]] = 1
        return encoder_in

    def translate(self, text: str):
        """Translate `text`; None if it has no translatable characters."""
        encoder_in = self.encoder_input(text)
        if encoder_in is None:
            return None

        translated = []
        with torch.no_grad():
            h, c = self.encoder(torch.from_numpy(encoder_in).to(self.device))
            encoded_char = np.zeros(self.target_vocab_size, dtype=np.float32)
            decoded_index = START_TOKEN_INDEX
            for _ in range(self.max_length):
                encoded_char[decoded_index] = 1
                probs, h_out, c_out = self.decoder(torch.from_numpy(encoded_char).to(self.device), h, c)
                encoded_char[decoded_index] = 0
                # ties go to the lowest index
                decoded_index = int(np.argmax(probs.detach().cpu().numpy()))
                if decoded_index == STOP_TOKEN_INDEX:
                    break
                try:
                    translated.append(self.int_to_en_char[decoded_index])
                except KeyError as e:
                    raise VocabularyError(f"decoder produced unknown character index {decoded_index}") from e
                h, c = h_out, c_out
        return "".join(translated)

    def translate_sentences(self, text: str, *, nlp=None):
        """Split `text` into sentences and translate each one."""
        return [self.translate(s) for s in get_sentences(text, language="es", nlp=nlp)]

    @classmethod
    def from_directory(cls, model_dir, *, device="cpu"):
        """
        Load vocabularies and model weights from `model_dir`.

        Expected files: esCharToInt.json, intToEnChar.json,
        es2en_char_encoder.pt, es2en_char_decoder.pt (torch state_dicts).
        """
        model_dir = Path(model_dir)
        paths = [model_dir / n for n in (ES_CHAR_TO_INT_FILE, INT_TO_EN_CHAR_FILE, ENCODER_FILE, DECODER_FILE)]
        missing = [p.name for p in paths if not p.is_file()]
        if missing:
            raise ModelLoadError(f"Translator files missing from {model_dir}: {', '.join(missing)}")

        es_path, en_path, enc_path, dec_path = paths
        es_char_to_int = load_char_to_int(es_path)
        int_to_en_char = load_int_to_char(en_path)
        try:
            encoder = encoder_from_state_dict(torch.load(enc_path, map_location=device, weights_only=True))
            decoder = decoder_from_state_dict(torch.load(dec_path, map_location=device, weights_only=True))
        except (OSError, RuntimeError, KeyError, EOFError, pickle.UnpicklingError) as e:
            raise ModelLoadError(f"Translator weights in {model_dir} could not be loaded: {e}") from e

        if encoder.vocab_size != len(es_char_to_int):
            raise VocabularyError(
                f"encoder expects {encoder.vocab_size} source characters, vocabulary has {len(es_char_to_int)}")
        if decoder.vocab_size != len(int_to_en_char):
            raise VocabularyError(
                f"decoder expects {decoder.vocab_size} target characters, vocabulary has {len(int_to_en_char)}")
        if encoder.hidden_size != decoder.hidden_size:
            raise ModelLoadError(
                f"encoder/decoder hidden sizes differ ({encoder.hidden_size} vs {decoder.hidden_size})")

        logger.info("Loaded Es->En translator from %s (hidden=%d)", model_dir, encoder.hidden_size)
        return cls(es_char_to_int, int_to_en_char, encoder.to(device), decoder.to(device), device=device)


@lru_cache(maxsize=None)
def _translator_for(model_dir: str, device: str) -> Es2EnTranslator:
    return Es2EnTranslator.from_directory(model_dir, device=device)


def get_translator(model_dir=None) -> Es2EnTranslator:
    """Process-wide translator for `model_dir` (default: configured model dir)."""
    settings = get_settings()
    return _translator_for(str(model_dir or settings.model_dir), settings.device)


def spanish_to_english(text: str, model_dir=None):
    """Translate Spanish `text` to English with the default translator."""
    return get_translator(model_dir).translate(text)
