"""Tests for nlp_helper.nlp.tagging -- names, search terms and sentences."""

import pytest

from nlp_helper.nlp import tagging
from nlp_helper.nlp.tagging import get_people_names, get_search_terms, get_sentences
from nlp_helper.shared.errors import ModelLoadError


# ===================================================================
# get_people_names
# ===================================================================

class TestPeopleNames:

    def test_names_in_document_order(self, blank_nlp):
        names = get_people_names("Ada Lovelace met Charles in London.", nlp=blank_nlp)
        assert names == ["Ada Lovelace", "Charles"]

    def test_block_called_per_name(self, blank_nlp):
        seen = []
        names = get_people_names("Charles wrote to Ada Lovelace.", seen.append, nlp=blank_nlp)
        assert seen == ["Charles", "Ada Lovelace"]
        assert seen == names

    def test_places_are_not_people(self, blank_nlp):
        assert get_people_names("London is large.", nlp=blank_nlp) == []

    def test_empty_text(self, blank_nlp):
        assert get_people_names("", nlp=blank_nlp) == []


# ===================================================================
# get_search_terms
# ===================================================================

class TestSearchTerms:

    def test_lemma_then_token_when_different(self, blank_nlp):
        terms = get_search_terms("The mice were running!", nlp=blank_nlp)
        assert terms == ["the", "mouse", "mice", "were", "run", "running"]

    def test_token_once_when_equal_to_lemma(self, blank_nlp):
        assert get_search_terms("Dog", nlp=blank_nlp) == ["dog"]

    def test_punctuation_and_symbols_are_omitted(self, blank_nlp):
        terms = get_search_terms("I ♥ 3 dog , really ...", nlp=blank_nlp)
        assert terms == ["i", "3", "dog", "really"]

    def test_names_are_joined(self, blank_nlp):
        terms = get_search_terms("Ada Lovelace went home", nlp=blank_nlp)
        assert terms == ["ada lovelace", "go", "went", "home"]

    def test_duplicates_are_kept(self, blank_nlp):
        assert get_search_terms("dog dog", nlp=blank_nlp) == ["dog", "dog"]

    def test_block_receives_every_term(self, blank_nlp):
        seen = []
        terms = get_search_terms("mice", block=seen.append, nlp=blank_nlp)
        assert seen == terms == ["mouse", "mice"]

    def test_language_selects_pipeline(self, blank_nlp, monkeypatch):
        asked = []

        def fake_get_nlp(language=None):
            asked.append(language)
            return blank_nlp

        monkeypatch.setattr(tagging, "get_nlp", fake_get_nlp)
        get_search_terms("dog", language="es")
        assert asked == ["es"]


# ===================================================================
# get_sentences
# ===================================================================

class TestSentences:

    def test_splits_sentences(self, blank_nlp):
        text = "It rained all day. We stayed in! Then we left."
        assert get_sentences(text, nlp=blank_nlp) == [
            "It rained all day.",
            "We stayed in!",
            "Then we left.",
        ]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank_text_has_no_sentences(self, blank_nlp, text):
        assert get_sentences(text, nlp=blank_nlp) == []

    def test_falls_back_to_nltk_without_spacy(self, monkeypatch):
        def no_spacy(language=None):
            raise ModelLoadError("no pipeline")

        monkeypatch.setattr(tagging, "get_nlp", no_spacy)
        monkeypatch.setattr(tagging, "ensure_nltk", lambda *pkgs: None)
        monkeypatch.setattr(tagging, "sent_tokenize", lambda text, language="english": ["One. ", " ", "Two."])
        assert get_sentences("One. Two.") == ["One.", "Two."]

    @pytest.mark.parametrize("language, punkt", [(None, "english"), ("es", "spanish"), ("pt-BR", "portuguese"), ("tlh", "english")])
    def test_nltk_fallback_uses_language_model(self, monkeypatch, language, punkt):
        asked = []

        def no_spacy(language=None):
            raise ModelLoadError("no pipeline")

        def fake_tokenize(text, language="english"):
            asked.append(language)
            return [text]

        monkeypatch.setattr(tagging, "get_nlp", no_spacy)
        monkeypatch.setattr(tagging, "ensure_nltk", lambda *pkgs: None)
        monkeypatch.setattr(tagging, "sent_tokenize", fake_tokenize)
        get_sentences("Hola. Adios.", language=language)
        assert asked == [punkt]
