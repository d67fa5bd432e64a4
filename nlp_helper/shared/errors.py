"""Exception types raised by nlp_helper."""


class NLPHelperError(RuntimeError):
    """Base class for every error raised by this package."""


class ModelLoadError(NLPHelperError):
    """A pipeline, classifier or translator artifact could not be loaded."""


class VocabularyError(NLPHelperError, KeyError):
    """A character index or vocabulary file does not match the model."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message instead
        return RuntimeError.__str__(self)
