"""Lookup of vocabularies by name and a plain-data catalog of all of them.

Every ``@vocabulary`` class registers itself under its class name when it is
defined. Importing this module imports the six case vocabularies, so the
registry is complete once ``casevocab`` is imported.
"""

import logging

from casevocab import (  # noqa: F401  (imported for registration)
    education,
    entry_method,
    gender,
    marital_status,
    risk_level,
    transport_method,
)
from casevocab.base import _REGISTRY, RankedVocabulary, Vocabulary
from casevocab.config import DISPLAY_LOCALE

logger = logging.getLogger(__name__)


class UnknownVocabularyError(KeyError):
    """Raised when a vocabulary name is not registered.

    Attributes:
        name: The name that was looked up.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown vocabulary '{name}'. Must be one of: {vocabulary_names()}"
        )


def vocabulary_names() -> list[str]:
    """Registered vocabulary names, sorted."""
    return sorted(_REGISTRY)


def get_vocabulary(name: str) -> type[Vocabulary]:
    """Return the vocabulary class registered as ``name``.

    Raises:
        UnknownVocabularyError: If no vocabulary has that name.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownVocabularyError(name) from None


def _entries(vocab: type[Vocabulary]) -> list[dict]:
    entries = []
    for code in vocab:
        entry = {"code": code.name, "label": code.label}
        if issubclass(vocab, RankedVocabulary):
            entry["rank"] = code.rank
        entries.append(entry)
    return entries


def catalog() -> dict:
    """Snapshot every registered vocabulary as plain dicts and lists.

    Returns:
        ``{"locale": "zh-CN", "vocabularies": {name: [entry, ...]}}`` where
        each entry is ``{"code", "label"}`` plus ``"rank"`` for ranked
        vocabularies. Entries keep declaration order.
    """
    vocabularies = {name: _entries(_REGISTRY[name]) for name in vocabulary_names()}
    logger.debug("Built catalog of %d vocabularies", len(vocabularies))
    return {"locale": DISPLAY_LOCALE, "vocabularies": vocabularies}
