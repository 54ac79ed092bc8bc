"""Shared code/label mechanism for every controlled vocabulary.

A vocabulary is an ``enum.Enum`` subclass of ``Vocabulary`` (or
``RankedVocabulary`` when its codes carry a severity order) decorated with
``@vocabulary``. The decorator validates the table once, at class definition,
and precomputes the label -> code map used by ``from_label``.

Usage:
    @vocabulary
    class Gender(Vocabulary):
        MALE = "男"
        FEMALE = "女"

    Gender.label_of(Gender.MALE)      # "男"
    Gender.from_label("女")            # Gender.FEMALE
    Gender.from_label("other")        # None
    str(Gender.MALE)                  # "男"

Ranked members declare ``(label, rank)`` tuples. Ranks are explicit so that
reordering declarations cannot change comparison results.

``label`` and ``rank`` are read-only properties over the enum value, so a
code can never be relabeled or re-ranked after definition.
"""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Populated by @vocabulary; read through casevocab.registry.
_REGISTRY: dict[str, type[Vocabulary]] = {}


class VocabularyDefinitionError(ValueError):
    """Raised when a vocabulary table violates its invariants.

    Attributes:
        vocabulary_name: Class name of the offending vocabulary.
        reason: Human-readable description of the violation.
    """

    def __init__(self, vocabulary_name: str, reason: str):
        self.vocabulary_name = vocabulary_name
        self.reason = reason
        super().__init__(f"Invalid vocabulary '{vocabulary_name}': {reason}")


class Comparison(enum.IntEnum):
    """Outcome of comparing two ranked codes."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Vocabulary(enum.Enum):
    """Closed set of codes, each with a unique display label.

    The enum value of a plain vocabulary member is its label. ``@vocabulary``
    attaches the read-only ``_by_label`` index used by ``from_label``.
    """

    @property
    def label(self) -> str:
        """Display label of this code."""
        return self._value_

    def __str__(self) -> str:
        return self.label

    @classmethod
    def _check_member(cls, code: object) -> None:
        if not isinstance(code, cls):
            raise TypeError(f"{code!r} is not a {cls.__name__} code")

    @classmethod
    def label_of(cls, code: Vocabulary) -> str:
        """Return the display label of a declared code.

        Args:
            code: A member of this vocabulary.

        Returns:
            The declared label, never empty.

        Raises:
            TypeError: If ``code`` is not a member of this vocabulary.
        """
        cls._check_member(code)
        return code.label

    @classmethod
    def from_label(cls, label: str | None) -> Vocabulary | None:
        """Return the code whose label equals ``label`` exactly.

        Matching is case-sensitive with no trimming. This never raises.

        Args:
            label: Text to look up. ``None`` and non-string values are
                accepted and treated as unrecognized.

        Returns:
            The matching code, or None when nothing matches.
        """
        if not isinstance(label, str):
            return None
        return cls._by_label.get(label)

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        """Labels in declaration order."""
        return tuple(member.label for member in cls)


class RankedVocabulary(Vocabulary):
    """Vocabulary whose codes form a total order by an explicit rank.

    The enum value of a ranked member is its ``(label, rank)`` tuple.
    """

    @property
    def label(self) -> str:
        """Display label of this code."""
        return self._value_[0]

    @property
    def rank(self) -> int:
        """Severity rank of this code; 0 is the lowest."""
        return self._value_[1]

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.rank < other.rank
        return NotImplemented

    def __le__(self, other):
        if self.__class__ is other.__class__:
            return self.rank <= other.rank
        return NotImplemented

    def __gt__(self, other):
        if self.__class__ is other.__class__:
            return self.rank > other.rank
        return NotImplemented

    def __ge__(self, other):
        if self.__class__ is other.__class__:
            return self.rank >= other.rank
        return NotImplemented

    @classmethod
    def rank_of(cls, code: RankedVocabulary) -> int:
        """Return the explicit rank of a declared code.

        Raises:
            TypeError: If ``code`` is not a member of this vocabulary.
        """
        cls._check_member(code)
        return code.rank

    @classmethod
    def compare(cls, a: RankedVocabulary, b: RankedVocabulary) -> Comparison:
        """Compare two codes by rank.

        Args:
            a: Left-hand code.
            b: Right-hand code.

        Returns:
            LESS, EQUAL or GREATER, with the sign of ``rank(a) - rank(b)``.
        """
        rank_a = cls.rank_of(a)
        rank_b = cls.rank_of(b)
        if rank_a < rank_b:
            return Comparison.LESS
        if rank_a > rank_b:
            return Comparison.GREATER
        return Comparison.EQUAL

    @classmethod
    def by_rank(cls) -> tuple[RankedVocabulary, ...]:
        """Members ordered from lowest to highest rank."""
        return tuple(sorted(cls, key=lambda member: member.rank))

    def is_at_least(self, threshold: RankedVocabulary) -> bool:
        """Whether this code ranks at or above ``threshold``."""
        return self.rank_of(self) >= self.rank_of(threshold)


def _check_ranks(cls: type[RankedVocabulary]) -> None:
    ranks = []
    for member in cls:
        if not isinstance(member._value_, tuple) or len(member._value_) != 2:
            raise VocabularyDefinitionError(
                cls.__name__, f"{member.name} must declare a (label, rank) pair"
            )
        if isinstance(member.rank, bool) or not isinstance(member.rank, int):
            raise VocabularyDefinitionError(
                cls.__name__, f"rank of {member.name} must be an int, got {member.rank!r}"
            )
        ranks.append(member.rank)
    if sorted(ranks) != list(range(len(ranks))):
        raise VocabularyDefinitionError(
            cls.__name__, f"ranks must be a dense 0-based sequence, got {sorted(ranks)}"
        )


def vocabulary(cls: type[Vocabulary]) -> type[Vocabulary]:
    """Validate a vocabulary table, index its labels, and register it.

    Args:
        cls: The ``Vocabulary`` subclass being defined.

    Returns:
        ``cls`` itself, with its label index attached.

    Raises:
        VocabularyDefinitionError: On an empty or non-string label, a label
            shared by two codes, ranks that are not a dense 0-based sequence
            of ints, or a vocabulary name that is already registered.
    """
    if not (isinstance(cls, type) and issubclass(cls, Vocabulary)):
        raise TypeError(f"@vocabulary requires a Vocabulary subclass, got {cls!r}")
    if cls.__name__ in _REGISTRY:
        raise VocabularyDefinitionError(cls.__name__, "name is already registered")

    # A repeated enum value becomes an alias rather than a new member.
    aliases = [name for name, member in cls.__members__.items() if member.name != name]
    if aliases:
        raise VocabularyDefinitionError(
            cls.__name__, f"duplicate entries for {', '.join(aliases)}"
        )
    if not len(cls):
        raise VocabularyDefinitionError(cls.__name__, "no codes declared")

    # Shape and ranks first, so a malformed ranked member fails with a
    # definition error rather than an IndexError from its label.
    if issubclass(cls, RankedVocabulary):
        _check_ranks(cls)

    by_label = {}
    for member in cls:
        if not isinstance(member.label, str) or not member.label:
            raise VocabularyDefinitionError(
                cls.__name__, f"label of {member.name} must be a non-empty string"
            )
        if member.label in by_label:
            raise VocabularyDefinitionError(
                cls.__name__,
                f"label '{member.label}' shared by {by_label[member.label].name} "
                f"and {member.name}",
            )
        by_label[member.label] = member

    cls._by_label = MappingProxyType(by_label)
    _REGISTRY[cls.__name__] = cls
    logger.debug("Registered vocabulary %s with %d codes", cls.__name__, len(by_label))
    return cls
