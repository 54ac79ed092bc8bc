"""Per-code counts over a collection of codes, for statistics pages."""

from __future__ import annotations

from collections.abc import Iterable

from casevocab.base import Vocabulary


def distribution(
    vocab: type[Vocabulary],
    codes: Iterable[Vocabulary | None],
) -> dict[Vocabulary, int]:
    """Count how often each code of ``vocab`` occurs in ``codes``.

    Every code of the vocabulary is present in the result, in declaration
    order, with zero when absent. ``None`` entries (unset fields) are skipped.

    Args:
        vocab: Vocabulary class whose codes are counted.
        codes: Codes to count, possibly containing None.

    Returns:
        Mapping of every code of ``vocab`` to its count.

    Raises:
        TypeError: If ``codes`` contains a value that is not a ``vocab`` code.
    """
    counts = {code: 0 for code in vocab}
    for code in codes:
        if code is None:
            continue
        if not isinstance(code, vocab):
            raise TypeError(f"{code!r} is not a {vocab.__name__} code")
        counts[code] += 1
    return counts
