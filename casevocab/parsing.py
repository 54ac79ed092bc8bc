"""Label parsing for externally sourced text (spreadsheet imports, legacy data).

``Vocabulary.from_label`` is exact. Imported cells routinely carry stray
whitespace or are blank, so ``parse_label`` applies the import policy:
blank means "use the default", surrounding whitespace is ignored, and
anything else unrecognized is reported as None with a warning.
"""

from __future__ import annotations

import logging

from casevocab.base import Vocabulary

logger = logging.getLogger(__name__)


def parse_label(
    vocab: type[Vocabulary],
    raw: str | None,
    *,
    default: Vocabulary | None = None,
) -> Vocabulary | None:
    """Parse one imported cell into a code of ``vocab``.

    Args:
        vocab: Vocabulary class to parse into.
        raw: Cell text, or None for an empty cell.
        default: Returned for a missing or blank cell. Import of risk levels
            passes ``RiskLevel.LOW`` here.

    Returns:
        The matching code, ``default`` for a blank cell, or None when the
        text matches no label.
    """
    if raw is None or not str(raw).strip():
        logger.debug("Blank %s cell, using default %s", vocab.__name__, default)
        return default

    code = vocab.from_label(str(raw).strip())
    if code is None:
        logger.warning(
            "Unrecognized %s label %r. Expected one of: %s",
            vocab.__name__, raw, ", ".join(vocab.labels()),
        )
    return code
