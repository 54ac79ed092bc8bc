"""Marital status of a person on file."""

from casevocab.base import Vocabulary, vocabulary


@vocabulary
class MaritalStatus(Vocabulary):
    """Marital status options shown on intake forms."""

    UNMARRIED = "未婚"
    MARRIED = "已婚"
    DIVORCED = "离异"
    WIDOWED = "丧偶"
