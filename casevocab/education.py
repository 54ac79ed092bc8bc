"""Highest completed education level."""

from casevocab.base import Vocabulary, vocabulary


@vocabulary
class Education(Vocabulary):
    """Education levels, from primary school up to doctorate.

    Declaration order follows the usual progression of the Chinese school
    system and is the order choice lists are shown in. It carries no
    comparison semantics; ``Education`` is not a ranked vocabulary.
    """

    PRIMARY_SCHOOL = "小学"
    JUNIOR_HIGH = "初中"
    SENIOR_HIGH = "高中"
    TECHNICAL_SECONDARY = "中专"  # vocational, parallel to senior high
    JUNIOR_COLLEGE = "大专"
    BACHELOR = "本科"
    MASTER = "硕士"
    DOCTOR = "博士"
    OTHER = "其他"
