"""Gender of a person on file."""

from casevocab.base import Vocabulary, vocabulary


@vocabulary
class Gender(Vocabulary):
    """Gender options shown on intake forms."""

    MALE = "男"
    FEMALE = "女"
