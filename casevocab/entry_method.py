"""How a person travelled into Beijing.

Labels match the column values used by spreadsheet imports, so they must
not be reworded without migrating existing case data.
"""

from casevocab.base import Vocabulary, vocabulary


@vocabulary
class EntryMethod(Vocabulary):
    """Long-distance travel method used to reach Beijing."""

    SELF_DRIVING = "自驾车"
    TRAIN = "火车"
    HIGH_SPEED_RAIL = "高铁"
    AIRPLANE = "飞机"
    LONG_DISTANCE_BUS = "长途汽车"
    OTHER = "其他"
