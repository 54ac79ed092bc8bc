"""Daily transport method while in Beijing."""

from casevocab.base import Vocabulary, vocabulary


@vocabulary
class TransportMethod(Vocabulary):
    """Local transport used within the city.

    ``SELF_DRIVING`` is labelled "自驾", distinct from the entry method
    label "自驾车"; the two vocabularies are independent.
    """

    SUBWAY = "地铁"
    BUS = "公交"
    TAXI = "出租车"
    RIDE_HAILING = "网约车"
    WALKING = "步行"
    SELF_DRIVING = "自驾"
    OTHER = "其他"
