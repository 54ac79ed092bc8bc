"""Pydantic v2 field types for vocabulary codes.

Record models declare vocabulary fields with these annotated types instead
of hand-written validators. A field accepts a code or its exact label and
serializes back to the label.

Usage:
    class PersonalInfo(BaseModel):
        gender: GenderField
        education: EducationField | None = None

    PersonalInfo(gender="女").gender          # Gender.FEMALE
    PersonalInfo(gender=Gender.MALE).model_dump()  # {"gender": "男", ...}
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

from casevocab.base import Vocabulary
from casevocab.education import Education
from casevocab.entry_method import EntryMethod
from casevocab.gender import Gender
from casevocab.marital_status import MaritalStatus
from casevocab.risk_level import RiskLevel
from casevocab.transport_method import TransportMethod


def vocabulary_field(vocab: type[Vocabulary]) -> Any:
    """Build an annotated pydantic type for codes of ``vocab``.

    Args:
        vocab: Vocabulary class the field holds codes of.

    Returns:
        ``Annotated[vocab, ...]`` that validates codes or exact labels,
        serializes to the label, and publishes a JSON schema listing the
        labels (the enum values of ranked vocabularies are not labels).
    """

    def coerce(value: Any) -> Vocabulary:
        if isinstance(value, vocab):
            return value
        code = vocab.from_label(value)
        if code is None:
            raise ValueError(
                f"Invalid {vocab.__name__} label {value!r}. "
                f"Must be one of: {list(vocab.labels())}"
            )
        return code

    return Annotated[
        vocab,
        BeforeValidator(coerce),
        PlainSerializer(lambda code: code.label, return_type=str),
        WithJsonSchema({"type": "string", "enum": list(vocab.labels())}),
    ]


EducationField = vocabulary_field(Education)
EntryMethodField = vocabulary_field(EntryMethod)
GenderField = vocabulary_field(Gender)
MaritalStatusField = vocabulary_field(MaritalStatus)
RiskLevelField = vocabulary_field(RiskLevel)
TransportMethodField = vocabulary_field(TransportMethod)
