"""Controlled vocabularies for case records.

Six closed code sets, each mapping symbolic codes to zh-CN display labels
with exact reverse lookup:

- Education: highest completed education level
- Gender
- MaritalStatus
- EntryMethod: travel method used to reach Beijing
- TransportMethod: daily transport within Beijing
- RiskLevel: assessed risk, ranked LOW < MEDIUM < HIGH < CRITICAL

Lookups by code never fail; lookups by label return None when nothing
matches. All tables are immutable and safe to share across threads.
"""

from casevocab.base import (
    Comparison,
    RankedVocabulary,
    Vocabulary,
    VocabularyDefinitionError,
    vocabulary,
)
from casevocab.distribution import distribution
from casevocab.education import Education
from casevocab.entry_method import EntryMethod
from casevocab.gender import Gender
from casevocab.marital_status import MaritalStatus
from casevocab.parsing import parse_label
from casevocab.registry import (
    UnknownVocabularyError,
    catalog,
    get_vocabulary,
    vocabulary_names,
)
from casevocab.risk_level import RISK_LEVEL_DESCRIPTIONS, RiskLevel
from casevocab.transport_method import TransportMethod

__all__ = [
    # Mechanism (base.py)
    "Comparison",
    "RankedVocabulary",
    "Vocabulary",
    "VocabularyDefinitionError",
    "vocabulary",
    # Vocabularies
    "Education",
    "EntryMethod",
    "Gender",
    "MaritalStatus",
    "RiskLevel",
    "RISK_LEVEL_DESCRIPTIONS",
    "TransportMethod",
    # Helpers
    "UnknownVocabularyError",
    "catalog",
    "distribution",
    "get_vocabulary",
    "parse_label",
    "vocabulary_names",
]
