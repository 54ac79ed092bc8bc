"""Static configuration for the case vocabularies.

Module-level constants only. Nothing here is read from the environment;
the vocabulary tables themselves are compiled-in configuration.
"""

DISPLAY_LOCALE: str = "zh-CN"
"""Locale of every vocabulary label (Simplified Chinese)."""

HIGH_RISK_THRESHOLD_RANK: int = 2
"""Risk rank at or above which a person counts as high risk (HIGH, CRITICAL)."""
