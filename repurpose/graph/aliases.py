from __future__ import annotations
from typing import Optional, Sequence
from repurpose.types import Record

# Header synonyms, first match wins
COMPOUND_ALIASES = ("compound_id", "source", "drug", "compound")
PROTEIN_ALIASES = ("protein_id", "target", "protein")
FEATURE_ID_ALIASES = ("compound_id", "id")


def resolve(record: Record, aliases: Sequence[str]) -> Optional[str]:
    """Return the first non-empty value among ``aliases``, or None."""
    for key in aliases:
        value = record.get(key)
        if value: return value
    return None


def has_any(record: Record, aliases: Sequence[str]) -> bool:
    return any(key in record for key in aliases)
